"""Resume document model and loading from JSON-shaped payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .exceptions import PayloadError


@dataclass(frozen=True)
class PersonalInfo:
    full_name: str = ""
    tagline: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    location: str = ""
    bio: str = ""
    photo: Optional[str] = None


@dataclass(frozen=True)
class ExperienceItem:
    id: str
    job_title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""


@dataclass(frozen=True)
class EducationItem:
    id: str
    degree: str = ""
    institution: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass(frozen=True)
class CertificateItem:
    id: str
    name: str = ""
    issuer: str = ""
    date: str = ""


@dataclass(frozen=True)
class GalleryItem:
    id: str
    project_name: str = ""
    year: str = ""
    description: str = ""
    image: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return bool(self.image) and bool(self.project_name)


@dataclass(frozen=True)
class Document:
    personal: PersonalInfo = field(default_factory=PersonalInfo)
    experience: Tuple[ExperienceItem, ...] = ()
    education: Tuple[EducationItem, ...] = ()
    certificates: Tuple[CertificateItem, ...] = ()
    hobbies: Tuple[str, ...] = ()
    gallery: Tuple[GalleryItem, ...] = ()


# camelCase keys used by the editor payload, mapped to dataclass fields.
_ALIASES = {
    "fullName": "full_name",
    "jobTitle": "job_title",
    "startDate": "start_date",
    "endDate": "end_date",
    "isCurrent": "is_current",
    "projectName": "project_name",
}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _fields(raw: Any, section: str, index: int) -> Dict[str, Any]:
    if not isinstance(raw, Mapping):
        raise PayloadError(f"'{section}[{index}]' must be an object.")
    return {_ALIASES.get(key, key): value for key, value in raw.items()}


def _section(payload: Mapping[str, Any], *keys: str) -> List[Any]:
    for key in keys:
        if key in payload:
            value = payload[key]
            if value is None:
                return []
            if not isinstance(value, list):
                raise PayloadError(f"'{key}' must be an array.")
            return value
    return []


def _item_id(raw: Dict[str, Any], section: str, index: int) -> str:
    value = raw.get("id")
    if value is None or str(value).strip() == "":
        return f"{section}-{index}"
    return str(value)


def _experience(raw: Any, index: int) -> ExperienceItem:
    data = _fields(raw, "experience", index)
    return ExperienceItem(
        id=_item_id(data, "experience", index),
        job_title=_text(data.get("job_title")),
        company=_text(data.get("company")),
        start_date=_text(data.get("start_date")),
        end_date=_text(data.get("end_date")),
        is_current=data.get("is_current") is True,
        description=_text(data.get("description")),
    )


def _education(raw: Any, index: int) -> EducationItem:
    data = _fields(raw, "education", index)
    return EducationItem(
        id=_item_id(data, "education", index),
        degree=_text(data.get("degree")),
        institution=_text(data.get("institution")),
        start_date=_text(data.get("start_date")),
        end_date=_text(data.get("end_date")),
        description=_text(data.get("description")),
    )


def _certificate(raw: Any, index: int) -> CertificateItem:
    data = _fields(raw, "certificates", index)
    return CertificateItem(
        id=_item_id(data, "certificates", index),
        name=_text(data.get("name")),
        issuer=_text(data.get("issuer")),
        date=_text(data.get("date")),
    )


def _gallery_item(raw: Any, index: int) -> GalleryItem:
    data = _fields(raw, "portfolio", index)
    image = data.get("image")
    return GalleryItem(
        id=_item_id(data, "portfolio", index),
        project_name=_text(data.get("project_name")),
        year=_text(data.get("year")),
        description=_text(data.get("description")),
        image=None if image is None else str(image),
    )


def _hobby(raw: Any) -> str:
    if isinstance(raw, Mapping):
        return _text(raw.get("name"))
    return _text(raw)


def _personal(raw: Any) -> PersonalInfo:
    if raw is None:
        return PersonalInfo()
    if not isinstance(raw, Mapping):
        raise PayloadError("'personal' must be an object.")
    data = {_ALIASES.get(key, key): value for key, value in raw.items()}
    photo = data.get("photo")
    return PersonalInfo(
        full_name=_text(data.get("full_name")),
        tagline=_text(data.get("tagline")),
        email=_text(data.get("email")),
        phone=_text(data.get("phone")),
        website=_text(data.get("website")),
        location=_text(data.get("location")),
        bio=_text(data.get("bio")),
        photo=None if photo is None else str(photo),
    )


def document_from_dict(payload: Mapping[str, Any]) -> Document:
    """Build a :class:`Document` from an editor-style payload.

    Accepts both the editor's camelCase keys and snake_case. The gallery
    section is read from ``portfolio`` (or ``gallery``). Items without an
    ``id`` get ``"<section>-<index>"``.
    """
    if not isinstance(payload, Mapping):
        raise PayloadError("Document root must be an object.")

    return Document(
        personal=_personal(payload.get("personal")),
        experience=tuple(_experience(raw, i) for i, raw in enumerate(_section(payload, "experience"))),
        education=tuple(_education(raw, i) for i, raw in enumerate(_section(payload, "education"))),
        certificates=tuple(
            _certificate(raw, i) for i, raw in enumerate(_section(payload, "certificates"))
        ),
        hobbies=tuple(_hobby(raw) for raw in _section(payload, "hobbies")),
        gallery=tuple(
            _gallery_item(raw, i) for i, raw in enumerate(_section(payload, "portfolio", "gallery"))
        ),
    )


def empty_document() -> Document:
    return Document()


def sample_document() -> Document:
    """Demo resume used by ``--sample`` and the rendering tests."""
    return document_from_dict(
        {
            "personal": {
                "fullName": "Jane Doe",
                "tagline": "Full-Stack Developer | React & Node.js Expert",
                "email": "jane.doe@example.com",
                "phone": "+1 (555) 123-4567",
                "website": "janedoe.dev",
                "location": "San Francisco, CA",
                "bio": (
                    "A passionate developer with 5+ years of experience in building scalable web "
                    "applications. I thrive in collaborative environments and am always eager to "
                    "learn new technologies."
                ),
            },
            "experience": [
                {
                    "jobTitle": "Senior Software Engineer",
                    "company": "Tech Solutions Inc.",
                    "startDate": "2021-01-01",
                    "endDate": "",
                    "isCurrent": True,
                    "description": (
                        "- Led the development of a major feature for a client-facing product.\n"
                        "- Mentored junior developers and conducted code reviews.\n"
                        "- Optimized application performance, reducing page load times by 30%."
                    ),
                },
                {
                    "jobTitle": "Software Engineer",
                    "company": "Innovate Co.",
                    "startDate": "2018-06-01",
                    "endDate": "2020-12-31",
                    "description": (
                        "- Developed and maintained full-stack features for a SaaS platform.\n"
                        "- Wrote unit and integration tests to ensure code quality."
                    ),
                },
            ],
            "education": [
                {
                    "degree": "M.S. in Computer Science",
                    "institution": "Stanford University",
                    "startDate": "2016-09-01",
                    "endDate": "2018-05-31",
                    "description": "Focused on artificial intelligence and machine learning.",
                },
                {
                    "degree": "B.S. in Computer Science",
                    "institution": "University of California, Berkeley",
                    "startDate": "2012-09-01",
                    "endDate": "2016-05-31",
                    "description": "Graduated with honors.",
                },
            ],
            "certificates": [
                {
                    "name": "Certified Kubernetes Administrator (CKA)",
                    "issuer": "Cloud Native Computing Foundation",
                    "date": "2022-03-10",
                }
            ],
            "hobbies": [{"name": "Hiking"}, {"name": "Photography"}, {"name": "Playing the guitar"}],
            "portfolio": [
                {
                    "projectName": "E-Commerce Platform",
                    "year": "2023",
                    "description": "A full-stack e-commerce platform with real-time inventory.",
                    "image": "https://via.placeholder.com/400x300?text=E-Commerce+Platform",
                },
                {
                    "projectName": "Task Management App",
                    "year": "2022",
                    "description": "Collaborative task management with team workspaces.",
                    "image": "https://via.placeholder.com/400x300?text=Task+Management+App",
                },
                {
                    "projectName": "Weather Dashboard",
                    "year": "2022",
                    "description": "Forecast dashboard with interactive maps and alerts.",
                    "image": "https://via.placeholder.com/400x300?text=Weather+Dashboard",
                },
                {
                    "projectName": "Portfolio Website",
                    "year": "2021",
                    "description": "A personal portfolio website showcasing projects and skills.",
                    "image": "https://via.placeholder.com/400x300?text=Portfolio+Website",
                },
            ],
        }
    )
