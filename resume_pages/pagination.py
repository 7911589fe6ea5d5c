"""Page planning for resume documents.

Page 1 holds up to the first-page capacity of each section. Whatever is left
flows onto continuation pages, each carrying one slice of every section that
still has items. The gallery is chunked separately on a fixed grid and placed
after the last continuation page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from .models import Document, GalleryItem
from .profiles import CapacityProfile, PaperSize, get_profile

SECTIONS = ("experience", "education", "certificates")


@dataclass(frozen=True)
class ContinuationPage:
    """Start offsets and visibility flags for one continuation page.

    A visible section renders ``items[start:start + continuation capacity]``.
    """

    experience_start: int
    education_start: int
    certificates_start: int
    show_experience: bool
    show_education: bool
    show_certificates: bool

    def start(self, section: str) -> int:
        return getattr(self, f"{section}_start")

    def shows(self, section: str) -> bool:
        return getattr(self, f"show_{section}")

    def slices(self, document: Document, profile: CapacityProfile) -> Dict[str, Tuple[Any, ...]]:
        capacity = profile.continuation.as_dict()
        result: Dict[str, Tuple[Any, ...]] = {}
        for section in SECTIONS:
            if not self.shows(section):
                result[section] = ()
                continue
            start = self.start(section)
            result[section] = tuple(getattr(document, section)[start : start + capacity[section]])
        return result

    def as_dict(self) -> Dict[str, Any]:
        return {
            "experience_start": self.experience_start,
            "education_start": self.education_start,
            "certificates_start": self.certificates_start,
            "show_experience": self.show_experience,
            "show_education": self.show_education,
            "show_certificates": self.show_certificates,
        }


@dataclass(frozen=True)
class GalleryPage:
    items: Tuple[GalleryItem, ...]

    def __len__(self) -> int:
        return len(self.items)


def _section_lengths(document: Document) -> Dict[str, int]:
    return {section: len(getattr(document, section)) for section in SECTIONS}


def first_page_slices(document: Document, profile: CapacityProfile) -> Dict[str, Tuple[Any, ...]]:
    capacity = profile.first_page.as_dict()
    return {section: tuple(getattr(document, section)[: capacity[section]]) for section in SECTIONS}


def build_continuation_pages(document: Document, profile: CapacityProfile) -> List[ContinuationPage]:
    lengths = _section_lengths(document)
    capacity = profile.continuation.as_dict()
    # Cursors start at the first-page capacity even when a section is shorter;
    # every check below is ``cursor < length`` so an overshoot reads as "done".
    cursors = profile.first_page.as_dict()

    pages: List[ContinuationPage] = []
    while any(cursors[section] < lengths[section] for section in SECTIONS):
        starts = dict(cursors)
        for section in SECTIONS:
            if cursors[section] < lengths[section]:
                cursors[section] = min(cursors[section] + capacity[section], lengths[section])
        pages.append(
            ContinuationPage(
                experience_start=starts["experience"],
                education_start=starts["education"],
                certificates_start=starts["certificates"],
                show_experience=starts["experience"] < lengths["experience"],
                show_education=starts["education"] < lengths["education"],
                show_certificates=starts["certificates"] < lengths["certificates"],
            )
        )
    return pages


def estimate_continuation_pages(document: Document, profile: CapacityProfile) -> int:
    return len(build_continuation_pages(document, profile))


def valid_gallery_items(items: Sequence[GalleryItem]) -> List[GalleryItem]:
    valid = [item for item in items if item.is_valid]
    dropped = len(items) - len(valid)
    if dropped:
        logger.debug(f"Skipping {dropped} gallery item(s) without an image or project name")
    return valid


def paginate_gallery(items: Sequence[GalleryItem], profile: CapacityProfile) -> List[GalleryPage]:
    valid = valid_gallery_items(items)
    per_page = profile.gallery_per_page
    return [GalleryPage(items=tuple(valid[i : i + per_page])) for i in range(0, len(valid), per_page)]


def estimate_page_count(document: Document, profile: CapacityProfile) -> int:
    gallery_pages = len(paginate_gallery(document.gallery, profile))
    return 1 + estimate_continuation_pages(document, profile) + gallery_pages


@dataclass(frozen=True)
class PagePlan:
    """Everything a renderer needs to draw a document, in page order."""

    document: Document
    profile: CapacityProfile
    continuation_pages: Tuple[ContinuationPage, ...]
    gallery_pages: Tuple[GalleryPage, ...]

    @property
    def total_pages(self) -> int:
        return 1 + len(self.continuation_pages) + len(self.gallery_pages)

    def continuation_ordinal(self, index: int) -> int:
        return 2 + index

    def gallery_ordinal(self, index: int) -> int:
        return 2 + len(self.continuation_pages) + index

    def continuation_label(self, index: int) -> Optional[str]:
        if len(self.continuation_pages) > 1:
            return f"Cont. {index + 1}"
        return None

    def gallery_label(self, index: int) -> Optional[str]:
        if len(self.gallery_pages) > 1:
            return f"Portfolio ({index + 1})"
        return None

    def first_page_slices(self) -> Dict[str, Tuple[Any, ...]]:
        return first_page_slices(self.document, self.profile)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "paper_size": self.profile.paper_size.value,
            "page_size_mm": [self.profile.page_width_mm, self.profile.page_height_mm],
            "total_pages": self.total_pages,
            "first_page": {
                section: [item.id for item in items]
                for section, items in self.first_page_slices().items()
            },
            "continuation_pages": [
                {
                    "ordinal": self.continuation_ordinal(i),
                    "label": self.continuation_label(i),
                    **page.as_dict(),
                }
                for i, page in enumerate(self.continuation_pages)
            ],
            "gallery_pages": [
                {
                    "ordinal": self.gallery_ordinal(i),
                    "label": self.gallery_label(i),
                    "items": [item.id for item in page.items],
                }
                for i, page in enumerate(self.gallery_pages)
            ],
        }


def plan_document(
    document: Document,
    paper_size: Any = PaperSize.A4,
    profiles: Optional[Mapping[PaperSize, CapacityProfile]] = None,
) -> PagePlan:
    profile = get_profile(paper_size, profiles)
    plan = PagePlan(
        document=document,
        profile=profile,
        continuation_pages=tuple(build_continuation_pages(document, profile)),
        gallery_pages=tuple(paginate_gallery(document.gallery, profile)),
    )
    logger.debug(
        f"Planned {plan.total_pages} page(s) on {profile.paper_size.value}: "
        f"{len(plan.continuation_pages)} continuation, {len(plan.gallery_pages)} gallery"
    )
    return plan
