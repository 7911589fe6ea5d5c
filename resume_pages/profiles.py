"""Per-paper-size capacity tables.

Capacities are tuned by hand for the page layout rather than measured from
rendered text. A table is a plain ``{PaperSize: CapacityProfile}`` mapping so
callers can inject their own (see :func:`profiles_from_dict`).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .exceptions import ConfigError


class PaperSize(str, Enum):
    A4 = "a4"
    LETTER = "letter"

    @classmethod
    def parse(cls, value: Any) -> "PaperSize":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ConfigError(f"Unknown paper size {value!r}; expected one of: {choices}.")


@dataclass(frozen=True)
class SectionCapacity:
    experience: int
    education: int
    certificates: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "experience": self.experience,
            "education": self.education,
            "certificates": self.certificates,
        }


@dataclass(frozen=True)
class CapacityProfile:
    paper_size: PaperSize
    first_page: SectionCapacity
    continuation: SectionCapacity
    gallery_per_page: int
    page_width_mm: float
    page_height_mm: float


DEFAULT_PROFILES: Dict[PaperSize, CapacityProfile] = {
    PaperSize.A4: CapacityProfile(
        paper_size=PaperSize.A4,
        first_page=SectionCapacity(experience=4, education=3, certificates=3),
        continuation=SectionCapacity(experience=6, education=5, certificates=5),
        gallery_per_page=6,  # 3 rows of 2
        page_width_mm=210.0,
        page_height_mm=297.0,
    ),
    PaperSize.LETTER: CapacityProfile(
        paper_size=PaperSize.LETTER,
        first_page=SectionCapacity(experience=3, education=2, certificates=2),
        continuation=SectionCapacity(experience=5, education=4, certificates=4),
        gallery_per_page=4,  # 2 rows of 2
        page_width_mm=215.9,
        page_height_mm=279.4,
    ),
}


def get_profile(
    paper_size: Any,
    profiles: Optional[Mapping[PaperSize, CapacityProfile]] = None,
) -> CapacityProfile:
    table = DEFAULT_PROFILES if profiles is None else profiles
    size = PaperSize.parse(paper_size)
    try:
        return table[size]
    except KeyError:
        raise ConfigError(f"No capacity profile configured for paper size '{size.value}'.") from None


def _positive_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"'{field}' must be a positive integer, got {value!r}.")
    return value


def _capacity_from_dict(raw: Any, base: SectionCapacity, field: str) -> SectionCapacity:
    if raw is None:
        return base
    if not isinstance(raw, Mapping):
        raise ConfigError(f"'{field}' must be an object with experience/education/certificates.")
    values = base.as_dict()
    for key, value in raw.items():
        if key not in values:
            raise ConfigError(f"Unknown section '{key}' in '{field}'.")
        values[key] = _positive_int(value, f"{field}.{key}")
    return SectionCapacity(**values)


def profiles_from_dict(raw: Mapping[str, Any]) -> Dict[PaperSize, CapacityProfile]:
    """Build a profile table from a JSON-shaped mapping.

    Keys are paper sizes; each entry may override ``first_page``,
    ``continuation`` (objects keyed by section) and ``gallery_per_page``.
    Anything omitted keeps the default for that paper size, and paper sizes
    absent from ``raw`` keep their default profile.
    """
    if not isinstance(raw, Mapping):
        raise ConfigError("Capacity table must be an object keyed by paper size.")

    table = dict(DEFAULT_PROFILES)
    for key, entry in raw.items():
        size = PaperSize.parse(key)
        if not isinstance(entry, Mapping):
            raise ConfigError(f"Capacity entry for '{size.value}' must be an object.")
        base = DEFAULT_PROFILES[size]
        gallery = entry.get("gallery_per_page")
        table[size] = replace(
            base,
            first_page=_capacity_from_dict(entry.get("first_page"), base.first_page, f"{size.value}.first_page"),
            continuation=_capacity_from_dict(
                entry.get("continuation"), base.continuation, f"{size.value}.continuation"
            ),
            gallery_per_page=(
                base.gallery_per_page
                if gallery is None
                else _positive_int(gallery, f"{size.value}.gallery_per_page")
            ),
        )
    return table
