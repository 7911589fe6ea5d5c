"""Public package API for resume page planning and rendering."""

from __future__ import annotations

from typing import Any

from .models import Document, document_from_dict
from .pagination import (
    PagePlan,
    build_continuation_pages,
    estimate_continuation_pages,
    paginate_gallery,
    plan_document,
)
from .profiles import DEFAULT_PROFILES, CapacityProfile, PaperSize, get_profile


def render_resume(document: Document, paper_size: Any = PaperSize.A4, profiles: Any = None) -> bytes:
    from .rendering import render_resume as _render_resume

    return _render_resume(document, paper_size, profiles)


__all__ = [
    "CapacityProfile",
    "DEFAULT_PROFILES",
    "Document",
    "PagePlan",
    "PaperSize",
    "build_continuation_pages",
    "document_from_dict",
    "estimate_continuation_pages",
    "get_profile",
    "paginate_gallery",
    "plan_document",
    "render_resume",
]
