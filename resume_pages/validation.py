"""Input validation for resume documents read by the command line tool."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import PayloadError
from .models import Document, document_from_dict
from .pagination import estimate_page_count
from .profiles import CapacityProfile, PaperSize, get_profile

# (exit status, error body)
ValidationError = Tuple[int, Dict[str, Any]]

EXIT_INVALID_INPUT = 2
EXIT_TOO_LARGE = 3


def validate_resume_payload(
    body: bytes,
    max_pages: int,
    paper_size: Any = PaperSize.A4,
    profiles: Optional[Mapping[PaperSize, CapacityProfile]] = None,
    max_body_bytes: Optional[int] = None,
) -> Tuple[Optional[Document], Optional[ValidationError]]:
    if max_body_bytes is not None and len(body) > max_body_bytes:
        return None, (
            EXIT_TOO_LARGE,
            {"error": "payload_too_large", "detail": f"Input exceeds {max_body_bytes} bytes."},
        )

    try:
        payload = json.loads(body.decode("utf-8"))
    except UnicodeDecodeError:
        return None, (
            EXIT_INVALID_INPUT,
            {"error": "invalid_encoding", "detail": "Input must be UTF-8 encoded JSON."},
        )
    except json.JSONDecodeError as exc:
        return None, (
            EXIT_INVALID_INPUT,
            {
                "error": "invalid_json",
                "detail": f"{exc.msg} (line {exc.lineno}, column {exc.colno})",
            },
        )

    if not isinstance(payload, dict):
        return None, (
            EXIT_INVALID_INPUT,
            {"error": "invalid_payload", "detail": "JSON root must be an object."},
        )

    try:
        document = document_from_dict(payload)
    except PayloadError as exc:
        return None, (EXIT_INVALID_INPUT, {"error": "invalid_payload", "detail": str(exc)})

    estimated_pages = estimate_page_count(document, get_profile(paper_size, profiles))
    if estimated_pages > max_pages:
        return None, (
            EXIT_TOO_LARGE,
            {
                "error": "resume_too_large",
                "detail": f"Resume would render {estimated_pages} pages; maximum is {max_pages}.",
                "estimated_pages": estimated_pages,
            },
        )

    return document, None
