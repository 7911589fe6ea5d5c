"""Command line entrypoint: plan or render a resume document.

Usage::

    python -m resume_pages resume.json -o resume.pdf --paper letter
    python -m resume_pages resume.json --plan
    python -m resume_pages --sample --plan
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional

from loguru import logger

from .config import DEFAULT_PAPER_SIZE, LOG_LEVEL, MAX_BODY_BYTES, MAX_PAGES
from .exceptions import ConfigError, DependencyError
from .logger import setup_logging
from .models import sample_document
from .pagination import plan_document
from .profiles import CapacityProfile, PaperSize, profiles_from_dict
from .validation import EXIT_INVALID_INPUT, validate_resume_payload


def load_render_plan():
    try:
        from .rendering import render_plan
    except ModuleNotFoundError as exc:
        if exc.name == "fpdf":
            raise DependencyError(
                "Missing dependency 'fpdf2'. Install project dependencies with 'pip install -e .'."
            ) from exc
        raise
    return render_plan


def load_capacities(path: str) -> Dict[PaperSize, CapacityProfile]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Capacity file {path} is not valid JSON: {exc.msg}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read capacity file {path}: {exc.strerror}") from exc
    return profiles_from_dict(raw)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-pages",
        description="Paginate a resume document and render it to PDF.",
    )
    parser.add_argument("input", nargs="?", help="resume JSON file, or '-' for stdin")
    parser.add_argument("-o", "--output", default="resume.pdf", help="PDF output path")
    parser.add_argument(
        "--paper",
        default=DEFAULT_PAPER_SIZE,
        help="paper size: " + ", ".join(size.value for size in PaperSize),
    )
    parser.add_argument("--capacities", help="JSON file overriding per-paper capacities")
    parser.add_argument("--plan", action="store_true", help="print the page plan as JSON instead of rendering")
    parser.add_argument("--sample", action="store_true", help="use the built-in sample resume")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="loguru level for stderr output")
    return parser


def read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as handle:
        return handle.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.sample and not args.input:
        parser.error("an input file is required unless --sample is given")

    try:
        paper_size = PaperSize.parse(args.paper)
        profiles = load_capacities(args.capacities) if args.capacities else None
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.sample:
        document = sample_document()
    else:
        try:
            body = read_input(args.input)
        except OSError as exc:
            print(f"Cannot read {args.input}: {exc.strerror}", file=sys.stderr)
            return EXIT_INVALID_INPUT

        document, error = validate_resume_payload(
            body,
            MAX_PAGES,
            paper_size=paper_size,
            profiles=profiles,
            max_body_bytes=MAX_BODY_BYTES,
        )
        if error is not None:
            status, detail = error
            print(json.dumps(detail), file=sys.stderr)
            return status

    plan = plan_document(document, paper_size, profiles)
    if args.plan:
        print(json.dumps(plan.to_dict(), indent=2))
        return 0

    try:
        render_plan = load_render_plan()
    except DependencyError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    pdf_bytes = render_plan(plan)
    with open(args.output, "wb") as handle:
        handle.write(pdf_bytes)
    logger.info(f"Wrote {plan.total_pages} page(s) to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
