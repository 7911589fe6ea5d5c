"""Text formatting and drawing helpers for the page renderer."""

from __future__ import annotations

from typing import List, Protocol

from dateutil import parser as dateutil_parser


class TextWidthProvider(Protocol):
    def text_width(self, text: str, size: float, bold: bool = False) -> float:
        ...


def fmt_month(raw: str, empty: str = "Present") -> str:
    """Format a date string as 'Mar 2025'; blank input yields ``empty``."""
    raw = (raw or "").strip()
    if not raw:
        return empty
    try:
        dt = dateutil_parser.parse(raw)
        return dt.strftime("%b %Y")
    except (ValueError, OverflowError):
        return raw


def fmt_period(start: str, end: str, is_current: bool = False) -> str:
    end_text = "Present" if is_current else fmt_month(end)
    return f"{fmt_month(start)} - {end_text}"


def split_lines(text: str) -> List[str]:
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip() != ""]


def bullet_lines(text: str) -> List[str]:
    """Description lines with any leading '- ' marker removed."""
    result = []
    for line in split_lines(text):
        line = line.strip()
        if line.startswith("- "):
            line = line[2:]
        result.append(line)
    return result


def latin1_safe(text: str) -> str:
    return text.encode("latin-1", "replace").decode("latin-1")


def wrap_text(
    fonts_obj: TextWidthProvider,
    text: str,
    max_width: float,
    font_size: float,
    bold: bool = False,
) -> List[str]:
    def line_width(value: str) -> float:
        return fonts_obj.text_width(value, font_size, bold=bold)

    def wrap_paragraph(paragraph: str) -> List[str]:
        words = paragraph.split()
        if not words:
            return [paragraph]

        lines: List[str] = []
        current = ""
        for word in words:
            candidate = word if not current else f"{current} {word}"
            if line_width(candidate) <= max_width:
                current = candidate
                continue

            if current:
                lines.append(current)
                current = word
                continue

            # single word wider than the line: break it by character
            chunk = ""
            for char in word:
                candidate_chunk = chunk + char
                if chunk and line_width(candidate_chunk) > max_width:
                    lines.append(chunk)
                    chunk = char
                else:
                    chunk = candidate_chunk
            current = chunk

        if current:
            lines.append(current)
        return lines

    result: List[str] = []
    for paragraph in text.split("\n"):
        result.extend(wrap_paragraph(paragraph))
    return result if result else [text]
