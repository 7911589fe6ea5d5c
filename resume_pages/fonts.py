"""Font discovery and text rendering helpers."""

from __future__ import annotations

import os
from typing import List, Optional, Tuple

from fpdf import FPDF
from loguru import logger

from .formatting import latin1_safe

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def find_font_path(env_var: str, candidates: List[str]) -> Optional[str]:
    override = os.getenv(env_var)
    if override and os.path.exists(override):
        return override

    for path in candidates:
        if os.path.exists(path):
            return path
    return None


class FontManager:
    FAMILY = "ResumeFont"
    CORE_FAMILY = "helvetica"
    BUNDLED_REGULAR = os.path.join(_PROJECT_ROOT, "fonts", "DejaVuSans.ttf")
    BUNDLED_BOLD = os.path.join(_PROJECT_ROOT, "fonts", "DejaVuSans-Bold.ttf")
    SYSTEM_REGULAR_CANDIDATES = [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
        "/Library/Fonts/DejaVuSans.ttf",
    ]
    SYSTEM_BOLD_CANDIDATES = [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/Library/Fonts/DejaVuSans-Bold.ttf",
    ]

    def __init__(self, pdf: FPDF) -> None:
        self.pdf = pdf
        self.family = self.FAMILY
        self.has_bold = False
        self.unicode = True

        regular_path = find_font_path(
            "RESUME_FONT_PATH",
            [self.BUNDLED_REGULAR, *self.SYSTEM_REGULAR_CANDIDATES],
        )
        if not regular_path:
            # Core fonts only cover Latin-1; text is downgraded in clean().
            logger.warning("Unicode font not found; falling back to Helvetica. Set RESUME_FONT_PATH.")
            self.family = self.CORE_FAMILY
            self.has_bold = True
            self.unicode = False
            return

        bold_path = find_font_path(
            "RESUME_FONT_BOLD_PATH",
            [self.BUNDLED_BOLD, *self.SYSTEM_BOLD_CANDIDATES],
        )

        self.pdf.add_font(self.FAMILY, "", regular_path)
        if bold_path:
            self.pdf.add_font(self.FAMILY, "B", bold_path)
            self.has_bold = True

    def clean(self, text: str) -> str:
        return text if self.unicode else latin1_safe(text)

    def _select(self, size: float, bold: bool) -> None:
        style = "B" if bold and self.has_bold else ""
        self.pdf.set_font(self.family, style, size)

    def text_width(self, text: str, size: float, bold: bool = False) -> float:
        self._select(size, bold)
        return self.pdf.get_string_width(self.clean(text))

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        size: float,
        color: Tuple[int, int, int],
        bold: bool = False,
    ) -> None:
        if not text:
            return
        text = self.clean(text)
        self.pdf.set_text_color(*color)
        self._select(size, bold)
        if bold and not self.has_bold:
            self.pdf.text(x, y, text)
            self.pdf.text(x + 0.15, y, text)
        else:
            self.pdf.text(x, y, text)
