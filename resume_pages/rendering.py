"""Resume PDF rendering.

The renderer only draws what a :class:`~resume_pages.pagination.PagePlan`
hands it; which items land on which page is decided by the pagination
module. Content that would run past the bottom margin is clipped, matching the
fixed-size page model.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from fpdf import FPDF
from loguru import logger

from .fonts import FontManager
from .formatting import bullet_lines, fmt_month, fmt_period, wrap_text
from .models import CertificateItem, Document, EducationItem, ExperienceItem, GalleryItem
from .pagination import SECTIONS, ContinuationPage, GalleryPage, PagePlan, plan_document
from .pdf_constants import (
    CARD_RADIUS,
    COLOR_ACCENT,
    COLOR_BODY,
    COLOR_MUTED,
    COLOR_PLACEHOLDER,
    COLOR_RULE,
    COLOR_TEXT,
    CONT_CONTENT_START_Y,
    CONTACT_Y,
    CONTENT_START_Y,
    FONT_SIZE_ITEM_TITLE,
    FONT_SIZE_NAME,
    FONT_SIZE_NORMAL,
    FONT_SIZE_PAGE_TITLE,
    FONT_SIZE_SECTION,
    FONT_SIZE_SMALL,
    FOOTER_Y_FROM_BOTTOM,
    GALLERY_COLUMNS,
    GALLERY_GUTTER,
    GALLERY_IMAGE_H,
    GALLERY_ROW_GAP,
    HEADER_RULE_Y,
    ITEM_GAP,
    LINE_SPACING,
    MARGIN_BOTTOM,
    MARGIN_X,
    NAME_Y,
    PAGE_TITLE_RULE_Y,
    PAGE_TITLE_Y,
    PT_TO_MM,
    SECTION_GAP,
    SECTION_RULE_GAP,
    TAGLINE_Y,
)
from .profiles import CapacityProfile, PaperSize

SECTION_TITLES = {
    "experience": "Experience",
    "education": "Education",
    "certificates": "Certificates",
}


def line_height(size: float) -> float:
    return size * PT_TO_MM * LINE_SPACING


class ResumeRenderer:
    def __init__(self, plan: PagePlan) -> None:
        self.plan = plan
        self.document = plan.document
        self.page_w = plan.profile.page_width_mm
        self.page_h = plan.profile.page_height_mm
        self.content_w = self.page_w - 2 * MARGIN_X
        self.bottom = self.page_h - MARGIN_BOTTOM

        self.pdf = FPDF(unit="mm", format=(self.page_w, self.page_h))
        self.pdf.set_auto_page_break(False)
        self.fonts = FontManager(self.pdf)

    # -- primitives -------------------------------------------------------

    def _rule(self, y: float, x1: Optional[float] = None, x2: Optional[float] = None) -> None:
        self.pdf.set_draw_color(*COLOR_RULE)
        self.pdf.set_line_width(0.3)
        self.pdf.line(MARGIN_X if x1 is None else x1, y, self.page_w - MARGIN_X if x2 is None else x2, y)

    def _centered(self, y: float, text: str, size: float, color: Tuple[int, int, int], bold: bool = False) -> None:
        width = self.fonts.text_width(text, size, bold=bold)
        self.fonts.draw_text((self.page_w - width) / 2.0, y, text, size, color, bold=bold)

    def _paragraph(
        self,
        x: float,
        y: float,
        text: str,
        size: float,
        color: Tuple[int, int, int],
        width: float,
        bold: bool = False,
        bullet: bool = False,
    ) -> float:
        """Draw wrapped text starting at baseline ``y``; returns the next baseline."""
        indent = 3.0 if bullet else 0.0
        step = line_height(size)
        for index, line in enumerate(wrap_text(self.fonts, text, width - indent, size, bold=bold)):
            if y > self.bottom:
                break
            if bullet and index == 0:
                self.fonts.draw_text(x, y, "-", size, color)
            self.fonts.draw_text(x + indent, y, line, size, color, bold=bold)
            y += step
        return y

    def _footer(self, ordinal: int) -> None:
        label = f"{ordinal} / {self.plan.total_pages}"
        width = self.fonts.text_width(label, FONT_SIZE_SMALL)
        self.fonts.draw_text(
            self.page_w - MARGIN_X - width,
            self.page_h - FOOTER_Y_FROM_BOTTOM,
            label,
            FONT_SIZE_SMALL,
            COLOR_MUTED,
        )

    # -- section items ----------------------------------------------------

    def _section_heading(self, y: float, title: str) -> float:
        self.fonts.draw_text(MARGIN_X, y, title.upper(), FONT_SIZE_SECTION, COLOR_TEXT, bold=True)
        self._rule(y + SECTION_RULE_GAP)
        return y + SECTION_RULE_GAP + line_height(FONT_SIZE_SECTION)

    def _draw_experience(self, y: float, item: ExperienceItem) -> float:
        period = fmt_period(item.start_date, item.end_date, item.is_current)
        period_w = self.fonts.text_width(period, FONT_SIZE_SMALL)
        self.fonts.draw_text(
            self.page_w - MARGIN_X - period_w, y, period, FONT_SIZE_SMALL, COLOR_MUTED
        )
        y = self._paragraph(
            MARGIN_X, y, item.job_title, FONT_SIZE_ITEM_TITLE, COLOR_TEXT,
            self.content_w - period_w - 4.0, bold=True,
        )
        if item.company:
            y = self._paragraph(MARGIN_X, y, item.company, FONT_SIZE_NORMAL, COLOR_ACCENT, self.content_w)
        for line in bullet_lines(item.description):
            y = self._paragraph(MARGIN_X, y, line, FONT_SIZE_NORMAL, COLOR_BODY, self.content_w, bullet=True)
        return y + ITEM_GAP

    def _draw_education(self, y: float, item: EducationItem) -> float:
        y = self._paragraph(MARGIN_X, y, item.degree, FONT_SIZE_ITEM_TITLE, COLOR_TEXT, self.content_w, bold=True)
        if item.institution:
            y = self._paragraph(MARGIN_X, y, item.institution, FONT_SIZE_NORMAL, COLOR_BODY, self.content_w)
        y = self._paragraph(
            MARGIN_X, y, fmt_period(item.start_date, item.end_date), FONT_SIZE_SMALL, COLOR_MUTED, self.content_w
        )
        return y + ITEM_GAP

    def _draw_certificate(self, y: float, item: CertificateItem) -> float:
        y = self._paragraph(MARGIN_X, y, item.name, FONT_SIZE_ITEM_TITLE, COLOR_TEXT, self.content_w, bold=True)
        if item.issuer:
            y = self._paragraph(MARGIN_X, y, item.issuer, FONT_SIZE_NORMAL, COLOR_ACCENT, self.content_w)
        y = self._paragraph(
            MARGIN_X, y, f"Issued {fmt_month(item.date, empty='-')}", FONT_SIZE_SMALL, COLOR_MUTED, self.content_w
        )
        return y + ITEM_GAP

    def _draw_sections(self, y: float, slices: Dict[str, Sequence[Any]], continued: bool) -> float:
        draw_item = {
            "experience": self._draw_experience,
            "education": self._draw_education,
            "certificates": self._draw_certificate,
        }
        for section in SECTIONS:
            items = slices[section]
            if not items or y > self.bottom:
                continue
            title = SECTION_TITLES[section] + (" (Continued)" if continued else "")
            y = self._section_heading(y, title)
            for item in items:
                if y > self.bottom:
                    break
                y = draw_item[section](y, item)
            y += SECTION_GAP
        return y

    # -- pages ------------------------------------------------------------

    def _draw_first_page(self) -> None:
        self.pdf.add_page()
        personal = self.document.personal
        if personal.full_name:
            self.fonts.draw_text(MARGIN_X, NAME_Y, personal.full_name, FONT_SIZE_NAME, COLOR_TEXT, bold=True)
        if personal.tagline:
            self.fonts.draw_text(MARGIN_X, TAGLINE_Y, personal.tagline, FONT_SIZE_NORMAL + 1, COLOR_ACCENT)
        contact = "  |  ".join(
            value
            for value in (personal.email, personal.phone, personal.website, personal.location)
            if value
        )
        if contact:
            self.fonts.draw_text(MARGIN_X, CONTACT_Y, contact, FONT_SIZE_SMALL, COLOR_MUTED)
        self._rule(HEADER_RULE_Y)

        y = CONTENT_START_Y
        if personal.bio:
            y = self._paragraph(MARGIN_X, y, personal.bio, FONT_SIZE_NORMAL, COLOR_BODY, self.content_w)
            y += SECTION_GAP

        y = self._draw_sections(y, self.plan.first_page_slices(), continued=False)

        hobbies = [hobby for hobby in self.document.hobbies if hobby]
        if hobbies and y <= self.bottom:
            y = self._section_heading(y, "Hobbies")
            self._paragraph(MARGIN_X, y, ", ".join(hobbies), FONT_SIZE_NORMAL, COLOR_BODY, self.content_w)

        self._footer(1)

    def _draw_continuation_page(self, index: int, page: ContinuationPage) -> None:
        self.pdf.add_page()
        title = f"{self.document.personal.full_name} - Resume".lstrip(" -")
        label = self.plan.continuation_label(index)
        if label:
            title = f"{title} ({label})"
        self._centered(PAGE_TITLE_Y, title, FONT_SIZE_PAGE_TITLE, COLOR_TEXT, bold=True)
        self._rule(PAGE_TITLE_RULE_Y)

        self._draw_sections(CONT_CONTENT_START_Y, page.slices(self.document, self.plan.profile), continued=True)
        self._footer(self.plan.continuation_ordinal(index))

    def _draw_gallery_card(self, x: float, y: float, width: float, height: float, item: GalleryItem) -> None:
        # Images are referenced, not fetched; the frame marks where they go.
        self.pdf.set_fill_color(*COLOR_PLACEHOLDER)
        self.pdf.rect(x, y, width, GALLERY_IMAGE_H, style="F", round_corners=True, corner_radius=CARD_RADIUS)
        reference = wrap_text(self.fonts, item.image or "", width - 6.0, FONT_SIZE_SMALL)[0]
        self.fonts.draw_text(x + 3.0, y + GALLERY_IMAGE_H / 2.0, reference, FONT_SIZE_SMALL, COLOR_MUTED)

        text_y = y + GALLERY_IMAGE_H + line_height(FONT_SIZE_ITEM_TITLE) + 1.0
        text_y = self._paragraph(x, text_y, item.project_name, FONT_SIZE_ITEM_TITLE, COLOR_TEXT, width, bold=True)
        if item.year:
            text_y = self._paragraph(x, text_y, item.year, FONT_SIZE_SMALL, COLOR_MUTED, width)
        if item.description:
            limit = y + height
            for line in wrap_text(self.fonts, item.description, width, FONT_SIZE_NORMAL):
                if text_y > limit:
                    break
                self.fonts.draw_text(x, text_y, line, FONT_SIZE_NORMAL, COLOR_BODY)
                text_y += line_height(FONT_SIZE_NORMAL)

    def _draw_gallery_page(self, index: int, page: GalleryPage) -> None:
        self.pdf.add_page()
        label = self.plan.gallery_label(index)
        self._centered(PAGE_TITLE_Y, label or "Portfolio", FONT_SIZE_PAGE_TITLE + 2, COLOR_TEXT, bold=True)
        self._rule(PAGE_TITLE_RULE_Y)

        rows = (self.plan.profile.gallery_per_page + GALLERY_COLUMNS - 1) // GALLERY_COLUMNS
        card_w = (self.content_w - GALLERY_GUTTER * (GALLERY_COLUMNS - 1)) / GALLERY_COLUMNS
        grid_h = self.bottom - CONT_CONTENT_START_Y
        card_h = (grid_h - GALLERY_ROW_GAP * (rows - 1)) / rows

        for position, item in enumerate(page.items):
            row, column = divmod(position, GALLERY_COLUMNS)
            x = MARGIN_X + column * (card_w + GALLERY_GUTTER)
            y = CONT_CONTENT_START_Y + row * (card_h + GALLERY_ROW_GAP)
            self._draw_gallery_card(x, y, card_w, card_h, item)

        self._footer(self.plan.gallery_ordinal(index))

    def render(self) -> bytes:
        self._draw_first_page()
        for index, page in enumerate(self.plan.continuation_pages):
            self._draw_continuation_page(index, page)
        for index, page in enumerate(self.plan.gallery_pages):
            self._draw_gallery_page(index, page)

        logger.debug(f"Rendered {self.pdf.page_no()} page(s)")
        pdf_blob = self.pdf.output()
        if isinstance(pdf_blob, (bytes, bytearray)):
            return bytes(pdf_blob)
        raise RuntimeError(f"Unexpected PDF output type: {type(pdf_blob).__name__}")


def render_plan(plan: PagePlan) -> bytes:
    return ResumeRenderer(plan).render()


def render_resume(
    document: Document,
    paper_size: Any = PaperSize.A4,
    profiles: Optional[Dict[PaperSize, CapacityProfile]] = None,
) -> bytes:
    return render_plan(plan_document(document, paper_size, profiles))
