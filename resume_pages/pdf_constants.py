"""Layout constants for the PDF renderer (millimetres, top-left origin).

Only the drawing code depends on these; page capacities live in
``profiles`` and are independent of the exact geometry.
"""

from __future__ import annotations

MARGIN_X = 15.0
MARGIN_BOTTOM = 14.0

PT_TO_MM = 0.3528
LINE_SPACING = 1.35

FONT_SIZE_NAME = 22
FONT_SIZE_PAGE_TITLE = 16
FONT_SIZE_SECTION = 12
FONT_SIZE_ITEM_TITLE = 11
FONT_SIZE_NORMAL = 9.5
FONT_SIZE_SMALL = 8

NAME_Y = 24.0
TAGLINE_Y = 32.0
CONTACT_Y = 38.5
HEADER_RULE_Y = 43.0
PAGE_TITLE_Y = 22.0
PAGE_TITLE_RULE_Y = 27.0
CONTENT_START_Y = 50.0
CONT_CONTENT_START_Y = 36.0

SECTION_GAP = 5.0
SECTION_RULE_GAP = 2.0
ITEM_GAP = 3.0
FOOTER_Y_FROM_BOTTOM = 7.0

GALLERY_COLUMNS = 2
GALLERY_GUTTER = 8.0
GALLERY_ROW_GAP = 8.0
GALLERY_IMAGE_H = 42.0
CARD_RADIUS = 2.0

COLOR_TEXT = (31, 41, 55)
COLOR_MUTED = (107, 114, 128)
COLOR_BODY = (75, 85, 99)
COLOR_ACCENT = (37, 99, 235)
COLOR_RULE = (209, 213, 219)
COLOR_PLACEHOLDER = (243, 244, 246)
