"""Geometry of the scrolling text panel and its scroll bar."""

from __future__ import annotations

from dataclasses import dataclass

FONT_HEIGHT = 32
LINE_SPACING = 8
LINE_HEIGHT = FONT_HEIGHT + LINE_SPACING

MAX_LINE_COUNT = 30
VISIBLE_LINE_COUNT = 10
MAX_SCROLL = MAX_LINE_COUNT - VISIBLE_LINE_COUNT
SCROLL_STEP = 1
MAX_LINE_LENGTH = 128

TEXT_LEFT = 200
TEXT_AREA_PADDING = 20
SCROLL_SPACING = 10
SCROLL_BUTTON_SIZE = LINE_HEIGHT * 2
MIN_SLIDER_HEIGHT = 20

BUTTON_WIDTH = 100
BUTTON_HEIGHT = 30
BUTTON_GAP_Y = 20
BUTTON_STEP_X = 120


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom edges are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class Layout:
    """Positions of every element of the panel for one window size."""

    text_area: Rect
    scroll_bar: Rect
    up_button: Rect
    down_button: Rect
    slider: Rect
    agree_button: Rect
    disagree_button: Rect

    @property
    def track(self) -> Rect:
        """The part of the scroll bar between the two arrow buttons."""
        return Rect(
            self.scroll_bar.left,
            self.up_button.bottom,
            self.scroll_bar.right,
            self.down_button.top,
        )


def compute_layout(width: int, height: int, scroll_pos: int) -> Layout:
    """Lay the panel out in a client area of the given size."""
    area_height = VISIBLE_LINE_COUNT * LINE_HEIGHT + TEXT_AREA_PADDING
    area_top = _trunc_div(height - area_height, 2)
    text_width = int(_trunc_div(width, 2) * 1.5)

    text_area = Rect(TEXT_LEFT, area_top, TEXT_LEFT + text_width, area_top + area_height)

    bar_left = text_area.right + SCROLL_SPACING
    scroll_bar = Rect(bar_left, text_area.top, bar_left + SCROLL_BUTTON_SIZE, text_area.bottom)

    up_button = Rect(
        scroll_bar.left, scroll_bar.top, scroll_bar.right, scroll_bar.top + SCROLL_BUTTON_SIZE
    )
    down_button = Rect(
        scroll_bar.left,
        scroll_bar.bottom - SCROLL_BUTTON_SIZE,
        scroll_bar.right,
        scroll_bar.bottom,
    )

    track_height = scroll_bar.height - SCROLL_BUTTON_SIZE * 2
    slider_height = max(
        MIN_SLIDER_HEIGHT, _trunc_div(track_height * VISIBLE_LINE_COUNT, MAX_LINE_COUNT)
    )
    slider_top = up_button.bottom + _trunc_div(
        (track_height - slider_height) * scroll_pos, MAX_SCROLL
    )
    slider = Rect(scroll_bar.left, slider_top, scroll_bar.right, slider_top + slider_height)

    buttons_top = text_area.bottom + BUTTON_GAP_Y
    agree_button = Rect(
        TEXT_LEFT, buttons_top, TEXT_LEFT + BUTTON_WIDTH, buttons_top + BUTTON_HEIGHT
    )
    disagree_left = TEXT_LEFT + BUTTON_STEP_X
    disagree_button = Rect(
        disagree_left, buttons_top, disagree_left + BUTTON_WIDTH, buttons_top + BUTTON_HEIGHT
    )

    return Layout(
        text_area=text_area,
        scroll_bar=scroll_bar,
        up_button=up_button,
        down_button=down_button,
        slider=slider,
        agree_button=agree_button,
        disagree_button=disagree_button,
    )