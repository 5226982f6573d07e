"""State and input handling of the scrolling terms panel."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, IntEnum
from typing import Iterable

from termsview.layout import (
    LINE_HEIGHT,
    MAX_LINE_COUNT,
    MAX_LINE_LENGTH,
    MAX_SCROLL,
    SCROLL_STEP,
    VISIBLE_LINE_COUNT,
    Layout,
    Rect,
    _trunc_div,
    compute_layout,
)

TIMER_INTERVAL_MS = 100
DEFAULT_WIDTH = 1300
DEFAULT_HEIGHT = 700

AGREE_MESSAGE = ("同意", "ありがとうございます。")
DISAGREE_MESSAGE = ("非同意", "同意されませんでした。")


class Command(IntEnum):
    """Identifiers of the panel's push buttons."""

    AGREE = 1
    DISAGREE = 2
    TOGGLE = 3


class _Hold(Enum):
    NONE = 0
    LINE_UP = 1
    LINE_DOWN = 2
    PAGE_UP = 3
    PAGE_DOWN = 4


class _Drag(Enum):
    NONE = 0
    SLIDER = 1
    TEXT = 2


_HOLD_DELTA = {
    _Hold.LINE_UP: -SCROLL_STEP,
    _Hold.LINE_DOWN: SCROLL_STEP,
    _Hold.PAGE_UP: -VISIBLE_LINE_COUNT,
    _Hold.PAGE_DOWN: VISIBLE_LINE_COUNT,
}

_DEFAULT_LINES = (
    "第1条　本規約は2025年8月1日より施行します。",
    "第2条　ユーザーは本規約に同意の上、利用します。",
    "第3条　サービス内容は予告なく変更されます。",
    "第4条　当社は通知なくサービスを終了できます。",
    "第5条　ユーザーは不正利用をしてはなりません。",
    "第6条　本サービスの利用は自己責任とします。",
    "第7条　当社は誠実に運営を行います。",
    "第8条　当社は障害による損害を負いません。",
    "第9条　他人の権利を侵害してはなりません。",
    "第10条　他の利用者に迷惑をかけないことﾄ。",
    "第11条　得た情報の転載は禁止します。",
    "第12条　アカウントは自己管理を行います。",
    "第13条　パスワード管理は利用者の責任です。",
    "第14条　必要に応じて連絡を行う場合があります。",
    "第15条　個人情報は適切に管理されます。",
    "第16条　全コンテンツは当社に帰属します。",
    "第17条　複製・改変は禁止されています。",
    "第18条　違反時は利用停止などの措置をとります。",
    "第19条　権利の譲渡は禁止されています。",
    "第20条　業務を外部に委託することがあります。",
    "第21条　取引は利用者の責任で行ってください。",
    "第22条　法令を遵守してサービスを利用します。",
    "第23条　規約は改定されることがあります。",
    "第24条　準拠法は日本法とします。",
    "第25条　訴訟は東京地方裁判所を管轄とします。",
    "第26条　未成年者は保護者の同意が必要です。",
    "第27条　不適切な行為には措置を取ります。",
    "第28条　安定運用に努めますが保証しません。",
    "第29条　日本語規約が優先されます。",
    "第30条　本規約は2025年8月1日より施行します。",
)


def default_lines() -> list[str]:
    """The sample terms shown by the panel."""
    return list(_DEFAULT_LINES)


class ScrollView:
    """A fixed-size list of lines viewed through a scrollable window."""

    def __init__(
        self,
        lines: Iterable[str] | None = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        source = list(default_lines() if lines is None else lines)[:MAX_LINE_COUNT]
        source += [""] * (MAX_LINE_COUNT - len(source))
        self.lines = [line[: MAX_LINE_LENGTH - 1] for line in source]
        self.width = width
        self.height = height
        self.scroll_pos = 0
        self.show_content = True
        self.agree_enabled = False
        self._hold = _Hold.NONE
        self._drag = _Drag.NONE
        self._drag_offset_y = 0
        self._drag_start_y = 0
        self.layout: Layout = compute_layout(width, height, self.scroll_pos)

    @property
    def timer_active(self) -> bool:
        """Whether a held button keeps scrolling on every timer tick."""
        return self._hold is not _Hold.NONE

    @property
    def captured(self) -> bool:
        """Whether a drag of the slider or the text is in progress."""
        return self._drag is not _Drag.NONE

    @property
    def answer_buttons_visible(self) -> bool:
        return self.show_content

    def _relayout(self) -> None:
        self.layout = compute_layout(self.width, self.height, self.scroll_pos)

    def _update_agree(self) -> None:
        self.agree_enabled = self.scroll_pos >= MAX_SCROLL

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._relayout()

    def scroll(self, delta: int) -> bool:
        """Move by delta lines, clamped; return whether the position changed."""
        if not self.show_content:
            return False
        new_pos = max(0, min(self.scroll_pos + delta, MAX_SCROLL))
        if new_pos == self.scroll_pos:
            return False
        self.scroll_pos = new_pos
        self._relayout()
        self._update_agree()
        return True

    def press(self, x: int, y: int) -> None:
        """Handle the primary mouse button going down at (x, y)."""
        if not self.show_content:
            return
        lay = self.layout
        if lay.up_button.contains(x, y):
            self._hold = _Hold.LINE_UP
            self.scroll(-SCROLL_STEP)
        elif lay.down_button.contains(x, y):
            self._hold = _Hold.LINE_DOWN
            self.scroll(SCROLL_STEP)
        elif lay.slider.contains(x, y):
            self._drag = _Drag.SLIDER
            self._drag_offset_y = y - lay.slider.top
        elif lay.text_area.contains(x, y):
            self._drag = _Drag.TEXT
            self._drag_start_y = y
        elif lay.scroll_bar.contains(x, y):
            if y < lay.slider.top:
                self._hold = _Hold.PAGE_UP
                self.scroll(-VISIBLE_LINE_COUNT)
            elif y > lay.slider.bottom:
                self._hold = _Hold.PAGE_DOWN
                self.scroll(VISIBLE_LINE_COUNT)

    def release(self) -> None:
        """Handle the primary mouse button going up."""
        self._hold = _Hold.NONE
        self._drag = _Drag.NONE

    def drag(self, x: int, y: int) -> None:
        """Handle the mouse moving to (x, y)."""
        if self._drag is _Drag.SLIDER:
            lay = self.layout
            track_top = lay.up_button.bottom
            track_bottom = lay.down_button.top
            track_height = track_bottom - track_top
            slider_height = lay.slider.height
            new_top = max(track_top, min(y - self._drag_offset_y, track_bottom - slider_height))
            self.layout = replace(
                lay,
                slider=Rect(lay.slider.left, new_top, lay.slider.right, new_top + slider_height),
            )
            self.scroll_pos = _trunc_div(
                (new_top - track_top) * MAX_SCROLL, track_height - slider_height
            )
            self._update_agree()
        elif self._drag is _Drag.TEXT:
            dy = y - self._drag_start_y
            if abs(dy) >= LINE_HEIGHT:
                self.scroll(-_trunc_div(dy, LINE_HEIGHT))
                self._drag_start_y = y

    def tick(self) -> None:
        """Repeat the scroll of a held arrow button or track."""
        delta = _HOLD_DELTA.get(self._hold)
        if delta is not None:
            self.scroll(delta)

    def toggle_content(self) -> None:
        """Show or hide the panel; showing it starts again from the top."""
        self.show_content = not self.show_content
        if self.show_content:
            self.scroll_pos = 0
            self._relayout()
            self._update_agree()

    def command(self, command: int) -> tuple[str, str] | None:
        """Run a button command; return a (title, text) message to show, if any."""
        try:
            cmd = Command(command)
        except ValueError:
            return None
        if cmd is Command.AGREE:
            return AGREE_MESSAGE
        if cmd is Command.DISAGREE:
            return DISAGREE_MESSAGE
        self.toggle_content()
        return None