import pytest

from termsview.layout import LINE_HEIGHT, MAX_LINE_COUNT, MAX_LINE_LENGTH, MAX_SCROLL
from termsview.scroller import Command, ScrollView, default_lines


def _centre(rect):
    return (rect.left + rect.right) // 2, (rect.top + rect.bottom) // 2


@pytest.fixture
def view():
    return ScrollView(default_lines(), 1300, 700)


def test_default_lines_are_the_sample_terms():
    lines = default_lines()
    assert len(lines) == MAX_LINE_COUNT
    assert lines[0] == "第1条　本規約は2025年8月1日より施行します。"
    assert lines[-1] == "第30条　本規約は2025年8月1日より施行します。"


def test_lines_are_padded_and_truncated():
    v = ScrollView(["a" * 200], 1300, 700)
    assert len(v.lines) == MAX_LINE_COUNT
    assert len(v.lines[0]) == MAX_LINE_LENGTH - 1
    assert v.lines[1] == ""


def test_extra_lines_are_dropped():
    v = ScrollView([str(n) for n in range(MAX_LINE_COUNT + 5)], 1300, 700)
    assert v.lines[-1] == str(MAX_LINE_COUNT - 1)


def test_initial_state(view):
    assert view.scroll_pos == 0
    assert view.show_content
    assert not view.agree_enabled
    assert not view.timer_active


def test_scroll_clamps_and_reports_change(view):
    assert view.scroll(5)
    assert view.scroll_pos == 5
    assert view.scroll(-100)
    assert view.scroll_pos == 0
    assert not view.scroll(-1)
    assert view.scroll(100)
    assert view.scroll_pos == MAX_SCROLL


def test_agree_enabled_only_at_end(view):
    view.scroll(MAX_SCROLL - 1)
    assert not view.agree_enabled
    view.scroll(1)
    assert view.agree_enabled
    view.scroll(-1)
    assert not view.agree_enabled


def test_scroll_updates_slider(view):
    view.scroll(MAX_SCROLL)
    assert view.layout.slider.bottom == view.layout.down_button.top


def test_hidden_view_ignores_scroll_and_press(view):
    view.toggle_content()
    assert not view.scroll(3)
    view.press(*_centre(view.layout.down_button))
    assert view.scroll_pos == 0
    assert not view.timer_active


def test_toggle_resets_position(view):
    view.scroll(MAX_SCROLL)
    view.toggle_content()
    assert not view.show_content
    assert not view.answer_buttons_visible
    view.toggle_content()
    assert view.show_content
    assert view.scroll_pos == 0
    assert not view.agree_enabled


def test_holding_down_arrow_repeats_until_release(view):
    view.press(*_centre(view.layout.down_button))
    assert view.scroll_pos == 1
    assert view.timer_active
    view.tick()
    assert view.scroll_pos == 2
    view.release()
    assert not view.timer_active
    view.tick()
    assert view.scroll_pos == 2


def test_up_arrow_at_top_stays(view):
    view.press(*_centre(view.layout.up_button))
    assert view.scroll_pos == 0
    assert view.timer_active


def test_page_scroll_on_track(view):
    lay = view.layout
    x = _centre(lay.scroll_bar)[0]
    view.press(x, (lay.slider.bottom + lay.down_button.top) // 2)
    assert view.scroll_pos == 10
    view.tick()
    assert view.scroll_pos == MAX_SCROLL
    view.release()
    lay = view.layout
    view.press(x, (lay.up_button.bottom + lay.slider.top) // 2)
    assert view.scroll_pos == 10


def test_slider_drag_to_ends(view):
    lay = view.layout
    x = _centre(lay.slider)[0]
    view.press(x, lay.slider.top)
    assert view.captured
    view.drag(x, lay.down_button.bottom + 500)
    assert view.scroll_pos == MAX_SCROLL
    assert view.agree_enabled
    assert view.layout.slider.bottom == view.layout.down_button.top
    view.drag(x, 0)
    assert view.scroll_pos == 0
    assert not view.agree_enabled
    assert view.layout.slider.top == view.layout.up_button.bottom


def test_text_drag_scrolls_whole_lines(view):
    x, y = _centre(view.layout.text_area)
    view.press(x, y)
    view.drag(x, y - LINE_HEIGHT // 2)
    assert view.scroll_pos == 0
    view.drag(x, y - 2 * LINE_HEIGHT)
    assert view.scroll_pos == 2
    view.drag(x, y - LINE_HEIGHT)
    assert view.scroll_pos == 1


def test_release_ends_drag(view):
    x, y = _centre(view.layout.text_area)
    view.press(x, y)
    view.release()
    assert not view.captured
    view.drag(x, y - 3 * LINE_HEIGHT)
    assert view.scroll_pos == 0


def test_commands(view):
    assert view.command(Command.AGREE) == ("同意", "ありがとうございます。")
    assert view.command(Command.DISAGREE) == ("非同意", "同意されませんでした。")
    assert view.command(99) is None
    assert view.show_content
    assert view.command(3) is None
    assert not view.show_content


def test_resize_recomputes_layout(view):
    view.resize(1300, 900)
    assert view.layout.text_area.top == 900 - view.layout.text_area.bottom