# termsview

A small window that shows a thirty-article terms-of-service text ten lines at
a time, with a scroll bar drawn by the program itself. The "同意する" (agree)
button stays disabled until the text has been scrolled to the last page.

## Installing

```
pip install .
```

The window uses tkinter, which comes with most Python installations. Nothing
else is required.

## Running

```
termsview
termsview --width 1300 --height 700
```

`--width` and `--height` set the initial window size in pixels (both default
to 1300 by 700).

## Using the window

- The ⌃ and ⌄ buttons scroll one line; holding them down keeps scrolling
  every 100 ms.
- Clicking the track above or below the slider scrolls a page of ten lines,
  repeating while the button is held.
- The slider can be dragged. The text area can also be dragged, one line per
  line height of movement.
- "表示切替" hides or shows the content. Showing it again scrolls back to the
  top.
- "同意する" shows a thank-you message and "同意しない" shows a refusal
  message, each in a message box.

## Using it as a library

The scrolling state is kept separate from drawing, so it can be driven and
inspected without a display:

```python
from termsview.scroller import ScrollView, default_lines

view = ScrollView(default_lines(), 1300, 700)
view.scroll(25)
print(view.scroll_pos)     # 20, the last page
print(view.agree_enabled)  # True
```

`ScrollView` takes mouse input through `press(x, y)`, `drag(x, y)`,
`release()` and `tick()` (the repeat for a held button), and button commands
through `command(...)` with a `Command` value; `command` returns a
`(title, text)` pair for the agree and disagree buttons and toggles the
content for `Command.TOGGLE`.

`termsview.layout.compute_layout(width, height, scroll_pos)` gives a `Layout`
of `Rect`s for the text area, the scroll bar, its two buttons, the slider and
the two answer buttons for a window of the given size. `termsview.app.scene(view)`
lists what the window draws for a view, back to front; a hidden view draws
nothing.

## Limits

The text always has thirty lines: longer input is cut to thirty and shorter
input is padded with empty lines. Agreeing is not recorded anywhere; the
window only shows a message.

## Tests

```
pip install .[test]
pytest
```