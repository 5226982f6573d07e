"""Window that shows the terms panel with Tk."""

from __future__ import annotations

import argparse
from dataclasses import replace

from termsview.layout import FONT_HEIGHT, LINE_HEIGHT, VISIBLE_LINE_COUNT, Rect
from termsview.scroller import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    TIMER_INTERVAL_MS,
    Command,
    ScrollView,
    default_lines,
)

BACKGROUND = "white"
OUTLINE = "black"
BUTTON_FACE = "#f0f0f0"
TRACK_COLOUR = "#c8c8c8"
SLIDER_COLOUR = "gray"
FONT_FAMILY = "BIZ UDGothic"
TEXT_MARGIN = 10
TOGGLE_BUTTON = Rect(600, 600, 700, 630)
UP_ARROW = "⌃"
DOWN_ARROW = "⌄"


def scene(view: ScrollView) -> list[tuple]:
    """Drawing items for the view, back to front.

    Items are ("fill", rect, colour), ("outline", rect, colour),
    ("text", x, y, text) and ("glyph", rect, text); a hidden view draws nothing.
    """
    if not view.show_content:
        return []
    lay = view.layout
    items: list[tuple] = [
        ("fill", Rect(0, 0, view.width, view.height), BACKGROUND),
        (
            "outline",
            Rect(lay.text_area.left, lay.text_area.top, lay.scroll_bar.left, lay.text_area.bottom),
            OUTLINE,
        ),
    ]
    top = lay.text_area.top + TEXT_MARGIN
    shown = view.lines[view.scroll_pos : view.scroll_pos + VISIBLE_LINE_COUNT]
    items.extend(
        ("text", lay.text_area.left + TEXT_MARGIN, top + row * LINE_HEIGHT, line)
        for row, line in enumerate(shown)
    )
    items.append(("fill", lay.up_button, BUTTON_FACE))
    items.append(("fill", lay.down_button, BUTTON_FACE))
    up = lay.up_button
    down = lay.down_button
    items.append(("glyph", replace(up, top=up.top + 10, bottom=up.bottom + 10), UP_ARROW))
    items.append(("glyph", replace(down, top=down.top - 40, bottom=down.bottom - 15), DOWN_ARROW))
    items.append(("fill", lay.track, TRACK_COLOUR))
    items.append(("fill", lay.slider, SLIDER_COLOUR))
    return items


class TermsWindow:
    """Tk front end that forwards input to a ScrollView and paints its scene."""

    def __init__(self, root, view: ScrollView) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.root = root
        self.view = view
        self._timer = None
        self._font = (FONT_FAMILY, -FONT_HEIGHT)
        self._arrow_font = (FONT_FAMILY, -FONT_HEIGHT * 3)

        self.canvas = tk.Canvas(
            root,
            width=view.width,
            height=view.height,
            highlightthickness=0,
            background=BACKGROUND,
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.agree = tk.Button(root, text="同意する", command=lambda: self._run(Command.AGREE))
        self.disagree = tk.Button(
            root, text="同意しない", command=lambda: self._run(Command.DISAGREE)
        )
        self.toggle = tk.Button(root, text="表示切替", command=lambda: self._run(Command.TOGGLE))
        self._place(self.toggle, TOGGLE_BUTTON)

        self.canvas.bind("<Configure>", self._on_configure)
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_motion)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.redraw()

    @staticmethod
    def _place(widget, rect: Rect) -> None:
        widget.place(x=rect.left, y=rect.top, width=rect.width, height=rect.height)

    def redraw(self) -> None:
        """Repaint the canvas and update the answer buttons."""
        canvas = self.canvas
        canvas.delete("all")
        for item in scene(self.view):
            kind = item[0]
            if kind == "fill":
                _, rect, colour = item
                canvas.create_rectangle(
                    rect.left, rect.top, rect.right, rect.bottom, fill=colour, outline=""
                )
            elif kind == "outline":
                _, rect, colour = item
                canvas.create_rectangle(
                    rect.left, rect.top, rect.right - 1, rect.bottom - 1, outline=colour
                )
            elif kind == "text":
                _, x, y, text = item
                canvas.create_text(x, y, text=text, anchor="nw", font=self._font)
            elif kind == "glyph":
                _, rect, text = item
                canvas.create_text(
                    (rect.left + rect.right) / 2,
                    (rect.top + rect.bottom) / 2,
                    text=text,
                    anchor="center",
                    font=self._arrow_font,
                )

        if self.view.answer_buttons_visible:
            self._place(self.agree, self.view.layout.agree_button)
            self._place(self.disagree, self.view.layout.disagree_button)
            self.agree.configure(
                state=self._tk.NORMAL if self.view.agree_enabled else self._tk.DISABLED
            )
        else:
            self.agree.place_forget()
            self.disagree.place_forget()

    def _run(self, command: Command) -> None:
        message = self.view.command(command)
        if message is not None:
            title, text = message
            self._messagebox.showinfo(title, text, parent=self.root)
        self.redraw()

    def _on_configure(self, event) -> None:
        self.view.resize(event.width, event.height)
        self.redraw()

    def _on_press(self, event) -> None:
        self.view.press(event.x, event.y)
        if self.view.timer_active and self._timer is None:
            self._timer = self.root.after(TIMER_INTERVAL_MS, self._on_timer)
        self.redraw()

    def _on_motion(self, event) -> None:
        self.view.drag(event.x, event.y)
        self.redraw()

    def _on_release(self, _event) -> None:
        self.view.release()
        if self._timer is not None:
            self.root.after_cancel(self._timer)
            self._timer = None
        self.redraw()

    def _on_timer(self) -> None:
        self._timer = None
        if self.view.timer_active:
            self.view.tick()
            self.redraw()
            self._timer = self.root.after(TIMER_INTERVAL_MS, self._on_timer)


def main(argv: list[str] | None = None) -> int:
    """Open the terms window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="termsview", description="Show scrollable terms that must be read before agreeing."
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="window width in pixels")
    parser.add_argument(
        "--height", type=int, default=DEFAULT_HEIGHT, help="window height in pixels"
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title("Scroll Demo")
    root.geometry(f"{args.width}x{args.height}")
    TermsWindow(root, ScrollView(default_lines(), args.width, args.height))
    root.mainloop()
    return 0