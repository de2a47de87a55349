"""Cursor and scroll window over a TextBuffer.

The cursor is stored in screen coordinates: ``cx`` is the column and ``cy``
the row within the viewport, so the document row is ``cy + scroll_offset``.
Every method leaves ``0 <= cy < screen_rows`` and, once ``scroll_check`` has
run, ``cy + scroll_offset <= line_count - 1``.
"""

import logging

from .buffer import TextBuffer
from .modes import Position

logger = logging.getLogger(__name__)


def clamp_column(cx: int, line_length: int, past_end: bool) -> int:
    """Clamp a cursor column to a line.

    With ``past_end`` (Insert mode) the cursor may sit one past the last
    character; otherwise it must sit on a character, and an empty line
    forces column 0.
    """
    if past_end:
        max_cx = line_length
    else:
        max_cx = max(line_length - 1, 0)
    return max(0, min(cx, max_cx))


class Viewport:
    """Cursor position plus scroll offset and screen size."""

    def __init__(self, screen_rows: int = 24, screen_cols: int = 80):
        self.cx = 0
        self.cy = 0
        self.scroll_offset = 0
        self.screen_rows = max(1, screen_rows)
        self.screen_cols = max(1, screen_cols)

    @property
    def row(self) -> int:
        """Absolute document row of the cursor."""
        return self.cy + self.scroll_offset

    @property
    def position(self) -> Position:
        return Position(self.cx, self.row)

    def _current_line_length(self, buffer: TextBuffer) -> int:
        row = self.row
        if row < buffer.line_count():
            return buffer.line_length(row)
        return 0

    # --- Clamps ---

    def clamp_horizontal(self, buffer: TextBuffer, past_end: bool):
        self.cx = clamp_column(self.cx, self._current_line_length(buffer), past_end)

    def scroll_check(self, buffer: TextBuffer):
        """Pull the cursor and scroll offset back inside the document."""
        last_row = buffer.line_count() - 1
        if self.row > last_row:
            self.cy = max(last_row - self.scroll_offset, 0)
        self.scroll_offset = min(self.scroll_offset, last_row)

    # --- Movement ---

    def move_left(self):
        if self.cx > 0:
            self.cx -= 1

    def move_right(self, buffer: TextBuffer, past_end: bool = False):
        limit = clamp_column(self.cx + 1, self._current_line_length(buffer), past_end)
        if self.cx < limit:
            self.cx += 1

    def move_up(self):
        if self.cy > 0:
            self.cy -= 1
        elif self.scroll_offset > 0:
            self.scroll_offset -= 1

    def move_down(self, buffer: TextBuffer):
        if self.row < buffer.line_count() - 1:
            self.step_down()

    def step_down(self):
        """Move to the next row, scrolling when already at the bottom edge."""
        if self.cy < self.screen_rows - 1:
            self.cy += 1
        else:
            self.scroll_offset += 1

    def step_up(self):
        """Move to the previous row, scrolling when already at the top edge."""
        if self.cy > 0:
            self.cy -= 1
        elif self.scroll_offset > 0:
            self.scroll_offset -= 1

    def half_page_down(self, buffer: TextBuffer):
        """Scroll half a screen towards the end of the document.

        The cursor keeps its document row by moving up on screen by the
        distance actually scrolled, which is less than half a screen near
        the end of the file.
        """
        last_row = buffer.line_count() - 1
        new_offset = min(self.scroll_offset + self.screen_rows // 2, last_row)
        delta = max(new_offset - self.scroll_offset, 0)
        self.scroll_offset = max(new_offset, 0)
        self.cy = max(self.cy - delta, 0)
        self.scroll_check(buffer)

    def half_page_up(self, buffer: TextBuffer):
        """Scroll half a screen towards the start of the document."""
        new_offset = max(self.scroll_offset - self.screen_rows // 2, 0)
        delta = self.scroll_offset - new_offset
        self.scroll_offset = new_offset
        self.cy = min(self.cy + delta, self.screen_rows - 1)
        self.scroll_check(buffer)

    # --- Geometry ---

    def resize(self, screen_rows: int, screen_cols: int, buffer: TextBuffer) -> bool:
        """Adopt a new terminal size, keeping the cursor's document row.

        Returns:
            True if the size changed.
        """
        screen_rows = max(1, screen_rows)
        screen_cols = max(1, screen_cols)
        if (screen_rows, screen_cols) == (self.screen_rows, self.screen_cols):
            return False
        logger.debug(f"Viewport resized to {screen_rows}x{screen_cols}")
        if self.cy > screen_rows - 1:
            self.scroll_offset += self.cy - (screen_rows - 1)
            self.cy = screen_rows - 1
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols
        self.scroll_check(buffer)
        return True

    def visible_rows(self, buffer: TextBuffer) -> range:
        """Document rows currently on screen."""
        end = min(self.scroll_offset + self.screen_rows, buffer.line_count())
        return range(self.scroll_offset, end)
