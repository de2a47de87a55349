"""Terminal display using Blessed and key input using Curtsies."""

import contextlib
import logging
from collections import deque
from typing import Optional

import blessed
from curtsies import Input
from curtsies.events import PasteEvent

from .constants import EditorConstants
from .render import RenderSnapshot

logger = logging.getLogger(__name__)

CURSOR_SHAPES = {
    'block': EditorConstants.CURSOR_BLOCK,
    'bar': EditorConstants.CURSOR_BAR,
}


class TerminalInterface:
    """Handles terminal I/O: painting snapshots and reading key tokens."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None
        self._pending_keys: deque = deque()

    @contextlib.contextmanager
    def session(self):
        """Fullscreen, raw-input session; the terminal is always restored."""
        try:
            self.setup()
            yield self
        finally:
            self.cleanup()

    def setup(self):
        """Enter fullscreen mode and start reading raw keys."""
        print(self.term.enter_fullscreen + self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self._input = Input(keynames='curtsies')
        self._input.__enter__()

    def cleanup(self):
        """Stop raw input and leave fullscreen mode."""
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self.is_fullscreen:
            print(EditorConstants.CURSOR_DEFAULT + self.term.normal_cursor
                  + self.term.exit_fullscreen, end='', flush=True)
            self.is_fullscreen = False

    def get_key(self, timeout: Optional[float] = None) -> Optional[str]:
        """Return the next key token, or None if ``timeout`` seconds pass.

        A paste arrives from curtsies as one event holding many keys; they
        are queued and handed out one per call.
        """
        if self._pending_keys:
            return self._pending_keys.popleft()
        if self._input is None:
            return None
        event = self._input.send(timeout)
        if event is None:
            return None
        if isinstance(event, PasteEvent):
            self._pending_keys.extend(event.events)
            return self._pending_keys.popleft() if self._pending_keys else None
        if not isinstance(event, str):
            logger.debug(f"Ignoring input event {event!r}")
            return None
        return event

    # --- Drawing ---

    def _compose_line(self, line: str, selection: Optional[tuple[int, int]]) -> str:
        if not selection:
            return line
        start, end = selection
        return (line[:start] + self.term.reverse + line[start:end]
                + self.term.normal + line[end:])

    def _compose_status(self, left: str, right: str, width: int) -> str:
        left = left[:max(width - len(right) - 1, 0)]
        padding = " " * max(width - len(left) - len(right), 0)
        return self.term.reverse + (left + padding + right)[:width] + self.term.normal

    def draw(self, snapshot: RenderSnapshot, full_clear: bool = False):
        """Paint a frame for ``snapshot``.

        Every row is rewritten and cleared to its end, so a full clear is
        only needed when the geometry changed.
        """
        term = self.term
        width = snapshot.screen_cols
        out = [term.hide_cursor]
        if full_clear:
            out.append(term.home + term.clear)

        for y, line in enumerate(snapshot.lines):
            selection = snapshot.selection_ranges[y] if y < len(snapshot.selection_ranges) else None
            out.append(term.move_yx(y, 0) + self._compose_line(line, selection) + term.clear_eol)

        first_empty = len(snapshot.lines)
        for y in range(first_empty, first_empty + snapshot.tilde_rows):
            text = EditorConstants.EMPTY_ROW_MARKER
            if y == snapshot.welcome_row:
                padding = max(width - len(snapshot.welcome_text), 0) // 2
                text += " " * padding + snapshot.welcome_text
            out.append(term.move_yx(y, 0) + text[:width] + term.clear_eol)

        status_row = len(snapshot.lines) + snapshot.tilde_rows
        out.append(term.move_yx(status_row, 0)
                   + self._compose_status(snapshot.status_left, snapshot.status_right, width))

        out.append(CURSOR_SHAPES.get(snapshot.cursor_shape, EditorConstants.CURSOR_BLOCK))
        out.append(term.move_yx(snapshot.cursor_y, snapshot.cursor_x) + term.normal_cursor)
        print(''.join(out), end='', flush=True)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - EditorConstants.STATUS_ROWS
