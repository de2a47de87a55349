"""Render snapshot handed from the editing core to the display driver.

The snapshot is plain data: which text to show on each screen row, which
columns are selected, what the status bar says and where the cursor goes.
Escape sequences and colors are the display driver's business.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import EditorConstants
from .modes import CommandMode
from .selection import highlight_span


@dataclass
class RenderSnapshot:
    lines: list[str]
    # One (start, end) half-open column span per visible line, or None
    selection_ranges: list[Optional[tuple[int, int]]]
    # Screen rows past the end of the document
    tilde_rows: int
    status_left: str
    status_right: str
    cursor_x: int
    cursor_y: int
    cursor_shape: str
    screen_cols: int
    welcome_row: Optional[int] = None
    welcome_text: str = ""


def status_texts(controller) -> tuple[str, str]:
    """Left and right halves of the status bar."""
    buffer = controller.buffer
    viewport = controller.viewport
    mode = controller.mode
    row = viewport.row + 1
    right = f"{viewport.cx + 1}:{row} -- {row}/{buffer.line_count()}"

    if isinstance(mode, CommandMode):
        left = mode.pending
    elif controller.status_message:
        left = controller.status_message
    else:
        filename = buffer.filename or EditorConstants.NO_NAME
        dirty = EditorConstants.DIRTY_MARKER if buffer.dirty else ""
        left = f"-- {mode.name} -- \"{filename}\"{dirty}"
    return left, right


def build_snapshot(controller, show_welcome: bool = True) -> RenderSnapshot:
    """Capture what the screen should show for the controller's state."""
    buffer = controller.buffer
    viewport = controller.viewport
    cols = viewport.screen_cols
    selection = controller.selection()

    lines = []
    ranges = []
    for row in viewport.visible_rows(buffer):
        text = buffer.line_text(row)
        lines.append(text[:cols])
        span = highlight_span(selection, row, len(text))
        if span is not None:
            span = (span[0], min(span[1], cols))
            if span[0] >= span[1]:
                span = None
        ranges.append(span)
    tilde_rows = viewport.screen_rows - len(lines)

    welcome_row = None
    if show_welcome and buffer.is_empty():
        welcome_row = viewport.screen_rows // 3
        if welcome_row < len(lines):
            welcome_row = None

    left, right = status_texts(controller)
    mode = controller.mode
    if isinstance(mode, CommandMode):
        cursor_x = min(len(mode.pending), cols - 1)
        cursor_y = viewport.screen_rows
    else:
        cursor_x, cursor_y = viewport.cx, viewport.cy

    return RenderSnapshot(
        lines=lines,
        selection_ranges=ranges,
        tilde_rows=tilde_rows,
        status_left=left,
        status_right=right,
        cursor_x=cursor_x,
        cursor_y=cursor_y,
        cursor_shape=mode.cursor_shape,
        screen_cols=cols,
        welcome_row=welcome_row,
        welcome_text=EditorConstants.WELCOME_MESSAGE if welcome_row is not None else "",
    )
