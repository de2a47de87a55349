"""Visual-mode selection.

The selection is never stored: it is derived from the Visual mode's anchor
and the live cursor each time it is needed.
"""

from typing import Optional

from .modes import Mode, Position, VisualMode

SelectionRange = tuple[Position, Position]


def normalized_range(anchor: Position, cursor: Position) -> SelectionRange:
    """Order two positions so the first comes earlier in the document."""
    if cursor.document_order() < anchor.document_order():
        return (cursor, anchor)
    return (anchor, cursor)


def selection_range(mode: Mode, cursor: Position) -> Optional[SelectionRange]:
    """Return the normalized selection, or None outside Visual mode."""
    if not isinstance(mode, VisualMode):
        return None
    return normalized_range(mode.anchor, cursor)


def highlight_span(selection: Optional[SelectionRange], row: int,
                   line_length: int) -> Optional[tuple[int, int]]:
    """Columns of ``row`` covered by the selection as a half-open span.

    Both selection endpoints are inclusive, matching the block cursor which
    sits on a character. Returns None when nothing on the row is selected.
    """
    if selection is None:
        return None
    start, end = selection
    if row < start.row or row > end.row:
        return None
    first = start.col if row == start.row else 0
    last = end.col + 1 if row == end.row else line_length
    last = min(last, line_length)
    if first >= last:
        return None
    return (first, last)
