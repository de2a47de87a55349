"""Line-indexed text buffer.

The buffer always holds at least one line, so callers never need a sentinel
for the empty document. Row and column arguments must be in range; callers
check bounds before calling.
"""

from typing import Optional

from . import filestore


class TextBuffer:
    """Document content plus its save target and dirty flag."""

    def __init__(self, lines: Optional[list[str]] = None, filename: Optional[str] = None):
        self._lines: list[str] = list(lines) if lines else [""]
        self.filename = filename
        self.dirty = False

    @classmethod
    def load(cls, path: str) -> "TextBuffer":
        """Load ``path`` into a new buffer bound to it.

        A missing file is not an error: the result is an empty buffer that a
        later save will create.

        Raises:
            filestore.FileStoreError: if the file exists but cannot be read.
        """
        try:
            lines = filestore.load_lines(path)
        except FileNotFoundError:
            lines = None
        return cls(lines, filename=path)

    def save(self) -> bool:
        """Write the buffer to ``filename``.

        Returns:
            False if no filename was ever set, True once written.

        Raises:
            filestore.FileStoreError: if the write failed.
        """
        if not self.filename:
            return False
        filestore.save_lines(self.filename, self._lines)
        self.dirty = False
        return True

    # --- Read access ---

    def line_count(self) -> int:
        return len(self._lines)

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def line_text(self, row: int) -> str:
        return self._lines[row]

    def lines(self) -> list[str]:
        """Return a copy of all lines."""
        return list(self._lines)

    def is_empty(self) -> bool:
        return len(self._lines) == 1 and not self._lines[0]

    # --- Mutation ---

    def insert_char(self, row: int, col: int, ch: str):
        """Insert ``ch`` before column ``col`` of ``row``."""
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        self.dirty = True

    def delete_char_before(self, row: int, col: int):
        """Remove the character left of ``col``. Column 0 is a no-op; use
        join_with_previous to remove a line break."""
        if col <= 0:
            return
        line = self._lines[row]
        self._lines[row] = line[:col - 1] + line[col:]
        self.dirty = True

    def split_line(self, row: int, col: int):
        """Break ``row`` at ``col``; the tail becomes a new line below."""
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        self.dirty = True

    def join_with_previous(self, row: int) -> int:
        """Append ``row`` to the line above it and remove ``row``.

        Returns:
            Length of the previous line before the join (where the cursor
            belongs afterwards), or 0 when ``row`` is the first line.
        """
        if row == 0:
            return 0
        prev_len = len(self._lines[row - 1])
        tail = self._lines.pop(row)
        self._lines[row - 1] += tail
        self.dirty = True
        return prev_len
