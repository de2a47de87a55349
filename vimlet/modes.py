"""Editor modes.

A mode is one immutable value of a small tagged union. Transitions replace
the controller's mode wholesale; Visual always carries its anchor and Command
always carries its pending text.
"""

from dataclasses import dataclass
from typing import NamedTuple, Union


class Position(NamedTuple):
    """Absolute document position, column first."""
    col: int
    row: int

    def document_order(self) -> tuple[int, int]:
        """Sort key putting earlier rows first, then earlier columns."""
        return (self.row, self.col)


@dataclass(frozen=True)
class NormalMode:
    name = "NORMAL"
    cursor_past_end = False
    cursor_shape = "block"


@dataclass(frozen=True)
class InsertMode:
    name = "INSERT"
    cursor_past_end = True
    cursor_shape = "bar"


@dataclass(frozen=True)
class VisualMode:
    anchor: Position
    name = "VISUAL"
    cursor_past_end = False
    cursor_shape = "block"


@dataclass(frozen=True)
class CommandMode:
    pending: str = ":"
    name = "COMMAND"
    cursor_past_end = True
    cursor_shape = "bar"

    def append(self, ch: str) -> "CommandMode":
        return CommandMode(self.pending + ch)

    def backspace(self) -> "CommandMode":
        return CommandMode(self.pending[:-1])


Mode = Union[NormalMode, InsertMode, VisualMode, CommandMode]
