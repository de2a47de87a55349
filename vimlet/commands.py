"""Colon-command language (``:q``, ``:q!``, ``:w [name]``, ``:wq [name]``).

The interpreter only touches the TextBuffer and reports whether the editor
should keep running; it knows nothing about the terminal.
"""

import logging
from typing import Callable, Dict, NamedTuple, Optional

from .buffer import TextBuffer
from .constants import Messages
from .filestore import FileStoreError

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    continue_running: bool
    status_message: str = ""


class CommandInterpreter:
    """Parses and executes command-line text against a buffer."""

    def __init__(self):
        self._handlers: Dict[str, Callable[[TextBuffer, Optional[str]], CommandResult]] = {
            ':q': self._quit,
            ':q!': self._force_quit,
            ':w': self._write,
            ':wq': self._write_quit,
        }

    def execute(self, buffer: TextBuffer, text: str) -> CommandResult:
        """Execute ``text``, e.g. ``":w notes.txt"``.

        The first whitespace-separated token selects the command; the second,
        if present, is its argument.
        """
        parts = text.split()
        if not parts or parts == [':']:
            return CommandResult(True)
        handler = self._handlers.get(parts[0])
        if handler is None:
            logger.debug(f"Unknown command {text!r}")
            return CommandResult(True, Messages.UNKNOWN_COMMAND.format(text))
        argument = parts[1] if len(parts) > 1 else None
        return handler(buffer, argument)

    # --- Handlers ---

    def _quit(self, buffer, argument):
        if buffer.dirty:
            return CommandResult(True, Messages.UNSAVED_CHANGES)
        return CommandResult(False)

    def _force_quit(self, buffer, argument):
        return CommandResult(False)

    def _save(self, buffer: TextBuffer, argument: Optional[str]) -> tuple[bool, str]:
        """Save, rebinding the target first when a name is given.

        Returns (saved, status message).
        """
        if argument:
            buffer.filename = argument
        try:
            saved = buffer.save()
        except FileStoreError as e:
            return (False, str(e))
        if saved:
            return (True, Messages.SAVED.format(buffer.filename))
        return (False, Messages.NO_FILENAME)

    def _write(self, buffer, argument):
        _, message = self._save(buffer, argument)
        return CommandResult(True, message)

    def _write_quit(self, buffer, argument):
        saved, message = self._save(buffer, argument)
        if saved or not buffer.dirty:
            return CommandResult(False, message if saved else "")
        return CommandResult(True, message)
