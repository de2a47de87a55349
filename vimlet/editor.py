"""Main editor session: wait for a key, dispatch it, redraw."""

import logging
from typing import Optional

from .buffer import TextBuffer
from .constants import Messages
from .controller import ModeController
from .keyboard import KeyboardHandler
from .render import build_snapshot
from .settings import EditorSettings
from .terminal import TerminalInterface
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Editor:
    """Wires the editing core to a terminal."""

    def __init__(self, buffer: Optional[TextBuffer] = None,
                 settings: Optional[EditorSettings] = None,
                 terminal: Optional[TerminalInterface] = None):
        self.settings = settings or EditorSettings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        viewport = Viewport(self.terminal.height, self.terminal.width)
        self.controller = ModeController(buffer or TextBuffer(), viewport)
        if self.controller.buffer.filename:
            self.controller.status_message = Messages.LOADED.format(self.controller.buffer.filename)
        else:
            self.controller.status_message = Messages.HELP
        self.running = False

    @classmethod
    def open(cls, filename: Optional[str] = None, **kwargs) -> "Editor":
        """Create an editor on ``filename`` (missing files start empty).

        Raises:
            FileStoreError: if the file exists but cannot be read.
        """
        buffer = TextBuffer.load(filename) if filename else TextBuffer()
        return cls(buffer, **kwargs)

    def _sync_size(self) -> bool:
        return self.controller.viewport.resize(self.terminal.height, self.terminal.width,
                                               self.controller.buffer)

    def _draw(self, full_clear: bool = False):
        snapshot = build_snapshot(self.controller, show_welcome=self.settings.show_welcome)
        self.terminal.draw(snapshot, full_clear=full_clear)

    def run(self):
        """Run the main loop until a command asks to quit."""
        self.running = True
        with self.terminal.session():
            self._sync_size()
            self._draw(full_clear=True)
            while self.running:
                key_event = self.keyboard.get_key_event(timeout=self.settings.poll_timeout)
                resized = self._sync_size()
                need_draw = resized
                if key_event is not None:
                    self.running = self.controller.handle_key(key_event)
                    need_draw = True
                if self.running and need_draw:
                    self._draw(full_clear=resized)
        logger.info("Editor exited")
