"""Modal keystroke handling.

ModeController owns the buffer, viewport and current mode. Each mode has a
keymap from (KeyType, value) to a command object; Command mode edits its
pending text directly and hands it to the CommandInterpreter on Enter.
Every keystroke outside Command mode ends with the horizontal clamp for the
(possibly new) mode followed by the scroll check.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from .buffer import TextBuffer
from .commands import CommandInterpreter
from .constants import Messages
from .keyboard import KeyEvent, KeyType
from .modes import CommandMode, InsertMode, Mode, NormalMode, VisualMode
from .selection import SelectionRange, selection_range
from .viewport import Viewport

logger = logging.getLogger(__name__)


class ControllerCommand(ABC):
    """Base class for keystroke commands."""

    @abstractmethod
    def execute(self, controller: 'ModeController', key_event: KeyEvent):
        """Run the command for ``key_event``."""


class MovementCommand(ControllerCommand):
    """Cursor movements shared by Normal, Visual and (arrows only) Insert."""

    def execute(self, controller, key_event):
        self._move(controller.viewport, controller.buffer, controller.mode)

    @abstractmethod
    def _move(self, viewport: Viewport, buffer: TextBuffer, mode: Mode):
        pass


class LeftCommand(MovementCommand):
    def _move(self, viewport, buffer, mode):
        viewport.move_left()


class RightCommand(MovementCommand):
    def _move(self, viewport, buffer, mode):
        viewport.move_right(buffer, past_end=mode.cursor_past_end)


class UpCommand(MovementCommand):
    def _move(self, viewport, buffer, mode):
        viewport.move_up()


class DownCommand(MovementCommand):
    def _move(self, viewport, buffer, mode):
        viewport.move_down(buffer)


class HalfPageDownCommand(MovementCommand):
    def _move(self, viewport, buffer, mode):
        viewport.half_page_down(buffer)


class HalfPageUpCommand(MovementCommand):
    def _move(self, viewport, buffer, mode):
        viewport.half_page_up(buffer)


class EnterInsertCommand(ControllerCommand):
    def execute(self, controller, key_event):
        controller.set_mode(InsertMode())
        controller.status_message = Messages.INSERT_BANNER


class EnterVisualCommand(ControllerCommand):
    def execute(self, controller, key_event):
        controller.set_mode(VisualMode(anchor=controller.viewport.position))
        controller.status_message = Messages.VISUAL_BANNER


class EnterCommandLineCommand(ControllerCommand):
    def execute(self, controller, key_event):
        controller.set_mode(CommandMode(":"))


class ReturnToNormalCommand(ControllerCommand):
    def execute(self, controller, key_event):
        controller.set_mode(NormalMode())
        controller.status_message = ""


class InsertTextCommand(ControllerCommand):
    def execute(self, controller, key_event):
        for ch in key_event.value:
            # Filter out control characters
            if ord(ch) >= 32 or ch == '\t':
                controller.insert_char(ch)


class InsertNewlineCommand(ControllerCommand):
    def execute(self, controller, key_event):
        controller.insert_newline()


class BackspaceCommand(ControllerCommand):
    def execute(self, controller, key_event):
        controller.delete_char()


KeyBinding = Tuple[KeyType, str]


class KeyMap:
    """Mapping from key combinations to commands for one mode."""

    def __init__(self, bindings: Optional[Dict[KeyBinding, ControllerCommand]] = None,
                 text_command: Optional[ControllerCommand] = None):
        self._commands: Dict[KeyBinding, ControllerCommand] = dict(bindings or {})
        self._text_command = text_command

    def register(self, key: KeyBinding, command: ControllerCommand):
        self._commands[key] = command

    def get_command(self, key_event: KeyEvent) -> Optional[ControllerCommand]:
        command = self._commands.get((key_event.key_type, key_event.value))
        if command is None and key_event.key_type == KeyType.REGULAR:
            return self._text_command
        return command


def _arrow_bindings() -> Dict[KeyBinding, ControllerCommand]:
    return {
        (KeyType.SPECIAL, 'left'): LeftCommand(),
        (KeyType.SPECIAL, 'right'): RightCommand(),
        (KeyType.SPECIAL, 'up'): UpCommand(),
        (KeyType.SPECIAL, 'down'): DownCommand(),
    }


def _movement_bindings() -> Dict[KeyBinding, ControllerCommand]:
    """Keys that move the cursor identically in Normal and Visual mode."""
    bindings = _arrow_bindings()
    bindings.update({
        (KeyType.REGULAR, 'h'): LeftCommand(),
        (KeyType.REGULAR, 'l'): RightCommand(),
        (KeyType.REGULAR, 'k'): UpCommand(),
        (KeyType.REGULAR, 'j'): DownCommand(),
        (KeyType.CTRL, 'd'): HalfPageDownCommand(),
        (KeyType.CTRL, 'u'): HalfPageUpCommand(),
    })
    return bindings


def default_keymaps() -> Dict[type, KeyMap]:
    normal = KeyMap(_movement_bindings())
    normal.register((KeyType.REGULAR, 'i'), EnterInsertCommand())
    normal.register((KeyType.REGULAR, 'v'), EnterVisualCommand())
    normal.register((KeyType.REGULAR, ':'), EnterCommandLineCommand())

    visual = KeyMap(_movement_bindings())
    visual.register((KeyType.SPECIAL, 'escape'), ReturnToNormalCommand())

    insert = KeyMap(_arrow_bindings(), text_command=InsertTextCommand())
    insert.register((KeyType.SPECIAL, 'escape'), ReturnToNormalCommand())
    insert.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
    insert.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())

    return {NormalMode: normal, VisualMode: visual, InsertMode: insert}


class ModeController:
    """Finite-state machine over Normal, Insert, Visual and Command mode."""

    def __init__(self, buffer: Optional[TextBuffer] = None,
                 viewport: Optional[Viewport] = None,
                 interpreter: Optional[CommandInterpreter] = None):
        self.buffer = buffer if buffer is not None else TextBuffer()
        self.viewport = viewport if viewport is not None else Viewport()
        self.interpreter = interpreter if interpreter is not None else CommandInterpreter()
        self.mode: Mode = NormalMode()
        self.status_message = ""
        self.keymaps = default_keymaps()

    def set_mode(self, mode: Mode):
        logger.debug(f"Mode {self.mode.name} -> {mode.name}")
        self.mode = mode

    def selection(self) -> Optional[SelectionRange]:
        return selection_range(self.mode, self.viewport.position)

    def handle_key(self, key_event: KeyEvent) -> bool:
        """Process one keystroke.

        Returns:
            False when the editor should exit, True otherwise.
        """
        if isinstance(self.mode, CommandMode):
            return self._handle_command_key(self.mode, key_event)

        # Keep the last message visible while the command line is open
        if not (isinstance(self.mode, NormalMode) and key_event.key_type == KeyType.REGULAR
                and key_event.value == ':'):
            self.status_message = ""
        command = self.keymaps[type(self.mode)].get_command(key_event)
        if command is not None:
            command.execute(self, key_event)
        self.finish_keystroke()
        return True

    def finish_keystroke(self):
        """Re-establish the cursor invariants for the current mode."""
        self.viewport.clamp_horizontal(self.buffer, self.mode.cursor_past_end)
        self.viewport.scroll_check(self.buffer)

    def _handle_command_key(self, mode: CommandMode, key_event: KeyEvent) -> bool:
        if key_event.key_type == KeyType.SPECIAL:
            if key_event.value == 'enter':
                self.set_mode(NormalMode())
                result = self.interpreter.execute(self.buffer, mode.pending)
                self.status_message = result.status_message
                self.finish_keystroke()
                return result.continue_running
            if key_event.value == 'escape':
                self.set_mode(NormalMode())
                self.status_message = ""
            elif key_event.value == 'backspace':
                if len(mode.pending) > 1:
                    self.set_mode(mode.backspace())
                else:
                    # Deleting the leading colon aborts the command line
                    self.set_mode(NormalMode())
                    self.status_message = ""
        elif key_event.key_type == KeyType.REGULAR:
            self.set_mode(mode.append(key_event.value))
        return True

    # --- Editing at the cursor ---

    def _clamp_to_line_end(self) -> int:
        """Pull cx back to the end of the current line and return the row."""
        row = self.viewport.row
        line_length = self.buffer.line_length(row)
        if self.viewport.cx > line_length:
            self.viewport.cx = line_length
        return row

    def insert_char(self, ch: str):
        row = self._clamp_to_line_end()
        self.buffer.insert_char(row, self.viewport.cx, ch)
        self.viewport.cx += 1

    def insert_newline(self):
        row = self._clamp_to_line_end()
        self.buffer.split_line(row, self.viewport.cx)
        self.viewport.cx = 0
        self.viewport.step_down()

    def delete_char(self):
        """Backspace: delete left of the cursor, or join with the line above."""
        row = self._clamp_to_line_end()
        if self.viewport.cx > 0:
            self.buffer.delete_char_before(row, self.viewport.cx)
            self.viewport.cx -= 1
        elif row > 0:
            prev_length = self.buffer.join_with_previous(row)
            self.viewport.step_up()
            self.viewport.cx = prev_length
