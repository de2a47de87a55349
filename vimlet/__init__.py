"""vimlet - the editing core of a small modal text editor."""

from .buffer import TextBuffer
from .commands import CommandInterpreter, CommandResult
from .controller import ModeController
from .filestore import FileStoreError
from .keyboard import KeyEvent, KeyType
from .modes import CommandMode, InsertMode, NormalMode, Position, VisualMode
from .render import RenderSnapshot, build_snapshot
from .viewport import Viewport, clamp_column

__all__ = [
    'TextBuffer',
    'CommandInterpreter',
    'CommandResult',
    'ModeController',
    'FileStoreError',
    'KeyEvent',
    'KeyType',
    'NormalMode',
    'InsertMode',
    'VisualMode',
    'CommandMode',
    'Position',
    'RenderSnapshot',
    'build_snapshot',
    'Viewport',
    'clamp_column',
]
