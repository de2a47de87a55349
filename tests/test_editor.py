"""Tests for the editor main loop with a scripted terminal."""

import contextlib

from vimlet.buffer import TextBuffer
from vimlet.constants import Messages
from vimlet.editor import Editor
from vimlet.settings import EditorSettings


class ScriptedTerminal:
    """Terminal interface that replays key tokens and records frames."""

    def __init__(self, keys, width=40, height=10):
        self.keys = list(keys)
        self.width = width
        self.height = height
        self.frames = []
        self.sessions = 0
        self.timeouts = []

    @contextlib.contextmanager
    def session(self):
        self.sessions += 1
        yield self

    def get_key(self, timeout=None):
        self.timeouts.append(timeout)
        if not self.keys:
            raise AssertionError("editor asked for more keys than were scripted")
        key = self.keys.pop(0)
        if callable(key):
            return key(self)
        return key

    def draw(self, snapshot, full_clear=False):
        self.frames.append((snapshot, full_clear))


QUIT = [':', 'q', '<Ctrl-j>']


def test_initial_status_without_file():
    """A scratch session starts with the help hint."""
    editor = Editor(terminal=ScriptedTerminal([]))
    assert editor.controller.status_message == Messages.HELP


def test_initial_status_with_file(tmp_path):
    """Opening a file reports that it was loaded."""
    path = tmp_path / "a.txt"
    path.write_text("one\ntwo", encoding='utf-8')
    editor = Editor.open(str(path), terminal=ScriptedTerminal([]))
    assert editor.controller.buffer.lines() == ["one", "two"]
    assert editor.controller.status_message == f"Loaded file: {path}"


def test_open_missing_file_starts_empty(tmp_path):
    """A missing file opens as an empty buffer bound to its name."""
    path = tmp_path / "new.txt"
    editor = Editor.open(str(path), terminal=ScriptedTerminal([]))
    assert editor.controller.buffer.lines() == [""]
    assert editor.controller.buffer.filename == str(path)


def test_viewport_sized_from_terminal():
    """The viewport takes the terminal's text area size."""
    editor = Editor(terminal=ScriptedTerminal([], width=33, height=7))
    assert editor.controller.viewport.screen_rows == 7
    assert editor.controller.viewport.screen_cols == 33


def test_run_quits_on_colon_q():
    """The loop draws once per handled key and stops on :q."""
    terminal = ScriptedTerminal(QUIT)
    editor = Editor(terminal=terminal)
    editor.run()
    assert editor.running is False
    assert terminal.sessions == 1
    assert not terminal.keys
    # Initial frame plus one per key that kept the editor running
    assert len(terminal.frames) == 3
    assert terminal.frames[0][1] is True


def test_run_types_text_and_saves(tmp_path):
    """Typed text reaches the file through :wq."""
    path = tmp_path / "out.txt"
    keys = ['i', 'h', 'i', '<ESC>'] + [':', 'w', 'q', '<Ctrl-j>']
    terminal = ScriptedTerminal(keys)
    editor = Editor(TextBuffer(filename=str(path)), terminal=terminal)
    editor.run()
    assert path.read_text(encoding='utf-8') == "hi"


def test_no_redraw_while_idle():
    """Poll timeouts without input do not repaint."""
    terminal = ScriptedTerminal([None, None, None] + QUIT)
    editor = Editor(terminal=terminal)
    editor.run()
    assert len(terminal.frames) == 3


def test_resize_triggers_full_redraw():
    """A terminal resize repaints with a full clear."""
    def shrink(term):
        term.height = 4
        return None

    terminal = ScriptedTerminal([shrink] + QUIT)
    editor = Editor(terminal=terminal)
    editor.run()
    assert editor.controller.viewport.screen_rows == 4
    assert terminal.frames[1][1] is True
    assert terminal.frames[1][0].tilde_rows == 3


def test_dirty_buffer_needs_force_quit():
    """:q is refused on a dirty buffer and :q! quits."""
    keys = ['i', 'x', '<ESC>'] + QUIT + [':', 'q', '!', '<Ctrl-j>']
    terminal = ScriptedTerminal(keys)
    editor = Editor(terminal=terminal)
    editor.run()
    assert not terminal.keys
    statuses = [snap.status_left for snap, _ in terminal.frames]
    assert Messages.UNSAVED_CHANGES in statuses


def test_poll_timeout_from_settings():
    """The key wait uses the configured poll timeout."""
    terminal = ScriptedTerminal(QUIT)
    editor = Editor(settings=EditorSettings(poll_timeout=0.25), terminal=terminal)
    editor.run()
    assert set(terminal.timeouts) == {0.25}


def test_welcome_setting_is_passed_to_snapshot():
    """show_welcome=False hides the welcome banner."""
    terminal = ScriptedTerminal(QUIT)
    editor = Editor(settings=EditorSettings(show_welcome=False), terminal=terminal)
    editor.run()
    assert terminal.frames[0][0].welcome_row is None
