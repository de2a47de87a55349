import pytest

from vimlet.keyboard import KeyEvent


def key(shorthand: str) -> KeyEvent:
    """Build a key event from a short name: 'a', '<esc>', '<enter>', '<C-d>'."""
    if shorthand.startswith('<C-') and shorthand.endswith('>'):
        return KeyEvent.ctrl(shorthand[3:-1])
    if len(shorthand) > 2 and shorthand.startswith('<') and shorthand.endswith('>'):
        name = shorthand[1:-1]
        return KeyEvent.special('escape' if name == 'esc' else name)
    return KeyEvent.char(shorthand)


@pytest.fixture
def press():
    """Feed keys to a controller; returns the result of the last keystroke.

    A multi-character string without angle brackets is typed one character
    at a time.
    """
    def _press(controller, *keys):
        result = True
        for shorthand in keys:
            if len(shorthand) > 1 and not shorthand.startswith('<'):
                for ch in shorthand:
                    result = controller.handle_key(KeyEvent.char(ch))
            else:
                result = controller.handle_key(key(shorthand))
        return result
    return _press
