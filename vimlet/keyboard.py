"""Keyboard input: curtsies-style tokens parsed into key events."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    ALT = "alt"
    SPECIAL = "special"


@dataclass(frozen=True)
class KeyEvent:
    """One logical key press.

    ``value`` is a printable character for REGULAR keys, the base letter for
    CTRL/ALT keys, and a name such as 'up', 'enter', 'escape' or 'backspace'
    for SPECIAL keys.
    """
    key_type: KeyType
    value: str
    raw: str = ""
    is_ctrl: bool = False
    is_alt: bool = False

    @property
    def modifiers(self) -> frozenset:
        mods = set()
        if self.is_ctrl:
            mods.add('ctrl')
        if self.is_alt:
            mods.add('alt')
        return frozenset(mods)

    @classmethod
    def char(cls, ch: str) -> "KeyEvent":
        return cls(KeyType.REGULAR, ch, raw=ch)

    @classmethod
    def special(cls, name: str) -> "KeyEvent":
        return cls(KeyType.SPECIAL, name, raw=name)

    @classmethod
    def ctrl(cls, letter: str) -> "KeyEvent":
        return cls(KeyType.CTRL, letter, raw=chr(ord(letter) - ord('a') + 1), is_ctrl=True)


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert',
}

# Token names that several terminals/curtsies versions use for the same key
_ALIASES = {
    'esc': 'escape',
    'return': 'enter',
    'pageup': 'page_up',
    'pagedown': 'page_down',
    'page_up': 'page_up',
    'page_down': 'page_down',
    'space': ' ',
    'spacebar': ' ',
    'spc': ' ',
    'tab': '\t',
}

# Control letters that terminals deliver for named keys
_CTRL_AS_SPECIAL = {
    'j': 'enter',
    'm': 'enter',
    'h': 'backspace',
}


class KeyboardHandler:
    """Reads tokens from a terminal interface and parses them."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Wait up to ``timeout`` seconds for the next key event."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies token (e.g. '<UP>', '<Ctrl-d>') or a raw string."""
        key_str = str(key)
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)
        return self._parse_raw(key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1].lower().replace('+', '-')
        # A literal '-' key must survive the modifier split
        if name.endswith('--'):
            parts = name[:-2].split('-') + ['-']
        else:
            parts = name.split('-')
        base = parts[-1]
        mods = set(parts[:-1])
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')
        base = _ALIASES.get(base, base)

        if 'ctrl' in mods and len(base) == 1:
            if base == 'i':
                return KeyEvent.char('\t')
            if base in _CTRL_AS_SPECIAL:
                return KeyEvent(KeyType.SPECIAL, _CTRL_AS_SPECIAL[base], raw=key_str)
            return KeyEvent(KeyType.CTRL, base, raw=key_str, is_ctrl=True)
        if 'alt' in mods:
            return KeyEvent(KeyType.ALT, base, raw=key_str, is_alt=True)
        if base in (' ', '\t'):
            return KeyEvent.char(base)
        if base == 'escape' or base in SPECIAL_KEYS:
            return KeyEvent(KeyType.SPECIAL, base, raw=key_str)
        if len(base) == 1:
            # Tokens such as '<a>' that some inputs produce for plain keys
            return KeyEvent(KeyType.REGULAR, key_str[1:-1], raw=key_str)
        return KeyEvent(KeyType.SPECIAL, base, raw=key_str)

    def _parse_raw(self, key_str: str) -> KeyEvent:
        if key_str == '\x1b':
            return KeyEvent(KeyType.SPECIAL, 'escape', raw=key_str)
        if key_str == '\x7f':
            return KeyEvent(KeyType.SPECIAL, 'backspace', raw=key_str)
        if key_str == '\t':
            return KeyEvent.char('\t')
        if len(key_str) == 1 and 1 <= ord(key_str) <= 26:
            ch = chr(ord('a') + ord(key_str) - 1)
            if ch in _CTRL_AS_SPECIAL:
                return KeyEvent(KeyType.SPECIAL, _CTRL_AS_SPECIAL[ch], raw=key_str)
            return KeyEvent(KeyType.CTRL, ch, raw=key_str, is_ctrl=True)
        return KeyEvent(KeyType.REGULAR, key_str, raw=key_str)
