"""vimlet CLI entry point.

Allows running via `python -m vimlet` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys

from .version import get_version_string

logger = logging.getLogger("vimlet")


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging(level: str) -> None:
    """Send log records to a file; the terminal belongs to the editor."""
    from .settings import log_dir

    logger.setLevel(level)
    if logger.handlers:
        # Already configured by an earlier call in this process
        return
    directory = log_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(directory / "vimlet.log", encoding='utf-8')
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)


def run_keyboard_test() -> None:
    """Print parsed key events until Escape is pressed."""
    from .keyboard import KeyboardHandler, KeyType
    from .terminal import TerminalInterface

    print("Keyboard test mode: press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    kb = KeyboardHandler(term)
    with term.session():
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value!r}",
                     f"raw='{_escape_bytes(ev.raw)}'"]
            if ev.modifiers:
                parts.append(f"mods={'+'.join(sorted(ev.modifiers))}")
            print(' '.join(parts), end='\r\n', flush=True)
    print("Exiting keyboard test.")


def main(argv: list[str] | None = None) -> int:
    # Very small arg parsing: version, keyboard test mode, optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return 0

    from .settings import load_settings
    settings = load_settings()
    configure_logging(settings.log_level)

    # Lazy import to avoid importing terminal deps for --version
    from .editor import Editor
    from .filestore import FileStoreError
    try:
        editor = Editor.open(args[0] if args else None, settings=settings)
    except FileStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    editor.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
