"""Constants and user-visible texts for the vimlet editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Input polling
    POLL_TIMEOUT = 0.1  # Seconds to wait for a key before redrawing anyway

    # File operations
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Screen
    STATUS_ROWS = 1  # Rows reserved at the bottom for the status bar
    EMPTY_ROW_MARKER = "~"
    WELCOME_MESSAGE = "Vim-like Editor - v0.0.1"
    NO_NAME = "[No Name]"
    DIRTY_MARKER = " [+]"

    # Cursor shapes (DECSCUSR)
    CURSOR_BLOCK = "\x1b[2 q"
    CURSOR_BAR = "\x1b[6 q"
    CURSOR_DEFAULT = "\x1b[0 q"


class Messages:
    """Status line texts."""

    HELP = "HELP: :q = quit"
    LOADED = "Loaded file: {}"
    SAVED = "Saved file: {}"
    NO_FILENAME = "No filename specified. Use :w <filename>"
    UNSAVED_CHANGES = "No write since last change (use :q! to override)"
    UNKNOWN_COMMAND = "Unknown command: {}"
    INSERT_BANNER = "-- INSERT --"
    VISUAL_BANNER = "-- VISUAL --"
