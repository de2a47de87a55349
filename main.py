#!/usr/bin/env python3
"""vimlet - a small modal text editor.

Usage:
    python main.py [filename]

Modes:
    Normal: h j k l / arrows move, Ctrl-D / Ctrl-U scroll half a page,
            i enters Insert, v enters Visual, : opens the command line
    Insert: type to insert text, Enter splits, Backspace deletes, Esc leaves
    Visual: movement extends the selection, Esc leaves
    Command: :q  :q!  :w [name]  :wq [name]
"""

import sys

from vimlet.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
