"""Loading and saving documents as lists of lines.

Text is split on ``\\n`` only and universal-newline translation is disabled,
so a save of an unmodified document reproduces the original bytes.
"""

import errno
import logging
import os
import shutil
import tempfile

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class FileStoreError(OSError):
    """A load or save failed for a reason other than a missing file."""


def split_lines(content: str) -> list[str]:
    """Split file content into lines.

    A trailing newline yields a final empty line so that joining the result
    with ``\\n`` reproduces ``content`` exactly.
    """
    return content.split('\n')


def join_lines(lines: list[str]) -> str:
    return '\n'.join(lines)


def load_lines(path: str) -> list[str]:
    """Read ``path`` and return its lines.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        FileStoreError: for any other read or decode failure.
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except FileNotFoundError:
        raise
    except UnicodeDecodeError as e:
        logger.warning(f"Could not decode {path}: {e}")
        raise FileStoreError(f"Cannot decode {path} as UTF-8") from e
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        raise FileStoreError(f"Cannot read {path}: {e.strerror or e}") from e
    logger.info(f"Loaded {len(content)} characters from {path}")
    return split_lines(content)


def save_lines(path: str, lines: list[str]) -> None:
    """Write ``lines`` to ``path`` atomically.

    The content goes to a temporary file in the target's directory, is
    flushed to disk, then renamed over the target.

    Raises:
        FileStoreError: with a message suitable for the status line.
    """
    content = join_lines(lines)
    dir_name = os.path.dirname(path) or '.'
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', newline='',
                                         dir=dir_name,
                                         suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        _apply_target_mode(path, temp_filename)
        os.replace(temp_filename, path)
    except PermissionError as e:
        _remove_quietly(temp_filename)
        logger.warning(f"Permission denied saving {path}: {e}")
        raise FileStoreError(f"Error: Permission denied saving {path}") from e
    except OSError as e:
        _remove_quietly(temp_filename)
        logger.warning(f"Could not save {path}: {e}")
        if e.errno == errno.ENOSPC:
            raise FileStoreError("Error: No space left on device") from e
        raise FileStoreError(f"Error: Cannot save to {path}") from e
    logger.info(f"Saved {len(lines)} lines to {path}")


def _apply_target_mode(path: str, temp_filename: str) -> None:
    """Give the temporary file the permissions the saved file should have.

    An existing target keeps its mode; a new file gets the usual
    ``0o666 & ~umask`` instead of the private mode of a temporary file.
    """
    try:
        shutil.copymode(path, temp_filename)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(temp_filename, 0o666 & ~umask)


def _remove_quietly(filename) -> None:
    if filename and os.path.exists(filename):
        try:
            os.remove(filename)
        except OSError:
            logger.warning(f"Could not remove temporary file {filename}")
