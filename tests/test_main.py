"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

import pytest

from vimlet import __main__ as cli
from vimlet.filestore import FileStoreError


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    monkeypatch.setenv("VIMLET_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setattr("vimlet.settings.log_dir", lambda: tmp_path / "logs")
    yield tmp_path
    logger = logging.getLogger("vimlet")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_version_flag(capsys):
    """--version prints the version string and exits 0."""
    with patch.object(cli, "get_version_string", return_value="1.2.3"):
        assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "1.2.3"


def test_opens_named_file():
    """A filename argument is opened in the editor."""
    with patch("vimlet.editor.Editor.open") as mock_open:
        assert cli.main(["notes.txt"]) == 0
    assert mock_open.call_args[0] == ("notes.txt",)
    mock_open.return_value.run.assert_called_once()


def test_opens_scratch_buffer_without_argument():
    """No argument opens a scratch buffer."""
    with patch("vimlet.editor.Editor.open") as mock_open:
        cli.main([])
    assert mock_open.call_args[0] == (None,)


def test_unreadable_file_exits_with_error(capsys):
    """A load error is printed to stderr with exit status 1."""
    with patch("vimlet.editor.Editor.open", side_effect=FileStoreError("Cannot read x")):
        assert cli.main(["x"]) == 1
    assert "Error: Cannot read x" in capsys.readouterr().err


def test_logging_goes_to_file(isolated_dirs):
    """Log records go to vimlet.log in the log directory."""
    cli.configure_logging("DEBUG")
    logging.getLogger("vimlet.test").debug("hello log")
    for handler in logging.getLogger("vimlet").handlers:
        handler.flush()
    log_file = isolated_dirs / "logs" / "vimlet.log"
    assert "hello log" in log_file.read_text(encoding='utf-8')


def test_settings_log_level_applied(isolated_dirs):
    """The log_level setting sets the package logger level."""
    config = isolated_dirs / "config"
    config.mkdir()
    (config / "settings.json").write_text('{"log_level": "error"}', encoding='utf-8')
    with patch("vimlet.editor.Editor.open"):
        cli.main([])
    assert logging.getLogger("vimlet").level == logging.ERROR


def test_repeated_configuration_does_not_duplicate_records(isolated_dirs):
    """Calling main twice in one process logs each record once."""
    with patch("vimlet.editor.Editor.open"):
        cli.main([])
        cli.main([])
    logger = logging.getLogger("vimlet")
    assert len(logger.handlers) == 1
    cli.configure_logging("INFO")
    logging.getLogger("vimlet.test").info("only once")
    logger.handlers[0].flush()
    log_text = (isolated_dirs / "logs" / "vimlet.log").read_text(encoding='utf-8')
    assert log_text.count("only once") == 1
    assert logger.level == logging.INFO
