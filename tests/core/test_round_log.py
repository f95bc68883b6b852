"""Tests for the round log file."""

import pytest

from blackjack_sim.game import LogWriteError, RoundLog


def test_default_path():
    """Test the log file name when none is given."""
    assert RoundLog().path == "blackjack_log.txt"


def test_append_adds_blank_line(tmp_path):
    """Test each block is followed by one blank line."""
    log = RoundLog(tmp_path / "log.txt")
    log.append("*** Game 1 ***\nPush!")
    log.append("*** Game 2 ***\nDealer Wins!\n")

    text = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert text == "*** Game 1 ***\nPush!\n\n*** Game 2 ***\nDealer Wins!\n\n"


def test_append_keeps_existing_content(tmp_path):
    """Test the log is opened for appending, never truncated."""
    path = tmp_path / "log.txt"
    path.write_text("earlier session\n\n", encoding="utf-8")

    RoundLog(path).append("*** Game 1 ***")

    assert path.read_text(encoding="utf-8").startswith("earlier session\n\n")


def test_unwritable_path(tmp_path):
    """Test an unwritable path raises LogWriteError."""
    log = RoundLog(tmp_path / "missing" / "log.txt")
    with pytest.raises(LogWriteError) as exc_info:
        log.append("*** Game 1 ***")
    assert isinstance(exc_info.value, OSError)
