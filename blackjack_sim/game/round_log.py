"""Append-only text log of played rounds."""

import os


class LogWriteError(OSError):
    """Raised when a round could not be appended to the log file."""


class RoundLog:
    """Appends one human-readable block per round to a text file."""

    DEFAULT_PATH = "blackjack_log.txt"

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = os.fspath(path or self.DEFAULT_PATH)

    def append(self, block: str) -> None:
        """
        Append a round block followed by a blank line.

        Raises:
            LogWriteError: If the file cannot be opened or written
        """
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(block.rstrip("\n") + "\n\n")
        except OSError as exc:
            raise LogWriteError(f"Cannot append to round log {self.path}: {exc}") from exc
