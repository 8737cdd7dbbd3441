from __future__ import annotations

"""Shared exception types for lineup generation and its input files."""

from typing import Iterable


class LineupError(RuntimeError):
    """Base class for errors raised around lineup generation."""


class LineupInputError(LineupError):
    """Raised when a roster/game pair cannot be handed to the generator."""

    def __init__(self, problems: Iterable[str] | None = None):
        self.problems = list(problems or [])
        message = "Lineup inputs are invalid; fix the game setup before generating."
        if self.problems:
            message += " " + " ".join(self.problems)
        super().__init__(message)


class RosterFileError(LineupError):
    """Raised when a roster or lineup CSV row cannot be parsed."""

    def __init__(self, path: object, row_number: int, reason: str):
        self.path = path
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"{path}: row {row_number}: {reason}")


__all__ = ["LineupError", "LineupInputError", "RosterFileError"]
