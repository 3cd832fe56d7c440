"""Exception hierarchy for the fars package."""

from __future__ import annotations

from typing import Iterable


class FarsError(Exception):
    """Base exception for all fars errors."""


class MissingColumnsError(FarsError, KeyError):
    """A data file lacks columns the caller needs."""

    def __init__(self, filename: str, missing: Iterable[str]) -> None:
        self.filename = filename
        self.missing = sorted(missing)
        super().__init__(f"file '{filename}' is missing required columns: {', '.join(self.missing)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidYearError(FarsError, ValueError):
    """A year value could not be coerced to a whole number."""

    def __init__(self, year: object) -> None:
        self.year = year
        super().__init__(f"invalid year: {year!r}")


class InvalidStateError(FarsError, ValueError):
    """The state code does not occur in the loaded year's data."""

    def __init__(self, state: int) -> None:
        self.state = state
        super().__init__(f"invalid STATE number: {state}")


class FarsYearWarning(UserWarning):
    """One year of a multi-year load failed and was skipped."""
