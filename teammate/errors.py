"""Typed errors raised by team formation.

None of these subclass ``ValueError``: pydantic wraps ``ValueError`` raised in
validators, and callers need the original type.
"""

from __future__ import annotations


class TeamMateError(Exception):
    """Base class for all team formation errors."""


class ValidationError(TeamMateError):
    """Allocation inputs were rejected before any work started."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class FormationError(TeamMateError):
    """A team failed the completion check; no teams are returned."""

    def __init__(self, team_id: str, size: int, expected_size: int) -> None:
        self.team_id = team_id
        self.size = size
        self.expected_size = expected_size
        super().__init__(f"{team_id} incomplete with only {size} members")


class DataError(TeamMateError):
    """A participant field is outside its valid band."""


class FileProcessingError(TeamMateError):
    """A participant source could not be read or written."""
