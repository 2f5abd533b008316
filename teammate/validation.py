"""Input validation helpers.

Each ``validate_*`` function returns a list of human-readable violations;
an empty list means the input is valid.
"""

from __future__ import annotations

import re


VALID_GAMES: list[str] = [
    "Valorant",
    "Dota",
    "FIFA",
    "Basketball",
    "Badminton",
    "CSGO",
    "League of Legends",
    "Overwatch",
]

DEFAULT_EMAIL_DOMAIN = "iit.ac.lk"

_NAME_PATTERN = re.compile(r"^[a-zA-Z\s\-'.’]+$")


# ---------------------------------------------------------------------------
# Games
# ---------------------------------------------------------------------------
def normalize_game_name(game: str | None) -> str | None:
    """Map *game* onto its canonical spelling (case-insensitive).

    Blank input becomes ``None``; unknown games are returned unchanged.
    """
    if game is None or not game.strip():
        return None
    wanted = game.strip().lower()
    return next((g for g in VALID_GAMES if g.lower() == wanted), game)


def is_valid_game(game: str | None) -> bool:
    if game is None:
        return False
    wanted = game.strip().lower()
    return any(g.lower() == wanted for g in VALID_GAMES)


# ---------------------------------------------------------------------------
# Team size
# ---------------------------------------------------------------------------
def validate_team_size(team_size: int, participant_count: int) -> list[str]:
    """Check that *participant_count* people can fill at least one team."""
    errors: list[str] = []
    if team_size <= 0:
        errors.append("Team size must be positive")
    if participant_count < team_size:
        errors.append(f"Not enough participants ({participant_count}) for team size {team_size}")
    return errors


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------
def is_valid_email(email: str | None, domain: str = DEFAULT_EMAIL_DOMAIN) -> bool:
    if not email:
        return False
    pattern = rf"^[A-Za-z0-9+_.-]+@{re.escape(domain)}$"
    return re.match(pattern, email.strip(), re.IGNORECASE) is not None


def validate_name(name: str | None) -> list[str]:
    errors: list[str] = []
    stripped = (name or "").strip()
    if not stripped:
        errors.append("Name cannot be empty")
    elif len(stripped) < 2:
        errors.append("Name must be at least 2 characters long")
    elif len(stripped) > 50:
        errors.append("Name cannot exceed 50 characters")
    elif not _NAME_PATTERN.match(stripped):
        errors.append("Name can only contain letters, spaces, hyphens, and apostrophes")
    return errors


def validate_participant_fields(
    name: str | None,
    email: str | None,
    game_interest: str | None,
    email_domain: str = DEFAULT_EMAIL_DOMAIN,
) -> list[str]:
    """Format checks on raw intake fields, before any id is issued."""
    errors: list[str] = []
    errors.extend(validate_name(name))
    if not is_valid_email(email, email_domain):
        errors.append(f"Email must be a valid @{email_domain} address")
    if not is_valid_game(game_interest):
        errors.append("Invalid game interest. Valid games: " + ", ".join(VALID_GAMES))
    return errors

