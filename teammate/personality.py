"""Personality and role vocabularies.

Participants are classified by personality score into one of three types
(leader / thinker / balanced). Display text is kept in lookup tables, apart from
the values themselves.
"""

from __future__ import annotations

from typing import Literal, get_args

from teammate.errors import DataError


# ---------------------------------------------------------------------------
# Personality types
# ---------------------------------------------------------------------------
PersonalityType = Literal["leader", "thinker", "balanced"]

PERSONALITY_TYPES: tuple[PersonalityType, ...] = get_args(PersonalityType)

PERSONALITY_DISPLAY_NAMES: dict[str, str] = {
    "leader": "Leader",
    "thinker": "Thinker",
    "balanced": "Balanced",
}

MIN_SCORE = 50
MAX_SCORE = 100

# Lower bounds (inclusive) of the upper two bands.
_LEADER_THRESHOLD = 90
_BALANCED_THRESHOLD = 70

# Closed score intervals per type; together they tile [MIN_SCORE, MAX_SCORE].
PERSONALITY_BANDS: dict[str, tuple[int, int]] = {
    "thinker": (MIN_SCORE, _BALANCED_THRESHOLD - 1),
    "balanced": (_BALANCED_THRESHOLD, _LEADER_THRESHOLD - 1),
    "leader": (_LEADER_THRESHOLD, MAX_SCORE),
}


def classify(score: int) -> PersonalityType:
    """Classify a personality score into leader / thinker / balanced.

    Args:
        score: Personality score in [50, 100].

    Returns:
        The personality type whose band contains *score*.

    Raises:
        DataError: If *score* is outside [50, 100].
    """
    if score < MIN_SCORE or score > MAX_SCORE:
        raise DataError(f"Personality score must be between {MIN_SCORE}-{MAX_SCORE}: {score}")
    if score >= _LEADER_THRESHOLD:
        return "leader"
    if score >= _BALANCED_THRESHOLD:
        return "balanced"
    return "thinker"


# ---------------------------------------------------------------------------
# Game roles
# ---------------------------------------------------------------------------
GameRole = Literal["strategist", "defender", "attacker", "support", "all_rounder"]

GAME_ROLES: tuple[GameRole, ...] = get_args(GameRole)

ROLE_DISPLAY_NAMES: dict[str, str] = {
    "strategist": "Strategist",
    "defender": "Defender",
    "attacker": "Attacker",
    "support": "Support",
    "all_rounder": "All-Rounder",
}


def parse_game_role(text: str) -> GameRole:
    """Parse ``ALL_ROUNDER`` / ``All-Rounder`` / ``all rounder`` style role text."""
    key = (text or "").strip().lower().replace("-", "_").replace(" ", "_")
    for role in GAME_ROLES:
        if role == key:
            return role
    valid = ", ".join(ROLE_DISPLAY_NAMES.values())
    raise DataError(f"Invalid role '{text}'. Valid roles: {valid}")
