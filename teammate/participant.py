"""Participant model and construction helpers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from teammate.errors import DataError
from teammate.id_generator import IdGenerator
from teammate.personality import (
    PERSONALITY_DISPLAY_NAMES,
    ROLE_DISPLAY_NAMES,
    GameRole,
    PersonalityType,
    classify,
    parse_game_role,
)
from teammate.validation import normalize_game_name


MIN_SKILL = 1
MAX_SKILL = 10


class Participant(BaseModel):
    """A survey respondent eligible for team formation.

    ``personality_type`` is computed from ``personality_score`` on every read,
    and assignments are re-validated, so the two can never disagree.
    """

    model_config = ConfigDict(validate_assignment=True)

    participant_id: str = Field(..., min_length=1, frozen=True)
    name: str
    email: str
    game_interest: str | None = None
    skill_level: int
    preferred_role: GameRole
    personality_score: int

    @field_validator("game_interest")
    @classmethod
    def normalize_game_interest(cls, v: str | None) -> str | None:
        return normalize_game_name(v)

    @field_validator("skill_level")
    @classmethod
    def check_skill_level(cls, v: int) -> int:
        if v < MIN_SKILL or v > MAX_SKILL:
            raise DataError(f"Skill level must be between {MIN_SKILL}-{MAX_SKILL}: {v}")
        return v

    @field_validator("preferred_role", mode="before")
    @classmethod
    def parse_role(cls, v: Any) -> Any:
        return parse_game_role(v) if isinstance(v, str) else v

    @field_validator("personality_score")
    @classmethod
    def check_personality_score(cls, v: int) -> int:
        classify(v)  # raises DataError outside the scored range
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def personality_type(self) -> PersonalityType:
        return classify(self.personality_score)

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.participant_id}) - {self.game_interest} | "
            f"Email: {self.email} | Role: {ROLE_DISPLAY_NAMES[self.preferred_role]} | "
            f"Personality: {PERSONALITY_DISPLAY_NAMES[self.personality_type]}"
        )


def create_participant(
    ids: IdGenerator,
    *,
    name: str,
    email: str,
    game_interest: str | None,
    skill_level: int,
    preferred_role: GameRole | str,
    personality_score: int,
) -> Participant:
    """Build a new participant with a freshly issued id.

    Raises:
        DataError: If skill or score is out of band, or the role is unknown.
    """
    return Participant(
        participant_id=ids.next_id(),
        name=name,
        email=email,
        game_interest=game_interest,
        skill_level=skill_level,
        preferred_role=preferred_role,
        personality_score=personality_score,
    )


def reload_participant(
    ids: IdGenerator,
    participant_id: str,
    *,
    name: str,
    email: str,
    game_interest: str | None,
    skill_level: int,
    preferred_role: GameRole | str,
    personality_score: int,
) -> Participant:
    """Rebuild a previously persisted participant, keeping its id.

    The generator is advanced so it never reissues *participant_id* or
    anything below it.
    """
    participant = Participant(
        participant_id=participant_id,
        name=name,
        email=email,
        game_interest=game_interest,
        skill_level=skill_level,
        preferred_role=preferred_role,
        personality_score=personality_score,
    )
    ids.advance_if_collides(participant.participant_id)
    return participant
