"""Runtime settings read from ``TEAMMATE_*`` environment variables.

Entry points call ``load_dotenv()`` first, so a ``.env`` file works too.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field

from teammate.validation import DEFAULT_EMAIL_DOMAIN


logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Paths and defaults for a team formation session."""

    team_size: int = Field(default=5, ge=1)
    players_csv: str = "players.csv"
    teams_csv: str = "formed_teams.csv"
    summary_json: str = "formation_summary.json"
    email_domain: str = Field(default=DEFAULT_EMAIL_DOMAIN, min_length=1)
    seed: int | None = None
    log_level: str = "INFO"


def _int_from_env(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_settings() -> Settings:
    """Build ``Settings`` from the environment, falling back to defaults.

    Raises:
        ValueError: If an integer variable is malformed.
    """
    overrides: dict[str, object] = {}

    team_size = _int_from_env("TEAMMATE_TEAM_SIZE")
    if team_size is not None:
        overrides["team_size"] = team_size
    seed = _int_from_env("TEAMMATE_SEED")
    if seed is not None:
        overrides["seed"] = seed

    for field_name, env_name in (
        ("players_csv", "TEAMMATE_PLAYERS_CSV"),
        ("teams_csv", "TEAMMATE_TEAMS_CSV"),
        ("summary_json", "TEAMMATE_SUMMARY_JSON"),
        ("email_domain", "TEAMMATE_EMAIL_DOMAIN"),
        ("log_level", "TEAMMATE_LOG_LEVEL"),
    ):
        value = os.getenv(env_name, "").strip()
        if value:
            overrides[field_name] = value

    settings = Settings(**overrides)
    logger.info(
        "Settings: team_size=%d players_csv=%s seed=%s",
        settings.team_size, settings.players_csv, settings.seed if settings.seed is not None else "(random)",
    )
    return settings
