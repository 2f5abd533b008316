"""Export formed teams and their analysis."""

from __future__ import annotations

from collections.abc import Sequence
import csv
import json
import logging
from pathlib import Path

from teammate.engine.formation_analysis import FormationSummary
from teammate.errors import FileProcessingError
from teammate.team import Team


logger = logging.getLogger(__name__)

_CSV_COLUMNS = ["TeamID", "TeamName", "MemberCount", "AverageSkill", "Members", "GameInterests"]


def export_teams_to_csv(teams: Sequence[Team], filepath: str) -> str:
    """Write one row per team.

    Args:
        teams: Formed teams.
        filepath: Output file path; parent directories are created.

    Returns:
        The filepath written.
    """
    try:
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(_CSV_COLUMNS)
            for team in teams:
                writer.writerow([
                    team.team_id,
                    team.name,
                    team.size,
                    f"{team.average_skill:.2f}",
                    "; ".join(str(m) for m in team.members),
                    ", ".join(team.game_interests()),
                ])
    except OSError as exc:
        raise FileProcessingError(f"Error writing to file: {exc}") from exc

    logger.info("Saved %d teams to %s", len(teams), filepath)
    return filepath


def export_summary_to_json(summary: FormationSummary, filepath: str) -> str:
    """Write the formation summary as JSON."""
    try:
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(summary.model_dump(), f, ensure_ascii=False, indent=2)
    except OSError as exc:
        raise FileProcessingError(f"Error writing to file: {exc}") from exc
    logger.info("Formation summary exported: %s", filepath)
    return filepath
