"""Formation analysis — aggregate statistics over a finished set of teams.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from teammate.team import Team


_MIN_OPTIMAL_THINKERS = 1
_MAX_OPTIMAL_THINKERS = 2
_ROLE_DIVERSITY_THRESHOLD = 3
_GAME_DIVERSITY_THRESHOLD = 2


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class TeamCompositionRow(BaseModel):
    """Personality make-up of a single team."""

    team_id: str
    leaders: int = 0
    thinkers: int = 0
    balanced: int = 0
    average_skill: float = 0.0


class FormationSummary(BaseModel):
    """Aggregate quality report for a formed set of teams."""

    total_teams: int = Field(ge=1)
    total_participants: int = Field(ge=0)
    teams_with_ideal_composition: int = Field(ge=0)
    ideal_composition_percentage: float = Field(ge=0.0, le=100.0)
    teams_with_leader: int = Field(ge=0)
    teams_with_natural_leader: int = Field(ge=0)
    teams_with_optimal_thinkers: int = Field(ge=0)
    teams_with_backup_leader: int = Field(ge=0)
    average_team_skill: float = Field(ge=0.0)
    teams_with_role_diversity: int = Field(ge=0)
    teams_with_game_diversity: int = Field(ge=0)
    compositions: list[TeamCompositionRow] = Field(default_factory=list)

    def as_display_rows(self) -> list[tuple[str, str]]:
        """Label/value pairs for tabular display."""
        return [
            ("Total teams", str(self.total_teams)),
            ("Total participants", str(self.total_participants)),
            ("Teams with ideal composition", str(self.teams_with_ideal_composition)),
            ("Ideal composition percentage", f"{self.ideal_composition_percentage:.1f}%"),
            ("Teams with leader", str(self.teams_with_leader)),
            ("Teams with natural leader", str(self.teams_with_natural_leader)),
            ("Teams with optimal thinkers", str(self.teams_with_optimal_thinkers)),
            ("Teams with backup leader", str(self.teams_with_backup_leader)),
            ("Average team skill", f"{self.average_team_skill:.2f}"),
            ("Teams with role diversity", str(self.teams_with_role_diversity)),
            ("Teams with game diversity", str(self.teams_with_game_diversity)),
        ]


class NoFormationData(BaseModel):
    """Returned instead of a summary when there is nothing to analyse."""

    message: str = "No teams to analyze"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def analyze_formation(teams: Sequence[Team] | None) -> FormationSummary | NoFormationData:
    """Summarise leadership, thinker balance, skill and diversity across *teams*."""
    if not teams:
        return NoFormationData()

    ideal = with_leader = natural_leader = optimal_thinkers = backup_only = 0
    role_diverse = game_diverse = 0
    compositions: list[TeamCompositionRow] = []

    for team in teams:
        counts = team.composition()
        leader = team.leader()
        backup = team.backup_leader()

        has_leader = leader is not None or backup is not None
        has_optimal_thinkers = _MIN_OPTIMAL_THINKERS <= counts["thinker"] <= _MAX_OPTIMAL_THINKERS

        if has_leader and has_optimal_thinkers:
            ideal += 1
        if has_leader:
            with_leader += 1
        if leader is not None:
            natural_leader += 1
        if has_optimal_thinkers:
            optimal_thinkers += 1
        if leader is None and backup is not None:
            backup_only += 1

        members = team.members
        if len({m.preferred_role for m in members}) >= _ROLE_DIVERSITY_THRESHOLD:
            role_diverse += 1
        # a missing interest counts as its own value
        if len({m.game_interest for m in members}) >= _GAME_DIVERSITY_THRESHOLD:
            game_diverse += 1

        compositions.append(TeamCompositionRow(
            team_id=team.team_id,
            leaders=counts["leader"],
            thinkers=counts["thinker"],
            balanced=counts["balanced"],
            average_skill=round(team.average_skill, 2),
        ))

    total = len(teams)
    return FormationSummary(
        total_teams=total,
        total_participants=sum(t.size for t in teams),
        teams_with_ideal_composition=ideal,
        ideal_composition_percentage=round(ideal * 100.0 / total, 1),
        teams_with_leader=with_leader,
        teams_with_natural_leader=natural_leader,
        teams_with_optimal_thinkers=optimal_thinkers,
        teams_with_backup_leader=backup_only,
        average_team_skill=round(sum(t.average_skill for t in teams) / total, 2),
        teams_with_role_diversity=role_diverse,
        teams_with_game_diversity=game_diverse,
        compositions=compositions,
    )
