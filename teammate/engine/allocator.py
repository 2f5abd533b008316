"""Fair team allocation.

Splits a participant pool into ``floor(N / K)`` teams of exactly ``K`` members,
spreading leaders and thinkers across teams before filling the rest:

1. Shuffle the pool and bucket it by personality type (FIFO per bucket).
2. Seed one leader per empty team, then extra leaders into leaderless teams.
3. Seed one thinker per thinker-less team, then to the fewest-thinker team.
4. Fill balanced members into the smallest team.
5. Place leftovers (highest score first) into the smallest team.
6. Reject the whole run if any team is not exactly ``K``.

Participants beyond ``floor(N / K) * K`` are not placed and not returned.
This is a greedy heuristic and does not search for an optimal split.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
import random

from teammate.errors import FormationError, ValidationError
from teammate.participant import Participant
from teammate.team import Team
from teammate.validation import validate_team_size


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------
@dataclass
class AllocationResult:
    """Outcome of one allocation run: complete teams, or the failure."""

    teams: list[Team] = field(default_factory=list)
    failure: FormationError | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> list[Team]:
        """Return the teams, or raise the recorded ``FormationError``."""
        if self.failure is not None:
            raise self.failure
        return self.teams


# ---------------------------------------------------------------------------
# Completion check
# ---------------------------------------------------------------------------
def verify_complete(teams: Sequence[Team], team_size: int) -> FormationError | None:
    """Return an error for the first team whose size is not *team_size*."""
    for team in teams:
        if team.size != team_size:
            return FormationError(team.team_id, team.size, team_size)
    return None


# ---------------------------------------------------------------------------
# Allocator
# ---------------------------------------------------------------------------
class TeamAllocator:
    """Greedy, personality-aware team builder for one pool."""

    def __init__(
        self,
        team_size: int,
        participants: Sequence[Participant],
        rng: random.Random | None = None,
    ) -> None:
        """Validate inputs and snapshot the pool.

        Args:
            team_size: Members per team (``K``).
            participants: Pool to split (``N`` people).
            rng: Source of the shuffle; pass a seeded ``random.Random`` for
                reproducible teams.

        Raises:
            ValidationError: If ``K <= 0`` or ``N < K``.
        """
        errors = validate_team_size(team_size, len(participants))
        if errors:
            raise ValidationError(errors)
        self.team_size = team_size
        self.participants = list(participants)
        self._rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def form_teams(self) -> AllocationResult:
        """Run every phase and the completion check."""
        pool = list(self.participants)
        self._rng.shuffle(pool)

        total_teams = len(pool) // self.team_size
        teams = [Team(f"T{i + 1}", f"Team {i + 1}") for i in range(total_teams)]

        leaders: deque[Participant] = deque()
        thinkers: deque[Participant] = deque()
        balanced: deque[Participant] = deque()
        buckets = {"leader": leaders, "thinker": thinkers, "balanced": balanced}
        for p in pool:
            buckets[p.personality_type].append(p)

        logger.info(
            "Forming %d teams of %d from %d participants: %d leaders, %d thinkers, %d balanced",
            total_teams, self.team_size, len(pool), len(leaders), len(thinkers), len(balanced),
        )

        self._seed_leaders(teams, leaders)
        self._seed_thinkers(teams, thinkers)
        self._seed_balanced(teams, balanced)
        self._fill_leftovers(teams, [*leaders, *thinkers, *balanced])

        failure = verify_complete(teams, self.team_size)
        if failure is not None:
            logger.error("Team formation failed: %s", failure)
            return AllocationResult(failure=failure)

        unplaced = len(pool) - total_teams * self.team_size
        if unplaced:
            logger.warning("%d participant(s) not placed: pool size is not a multiple of %d", unplaced, self.team_size)
        logger.info("Formed %d teams", len(teams))
        return AllocationResult(teams=teams)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _has_room(self, team: Team) -> bool:
        return team.size < self.team_size

    def _seed_leaders(self, teams: list[Team], leaders: deque[Participant]) -> None:
        for team in teams:
            if leaders and team.size == 0:
                self._place(team, leaders.popleft(), "leader")

        while leaders:
            target = next((t for t in teams if not t.has_leader() and self._has_room(t)), None)
            if target is None:
                break
            self._place(target, leaders.popleft(), "extra leader")

    def _seed_thinkers(self, teams: list[Team], thinkers: deque[Participant]) -> None:
        for team in teams:
            if thinkers and team.count_type("thinker") == 0 and self._has_room(team):
                self._place(team, thinkers.popleft(), "thinker")

        while thinkers:
            open_teams = [t for t in teams if self._has_room(t)]
            if not open_teams:
                break
            target = min(open_teams, key=lambda t: t.count_type("thinker"))
            self._place(target, thinkers.popleft(), "extra thinker")

    def _seed_balanced(self, teams: list[Team], balanced: deque[Participant]) -> None:
        while balanced:
            target = self._smallest_open_team(teams)
            if target is None:
                break
            self._place(target, balanced.popleft(), "balanced")

    def _fill_leftovers(self, teams: list[Team], leftovers: list[Participant]) -> None:
        queue = deque(sorted(leftovers, key=lambda p: p.personality_score, reverse=True))
        while queue:
            target = self._smallest_open_team(teams)
            if target is None:
                break
            self._place(target, queue.popleft(), "leftover")

    def _smallest_open_team(self, teams: list[Team]) -> Team | None:
        open_teams = [t for t in teams if self._has_room(t)]
        if not open_teams:
            return None
        return min(open_teams, key=lambda t: t.size)

    @staticmethod
    def _place(team: Team, participant: Participant, phase: str) -> None:
        team.add_member(participant)
        logger.debug("%s got %s: %s (%s)", team.team_id, phase, participant.name, participant.participant_id)


def allocate(
    team_size: int,
    participants: Sequence[Participant],
    rng: random.Random | None = None,
) -> list[Team]:
    """Form teams or raise.

    Raises:
        ValidationError: Before any work, if the inputs cannot form a team.
        FormationError: If a team ends up incomplete.
    """
    return TeamAllocator(team_size, participants, rng=rng).form_teams().unwrap()
