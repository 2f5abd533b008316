"""Team aggregate used by the allocator."""

from __future__ import annotations

from collections import Counter

from teammate.participant import Participant
from teammate.personality import PERSONALITY_DISPLAY_NAMES, PERSONALITY_TYPES, ROLE_DISPLAY_NAMES


class Team:
    """Ordered group of participants with a cached average skill.

    Capacity is not enforced here; the allocator decides who fits. The same
    participant may be added twice.
    """

    def __init__(self, team_id: str, name: str) -> None:
        self._team_id = team_id
        self._name = name
        self._members: list[Participant] = []
        self._average_skill = 0.0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def team_id(self) -> str:
        return self._team_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def members(self) -> list[Participant]:
        """A copy of the member list."""
        return list(self._members)

    @property
    def size(self) -> int:
        return len(self._members)

    @property
    def average_skill(self) -> float:
        return self._average_skill

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    def add_member(self, participant: Participant) -> None:
        self._members.append(participant)
        self._update_average_skill()

    def remove_member(self, participant: Participant) -> bool:
        """Remove the first member equal to *participant*; ``False`` if absent."""
        try:
            self._members.remove(participant)
        except ValueError:
            return False
        self._update_average_skill()
        return True

    def _update_average_skill(self) -> None:
        if self._members:
            self._average_skill = sum(p.skill_level for p in self._members) / len(self._members)
        else:
            self._average_skill = 0.0

    # ------------------------------------------------------------------
    # Leadership
    # ------------------------------------------------------------------
    def has_leader(self) -> bool:
        return any(p.personality_type == "leader" for p in self._members)

    def leader(self) -> Participant | None:
        """First leader-typed member, if any."""
        return next((p for p in self._members if p.personality_type == "leader"), None)

    def backup_leader(self) -> Participant | None:
        """Member with the highest personality score; earliest added wins ties."""
        if not self._members:
            return None
        return max(self._members, key=lambda p: p.personality_score)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------
    def count_type(self, personality_type: str) -> int:
        return sum(1 for p in self._members if p.personality_type == personality_type)

    def composition(self) -> dict[str, int]:
        counts = Counter(p.personality_type for p in self._members)
        return {t: counts.get(t, 0) for t in PERSONALITY_TYPES}

    def game_interests(self) -> list[str]:
        """Distinct game interests in first-seen order."""
        seen: list[str] = []
        for p in self._members:
            if p.game_interest is not None and p.game_interest not in seen:
                seen.append(p.game_interest)
        return seen

    def __str__(self) -> str:
        return f"{self._team_id} - {self._name} (Size: {self.size}, Avg Skill: {self._average_skill:.1f})"

    def __repr__(self) -> str:
        return f"Team(team_id={self._team_id!r}, size={self.size})"

    def describe(self) -> str:
        """Multi-line summary: members, games, and who leads."""
        lines = [str(self), "Members:"]
        for member in self._members:
            lines.append(
                f"  • {member.name} - {ROLE_DISPLAY_NAMES[member.preferred_role]} - "
                f"{PERSONALITY_DISPLAY_NAMES[member.personality_type]} ({member.personality_score})"
            )
        lines.append("Game Interests: " + ", ".join(self.game_interests()))

        leader = self.leader()
        if leader is not None:
            lines.append(f"Team Leader: {leader.name}")
        else:
            backup = self.backup_leader()
            if backup is not None:
                lines.append(f"Backup Leader: {backup.name} (Score: {backup.personality_score})")
        return "\n".join(lines)
