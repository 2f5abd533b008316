"""Tests for teammate/team.py."""

from teammate.participant import Participant
from teammate.team import Team


def _p(pid: str, score: int = 75, skill: int = 5, role: str = "support", game: str = "Valorant") -> Participant:
    return Participant(
        participant_id=pid,
        name=f"Player {pid}",
        email=f"{pid.lower()}@iit.ac.lk",
        game_interest=game,
        skill_level=skill,
        preferred_role=role,
        personality_score=score,
    )


class TestAverageSkill:
    def test_empty_team_is_zero(self):
        assert Team("T1", "Team 1").average_skill == 0.0

    def test_recomputed_on_add_and_remove(self):
        team = Team("T1", "Team 1")
        low, high = _p("P0001", skill=5), _p("P0002", skill=7)
        team.add_member(low)
        team.add_member(high)
        assert team.average_skill == 6.0
        team.remove_member(low)
        assert team.average_skill == 7.0
        team.remove_member(high)
        assert team.average_skill == 0.0


class TestMembership:
    def test_members_is_a_copy(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0001"))
        members = team.members
        members.append(_p("P0002"))
        members.clear()
        assert team.size == 1

    def test_remove_absent_member_is_noop(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0001", skill=4))
        assert team.remove_member(_p("P0099")) is False
        assert team.size == 1
        assert team.average_skill == 4.0

    def test_remove_first_structural_match(self):
        team = Team("T1", "Team 1")
        a = _p("P0001")
        team.add_member(a)
        team.add_member(_p("P0002"))
        team.add_member(a)
        assert team.remove_member(_p("P0001")) is True
        assert [m.participant_id for m in team.members] == ["P0002", "P0001"]

    def test_duplicates_are_not_rejected(self):
        team = Team("T1", "Team 1")
        a = _p("P0001")
        team.add_member(a)
        team.add_member(a)
        assert team.size == 2

    def test_capacity_not_enforced(self):
        team = Team("T1", "Team 1")
        for i in range(12):
            team.add_member(_p(f"P{i:04d}"))
        assert team.size == 12


class TestLeadership:
    def test_leader_is_first_leader_typed_member(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0001", score=60))
        team.add_member(_p("P0002", score=91))
        team.add_member(_p("P0003", score=99))
        assert team.has_leader()
        assert team.leader().participant_id == "P0002"

    def test_no_leader(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0001", score=60))
        assert not team.has_leader()
        assert team.leader() is None

    def test_backup_leader_is_highest_score(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0001", score=60))
        team.add_member(_p("P0002", score=85))
        team.add_member(_p("P0003", score=72))
        assert team.backup_leader().participant_id == "P0002"

    def test_backup_leader_tie_goes_to_earlier_member(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0007", score=80))
        team.add_member(_p("P0003", score=80))
        assert team.backup_leader().participant_id == "P0007"

    def test_backup_leader_empty_team(self):
        assert Team("T1", "Team 1").backup_leader() is None


class TestComposition:
    def test_composition_counts(self):
        team = Team("T1", "Team 1")
        for pid, score in [("P0001", 95), ("P0002", 55), ("P0003", 60), ("P0004", 75)]:
            team.add_member(_p(pid, score=score))
        assert team.composition() == {"leader": 1, "thinker": 2, "balanced": 1}
        assert team.count_type("thinker") == 2

    def test_game_interests_distinct_in_order(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0001", game="dota"))
        team.add_member(_p("P0002", game="FIFA"))
        team.add_member(_p("P0003", game="Dota"))
        assert team.game_interests() == ["Dota", "FIFA"]

    def test_str(self):
        team = Team("T1", "Team 1")
        team.add_member(_p("P0001", skill=6))
        assert str(team) == "T1 - Team 1 (Size: 1, Avg Skill: 6.0)"

    def test_describe_names_backup_leader(self):
        team = Team("T2", "Team 2")
        team.add_member(_p("P0001", score=88))
        team.add_member(_p("P0002", score=60))
        text = team.describe()
        assert "Backup Leader: Player P0001 (Score: 88)" in text
        assert "Game Interests: Valorant" in text

    def test_describe_names_leader(self):
        team = Team("T2", "Team 2")
        team.add_member(_p("P0001", score=95))
        assert "Team Leader: Player P0001" in team.describe()
