"""Runtime shared state for Streamlit reruns.

Streamlit reruns the main script in a fresh module namespace, so module
globals in the script itself do not survive. This module is imported normally
and cached in sys.modules, so it holds the per-process id generator and the
latest pool and teams.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import threading

from teammate.id_generator import IdGenerator
from teammate.participant import Participant
from teammate.team import Team


@dataclass
class RuntimeState:
    lock: threading.Lock = field(default_factory=threading.Lock)
    ids: IdGenerator = field(default_factory=IdGenerator)

    participants: list[Participant] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
    # Team size used for ``teams``; 0 until a run succeeds.
    team_size: int = 0

    def snapshot_participants(self) -> list[Participant]:
        with self.lock:
            return list(self.participants)

    def snapshot_teams(self) -> list[Team]:
        with self.lock:
            return list(self.teams)

    def set_participants(self, participants: list[Participant]) -> None:
        with self.lock:
            self.participants = list(participants)
            self.teams = []
            self.team_size = 0

    def add_participant(self, participant: Participant) -> None:
        with self.lock:
            self.participants = [*self.participants, participant]

    def set_teams(self, teams: list[Team], team_size: int) -> None:
        with self.lock:
            self.teams = list(teams)
            self.team_size = team_size

    def reset(self) -> None:
        with self.lock:
            self.participants = []
            self.teams = []
            self.team_size = 0
        self.ids.reset()


STATE = RuntimeState()
