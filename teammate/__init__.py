"""Personality-aware team formation for gaming club participants."""

from .engine.allocator import AllocationResult, TeamAllocator, allocate
from .engine.formation_analysis import FormationSummary, NoFormationData, analyze_formation
from .errors import DataError, FileProcessingError, FormationError, TeamMateError, ValidationError
from .id_generator import IdGenerator
from .participant import Participant, create_participant, reload_participant
from .personality import classify
from .team import Team

__all__ = [
    "AllocationResult",
    "DataError",
    "FileProcessingError",
    "FormationError",
    "FormationSummary",
    "IdGenerator",
    "NoFormationData",
    "Participant",
    "Team",
    "TeamAllocator",
    "TeamMateError",
    "ValidationError",
    "allocate",
    "analyze_formation",
    "classify",
    "create_participant",
    "reload_participant",
]
