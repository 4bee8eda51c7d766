"""Rehab Rotation Models"""

from .catalog import RehabExercise, RehabProtocol
from .candidate import ExerciseCandidate, PriorityTier, ProtocolExercise
from .history import HistoryReadResult
from .input import CompletionRequest, HealthCondition, RoutineRequest
from .output import Routine, RoutineItem

__all__ = [
    "RehabExercise",
    "RehabProtocol",
    "ExerciseCandidate",
    "PriorityTier",
    "ProtocolExercise",
    "HistoryReadResult",
    "CompletionRequest",
    "HealthCondition",
    "RoutineRequest",
    "Routine",
    "RoutineItem",
]
