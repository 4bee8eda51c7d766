"""Rehab Rotation Services"""

from .history_store import HistoryStore, InMemoryHistoryStore, JsonFileHistoryStore
from .priority_classifier import classify, classify_exercise
from .rotation_selector import RotationSelector
from .accent_selector import AccentAwareSelector
from .protocol_catalog import ProtocolCatalog
from .routine_assembler import RoutineAssembler

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "JsonFileHistoryStore",
    "classify",
    "classify_exercise",
    "RotationSelector",
    "AccentAwareSelector",
    "ProtocolCatalog",
    "RoutineAssembler",
]
