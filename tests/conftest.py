"""Shared fixtures for rehab rotation tests.

Provides exercise/candidate factories, an in-memory history store and a
small protocol catalog so tests never touch the real data directory.
"""

from typing import Callable, Optional, Union

import pytest

from rehab_rotation.models import ExerciseCandidate, RehabExercise, RehabProtocol
from rehab_rotation.services import (
    InMemoryHistoryStore,
    ProtocolCatalog,
    RoutineAssembler,
)


def make_exercise(
    name: str,
    sets: int = 3,
    reps: Union[int, str] = 10,
    notes: str = "",
) -> RehabExercise:
    """Build a catalog exercise with sensible defaults."""
    return RehabExercise(name=name, sets=sets, reps=reps, notes=notes)


def make_candidate(
    name: str,
    zone: str = "knee_right",
    priority: int = 2,
    last_used_at: Optional[int] = None,
    protocol_name: str = "Test protocol",
) -> ExerciseCandidate:
    """Build a selection candidate directly (bypassing classification)."""
    return ExerciseCandidate(
        exercise=make_exercise(name),
        protocol_name=protocol_name,
        target_zone=zone,
        priority=priority,
        last_used_at=last_used_at,
    )


@pytest.fixture
def candidate_factory() -> Callable[..., ExerciseCandidate]:
    """Factory fixture for selection candidates."""
    return make_candidate


@pytest.fixture
def history_store() -> InMemoryHistoryStore:
    """Empty in-memory history store."""
    return InMemoryHistoryStore()


@pytest.fixture
def protocols() -> list[RehabProtocol]:
    """Small catalog covering exact match, zone fallback and duplicates."""
    return [
        RehabProtocol(
            target_zone="knee_right",
            condition_label="Tendinopathie rotulienne",
            exercises=[
                make_exercise(
                    "Spanish squat isométrique", sets=5, reps="45 sec",
                    notes="Isométrique analgésique",
                ),
                make_exercise("Leg extension tempo lent", sets=4, reps="8-15"),
            ],
        ),
        RehabProtocol(
            target_zone="knee_right",
            condition_label="Syndrome fémoro-patellaire",
            exercises=[
                make_exercise("Step-down excentrique", reps="10/jambe"),
                make_exercise("Clam shell", sets=3, reps=15, notes="Moyen fessier"),
                make_exercise("Foam roll quadriceps", sets=2, reps="60 sec"),
            ],
        ),
        RehabProtocol(
            target_zone="hip_right",
            condition_label="Sciatique",
            exercises=[
                make_exercise("Nerve flossing sciatique", sets=2, reps="5-10"),
                make_exercise("Clam shell", sets=1, reps=20, notes="Version sciatique"),
                make_exercise("Child's pose", sets=3, reps="30-60 sec"),
                make_exercise("Étirement piriforme", sets=3, reps="30-45 sec"),
            ],
        ),
        RehabProtocol(
            target_zone="shoulder_right",
            condition_label="Coiffe des rotateurs",
            exercises=[
                make_exercise("Rotation externe haltère", reps=15),
                make_exercise("Sleeper stretch", reps="30 sec"),
            ],
        ),
    ]


@pytest.fixture
def catalog(protocols: list[RehabProtocol]) -> ProtocolCatalog:
    """In-memory protocol catalog."""
    return ProtocolCatalog(protocols=protocols)


@pytest.fixture
def assembler(catalog: ProtocolCatalog, history_store: InMemoryHistoryStore) -> RoutineAssembler:
    """Routine assembler bound to the test catalog and in-memory history."""
    return RoutineAssembler(catalog=catalog, history_store=history_store, max_exercises=5)
