"""Tests for keyword-based priority classification."""

import pytest

from rehab_rotation.models import RehabExercise
from rehab_rotation.services.priority_classifier import (
    candidate_text,
    classify,
    classify_exercise,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("dead bug lombaires plaquées", 1),
        ("bird dog", 1),
        ("chin tuck (rétraction cervicale)", 1),
        ("nerve flossing sciatique", 1),
        ("nerve gliding poignet", 1),
        ("spanish squat isométrique", 1),
        ("extension mckenzie", 1),
        ("shoulder warm-up circles", 1),
        ("foam roll quadriceps", 3),
        ("auto-massage avec balle", 3),
        ("étirement pectoral (doorway stretch)", 2),
        ("clam shell renforcement", 2),
        ("", 2),
    ],
)
def test_classify_keywords(text: str, expected: int) -> None:
    """Tier-1 markers, tier-3 markers and the tier-2 default."""
    assert classify(text) == expected


def test_tier_one_wins_over_tier_three() -> None:
    """Text matching both keyword sets classifies as tier 1."""
    assert classify("foam roll warmup") == 1
    assert classify("massage isometric hold") == 1


def test_classify_is_idempotent() -> None:
    """Repeated calls on identical input return the identical tier."""
    text = "foam roll fessier auto-massage"
    assert {classify(text) for _ in range(5)} == {3}


def test_classify_exercise_uses_lowercased_name_and_notes() -> None:
    """Name and notes are lower-cased and concatenated before matching."""
    exercise = RehabExercise(name="Hold ISOMÉTRIQUE", notes="")
    assert candidate_text(exercise.name, exercise.notes) == "hold isométrique "
    assert classify_exercise(exercise) == 1

    from_notes = RehabExercise(name="Rouleau fessier", notes="Passer la BALLE sous le fessier")
    assert classify_exercise(from_notes) == 3
