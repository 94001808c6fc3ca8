"""
Pytest fixtures for progression-api tests.

Definitions are built in the camelCase shape they are stored in, so every
test also goes through the same parsing path as real definitions.
"""

import copy
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

# Ensure the repository root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from progression_api.backend.settings import get_settings
from progression_api.models.program import ProgramDefinition
from progression_api.programs import get_preset


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Run every test with test settings and no Sentry."""
    monkeypatch.setenv("PROGRESSION_ENVIRONMENT", "test")
    monkeypatch.delenv("PROGRESSION_SENTRY_DSN", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Definition builders
# ---------------------------------------------------------------------------


LINEAR_STAGES = [
    {"sets": 5, "reps": 3},
    {"sets": 6, "reps": 2},
    {"sets": 10, "reps": 1},
]


def build_slot(slot_id: str = "main", exercise_id: str = "squat", **overrides) -> Dict[str, Any]:
    """A linear slot (add on success, advance on fail, deload 10% at the end)."""
    slot = {
        "id": slot_id,
        "exerciseId": exercise_id,
        "tier": "t1",
        "stages": copy.deepcopy(LINEAR_STAGES),
        "onSuccess": {"type": "add_weight"},
        "onMidStageFail": {"type": "advance_stage"},
        "onFinalStageFail": {"type": "deload_percent", "percent": 10},
        "startWeightKey": exercise_id,
    }
    slot.update(overrides)
    return slot


def build_definition(
    slots: Optional[List[Dict[str, Any]]] = None,
    days: Optional[List[Dict[str, Any]]] = None,
    increments: Optional[Dict[str, float]] = None,
    total_workouts: int = 10,
    cycle_length: Optional[int] = None,
) -> Dict[str, Any]:
    """A camelCase definition; a single day holding `slots` unless `days` is given."""
    if days is None:
        days = [{"name": "Day A", "slots": slots if slots is not None else [build_slot()]}]
    return {
        "id": "test-program",
        "name": "Test Program",
        "cycleLength": cycle_length if cycle_length is not None else len(days),
        "totalWorkouts": total_workouts,
        "weightIncrements": increments if increments is not None else {"squat": 5},
        "exercises": {"squat": {"name": "Squat"}},
        "days": days,
    }


@pytest.fixture
def slot_factory() -> Callable[..., Dict[str, Any]]:
    return build_slot


@pytest.fixture
def definition_factory() -> Callable[..., Dict[str, Any]]:
    return build_definition


@pytest.fixture
def linear_definition() -> ProgramDefinition:
    """Single-slot linear program: squat, increment 5, three stages."""
    return ProgramDefinition.model_validate(build_definition())


@pytest.fixture
def linear_config() -> Dict[str, float]:
    return {"squat": 60}


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


@pytest.fixture
def gzclp():
    return get_preset("gzclp")


def _slot_rows(rows, slot_id: str):
    return [slot for row in rows for slot in row.slots if slot.slot_id == slot_id]


@pytest.fixture
def slot_history() -> Callable:
    """Every row of one slot, in workout order: slot_history(rows, slot_id)."""
    return _slot_rows
