"""
Recorded workout outcomes.

The results map is written by the results/undo persistence service and passed
in whole on every computation:

    {"<workout index>": {"<slot id>": {"result": "success", "amrapReps": 8}}}

An absent entry means the slot was not attempted. Entries are read leniently:
a field the engine cannot interpret is treated as absent, never guessed.
"""

import logging
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from progression_api.core.constants import MAX_RPE, MIN_RPE

logger = logging.getLogger(__name__)


class ResultValue(str, Enum):
    """Outcome of a slot at one workout."""

    SUCCESS = "success"
    FAIL = "fail"


class SlotResult(BaseModel):
    """A single recorded slot outcome."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    result: Optional[ResultValue] = None
    amrap_reps: Optional[int] = None
    rpe: Optional[float] = None


EMPTY_RESULT = SlotResult()

RawResults = Mapping[str, Mapping[str, Union[SlotResult, Mapping[str, Any]]]]


def _read_result_value(value: Any) -> Optional[ResultValue]:
    if isinstance(value, ResultValue):
        return value
    try:
        return ResultValue(value)
    except ValueError:
        return None


def _read_amrap_reps(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value >= 0:
        return value
    return None


def _read_rpe(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if MIN_RPE <= value <= MAX_RPE:
        return float(value)
    return None


def read_slot_result(entry: Union[SlotResult, Mapping[str, Any], None]) -> SlotResult:
    """
    Interpret one raw results-map entry.

    Args:
        entry: A SlotResult, a camelCase/snake_case dict, or None

    Returns:
        SlotResult with every uninterpretable field dropped
    """
    if entry is None:
        return EMPTY_RESULT
    if isinstance(entry, SlotResult):
        entry = entry.model_dump()
    if not isinstance(entry, Mapping):
        logger.debug("Ignoring non-mapping result entry: %r", entry)
        return EMPTY_RESULT

    return SlotResult(
        result=_read_result_value(entry.get("result")),
        amrap_reps=_read_amrap_reps(entry.get("amrapReps", entry.get("amrap_reps"))),
        rpe=_read_rpe(entry.get("rpe")),
    )


def results_for_workout(
    results: Optional[RawResults], workout_index: int
) -> Mapping[str, Any]:
    """Slot entries recorded for one workout index (empty when none)."""
    if not results:
        return {}
    workout = results.get(str(workout_index))
    if not isinstance(workout, Mapping):
        return {}
    return workout

