"""
Output rows produced by the progression engine.

One GenericWorkoutRow per workout index, each carrying a GenericSlotRow per
slot of that day. Rows are consumed read-only by rendering and reporting;
dump with by_alias=True for the camelCase wire shape.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from progression_api.models.program import SlotRole
from progression_api.models.results import ResultValue


class RowModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class GenericSlotRow(RowModel):
    """Prescribed state of one slot at one workout."""

    slot_id: str
    exercise_id: str
    exercise_name: str
    tier: str
    weight: float
    stage: int
    sets: int
    reps: int
    reps_max: Optional[int] = None
    is_amrap: bool
    stages_count: int
    result: Optional[ResultValue] = None
    amrap_reps: Optional[int] = None
    rpe: Optional[float] = None
    is_changed: bool
    is_deload: bool
    role: Optional[SlotRole] = None
    notes: Optional[str] = None


class GenericWorkoutRow(RowModel):
    """Prescribed state of one whole workout."""

    index: int
    day_name: str
    slots: List[GenericSlotRow]
    is_changed: bool
