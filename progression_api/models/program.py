"""
Domain models for program definitions.

A program definition is a declarative description of a training program:
a rotating template of days, each holding exercise slots, and per slot a
sets/reps stage ladder plus the progression rules that move a lifter along it.

Stored definitions use camelCase keys, so every model accepts both the
camelCase alias and the snake_case field name.
"""

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from progression_api.core.constants import DEFAULT_WEIGHT_INCREMENT


class DefinitionModel(BaseModel):
    """Base for all definition models: frozen, camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SlotRole(str, Enum):
    """Display role of a slot within its day."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCESSORY = "accessory"


class ProgramSource(str, Enum):
    """Where a definition came from."""

    PRESET = "preset"
    CUSTOM = "custom"


# ---------------------------------------------------------------------------
# Progression Rules (discriminated on "type")
# ---------------------------------------------------------------------------


class AddWeightRule(DefinitionModel):
    """Add the exercise increment; stage unchanged."""

    type: Literal["add_weight"] = "add_weight"


class AdvanceStageRule(DefinitionModel):
    """Move one rung down the stage ladder; weight unchanged."""

    type: Literal["advance_stage"] = "advance_stage"


class AdvanceStageAddWeightRule(DefinitionModel):
    """Advance the stage and add the exercise increment in one step."""

    type: Literal["advance_stage_add_weight"] = "advance_stage_add_weight"


class DeloadPercentRule(DefinitionModel):
    """Cut the weight by a percentage and return to the first stage."""

    type: Literal["deload_percent"] = "deload_percent"
    percent: float = Field(ge=1, le=99)


class AddWeightResetStageRule(DefinitionModel):
    """Add a fixed amount and return to the first stage."""

    type: Literal["add_weight_reset_stage"] = "add_weight_reset_stage"
    amount: float = Field(gt=0)


class NoChangeRule(DefinitionModel):
    """Leave the slot state untouched."""

    type: Literal["no_change"] = "no_change"


class UpdateTrainingMaxRule(DefinitionModel):
    """Raise the shared training max when the AMRAP set hit a rep target."""

    type: Literal["update_tm"] = "update_tm"
    amount: float
    min_amrap_reps: int = Field(ge=0)


ProgressionRule = Annotated[
    Union[
        AddWeightRule,
        AdvanceStageRule,
        AdvanceStageAddWeightRule,
        DeloadPercentRule,
        AddWeightResetStageRule,
        NoChangeRule,
        UpdateTrainingMaxRule,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class Stage(DefinitionModel):
    """One rung of a slot's sets/reps ladder."""

    sets: int = Field(gt=0)
    reps: int = Field(gt=0)
    amrap: bool = False
    reps_max: Optional[int] = Field(None, gt=0, description="Upper bound of a rep range")


class Slot(DefinitionModel):
    """An exercise assignment within a day, carrying its own progression."""

    id: str = Field(min_length=1)
    exercise_id: str = Field(min_length=1)
    tier: str = Field(min_length=1, description="Display label, e.g. 't1'")
    role: Optional[SlotRole] = None
    stages: List[Stage]
    start_weight_key: str = Field(min_length=1)
    start_weight_multiplier: float = Field(1.0, gt=0)
    start_weight_offset: int = Field(0, description="Offset in increment steps")
    on_success: ProgressionRule
    on_mid_stage_fail: ProgressionRule
    on_final_stage_fail: ProgressionRule
    on_final_stage_success: Optional[ProgressionRule] = None
    on_undefined: Optional[ProgressionRule] = None
    notes: Optional[str] = Field(None, min_length=1)
    training_max_key: Optional[str] = Field(None, min_length=1)
    tm_percent: Optional[float] = Field(None, gt=0, le=1)

    @property
    def last_stage_index(self) -> int:
        return len(self.stages) - 1

    @property
    def uses_training_max(self) -> bool:
        return self.training_max_key is not None and self.tm_percent is not None

    def rules(self) -> List[ProgressionRule]:
        """All rules configured on this slot, optional ones included when set."""
        rules = [self.on_success, self.on_mid_stage_fail, self.on_final_stage_fail]
        if self.on_final_stage_success is not None:
            rules.append(self.on_final_stage_success)
        if self.on_undefined is not None:
            rules.append(self.on_undefined)
        return rules


class ProgramDay(DefinitionModel):
    """A day template: a name and its ordered slots."""

    name: str = Field(min_length=1)
    slots: List[Slot]


class ExerciseInfo(DefinitionModel):
    """Display information for an exercise."""

    name: Optional[str] = None


class ProgramDefinition(DefinitionModel):
    """A complete program definition."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    author: str = ""
    version: int = Field(1, ge=1)
    category: str = ""
    source: ProgramSource = ProgramSource.CUSTOM
    days: List[ProgramDay]
    cycle_length: int
    total_workouts: int
    workouts_per_week: Optional[int] = Field(None, ge=1, le=7)
    exercises: Dict[str, ExerciseInfo] = {}
    weight_increments: Dict[str, float] = {}

    def day_for(self, workout_index: int) -> ProgramDay:
        """Day template used by the given workout index."""
        return self.days[workout_index % self.cycle_length]

    def increment_for(self, exercise_id: str) -> float:
        return self.weight_increments.get(exercise_id, DEFAULT_WEIGHT_INCREMENT)

    def exercise_name(self, exercise_id: str) -> str:
        info = self.exercises.get(exercise_id)
        if info is None or not info.name:
            return exercise_id
        return info.name

    def iter_slots(self):
        """Yield every slot occurrence in template order."""
        for day in self.days:
            for slot in day.slots:
                yield day, slot
