"""Models package for progression-api."""

from progression_api.models.program import (
    AddWeightResetStageRule,
    AddWeightRule,
    AdvanceStageAddWeightRule,
    AdvanceStageRule,
    DeloadPercentRule,
    ExerciseInfo,
    NoChangeRule,
    ProgramDay,
    ProgramDefinition,
    ProgramSource,
    ProgressionRule,
    Slot,
    SlotRole,
    Stage,
    UpdateTrainingMaxRule,
)
from progression_api.models.results import (
    ResultValue,
    SlotResult,
    read_slot_result,
)
from progression_api.models.rows import GenericSlotRow, GenericWorkoutRow

__all__ = [
    # Definitions
    "ExerciseInfo",
    "ProgramDay",
    "ProgramDefinition",
    "ProgramSource",
    "Slot",
    "SlotRole",
    "Stage",
    # Rules
    "AddWeightResetStageRule",
    "AddWeightRule",
    "AdvanceStageAddWeightRule",
    "AdvanceStageRule",
    "DeloadPercentRule",
    "NoChangeRule",
    "ProgressionRule",
    "UpdateTrainingMaxRule",
    # Results
    "ResultValue",
    "SlotResult",
    "read_slot_result",
    # Output
    "GenericSlotRow",
    "GenericWorkoutRow",
]
