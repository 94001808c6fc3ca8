"""
Services package for progression-api.

Contains the progression computation engine:
- Rule interpretation (pure slot state transitions)
- Slot state threading across the rotating day template
- Workout row assembly
- Definition checks run before each computation
"""

from progression_api.services.program_validator import (
    ProgramValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from progression_api.services.progression_engine import (
    ProgressionEngine,
    compute_generic_program,
    resolve_role,
)
from progression_api.services.progression_rules import SlotState, apply_rule
from progression_api.services.slot_threader import (
    Prescription,
    SlotThreader,
    initial_weight,
    select_rule,
)

__all__ = [
    # Engine
    "ProgressionEngine",
    "compute_generic_program",
    "resolve_role",
    # Rules
    "SlotState",
    "apply_rule",
    # Threading
    "Prescription",
    "SlotThreader",
    "initial_weight",
    "select_rule",
    # Validation
    "ProgramValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
]
