"""
Definition checks run before every computation.

Full schema validation of stored definitions happens where they are hydrated.
These are the structural checks the engine can do cheaply and that would
otherwise produce wrong rows or crash halfway through:

- Cycle length and workout count are positive
- The cycle fits within the defined days
- Every slot has a stage ladder
- A slot id reused on several days keeps the same exercise and ladder length
- Training-max rules have a training max to update
- Every start weight and training max is present in config
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from progression_api.application.exceptions import ConfigurationError
from progression_api.models.program import (
    AddWeightRule,
    AdvanceStageAddWeightRule,
    ProgramDefinition,
    UpdateTrainingMaxRule,
)
from progression_api.services.slot_threader import read_config_number

logger = logging.getLogger(__name__)


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Aborts the computation
    WARNING = "warning"  # Computes, but likely not what the author meant


@dataclass
class ValidationIssue:
    """A single validation issue."""

    message: str
    severity: ValidationSeverity
    location: Optional[str] = None  # e.g., "Day 2, slot 'd2-t1'"


@dataclass
class ValidationResult:
    """Result of definition validation."""

    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    summary: Optional[str] = None

    @property
    def errors(self) -> List[ValidationIssue]:
        """Get error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        """Get warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def raise_for_errors(self) -> None:
        """Raise ConfigurationError carrying every error message."""
        if self.is_valid:
            return
        raise ConfigurationError(
            self.summary or "Invalid program definition",
            issues=[_format_issue(i) for i in self.errors],
        )


def _format_issue(issue: ValidationIssue) -> str:
    if issue.location:
        return f"{issue.location}: {issue.message}"
    return issue.message


class ProgramValidator:
    """
    Validates a program definition against its starting config.

    Checks:
    1. Structure - cycle length, workout count, stage ladders
    2. Slot identity - reused slot ids share an exercise and a ladder length
    3. Rules - update_tm only on training-max slots
    4. Config - start weights and training maxes resolve to numbers
    5. Increments - growth rules on exercises without an increment (warning)
    """

    def validate(
        self,
        definition: ProgramDefinition,
        config: Mapping[str, Any],
    ) -> ValidationResult:
        """
        Validate a definition.

        Args:
            definition: The program definition
            config: Starting parameters keyed by config key

        Returns:
            ValidationResult with any issues found
        """
        issues: List[ValidationIssue] = []

        issues.extend(self._validate_structure(definition))
        issues.extend(self._validate_slot_identity(definition))
        issues.extend(self._validate_rules(definition))
        issues.extend(self._validate_config(definition, config))
        issues.extend(self._validate_increments(definition))

        is_valid = not any(i.severity == ValidationSeverity.ERROR for i in issues)
        error_count = len([i for i in issues if i.severity == ValidationSeverity.ERROR])
        warning_count = len([i for i in issues if i.severity == ValidationSeverity.WARNING])

        if is_valid and not issues:
            summary = f"Program '{definition.id}' validated with no issues."
        elif is_valid:
            summary = f"Program '{definition.id}' valid with {warning_count} warning(s)."
        else:
            summary = (
                f"Program '{definition.id}' invalid: "
                f"{error_count} error(s), {warning_count} warning(s)."
            )

        return ValidationResult(is_valid=is_valid, issues=issues, summary=summary)

    def _validate_structure(self, definition: ProgramDefinition) -> List[ValidationIssue]:
        issues = []

        if definition.cycle_length <= 0:
            issues.append(
                ValidationIssue(
                    message=f"cycleLength must be positive, got {definition.cycle_length}",
                    severity=ValidationSeverity.ERROR,
                )
            )
        elif definition.cycle_length > len(definition.days):
            issues.append(
                ValidationIssue(
                    message=(
                        f"cycleLength {definition.cycle_length} exceeds the "
                        f"{len(definition.days)} defined day(s)"
                    ),
                    severity=ValidationSeverity.ERROR,
                )
            )

        if definition.total_workouts <= 0:
            issues.append(
                ValidationIssue(
                    message=f"totalWorkouts must be positive, got {definition.total_workouts}",
                    severity=ValidationSeverity.ERROR,
                )
            )

        for day_number, day in enumerate(definition.days, start=1):
            for slot in day.slots:
                if not slot.stages:
                    issues.append(
                        ValidationIssue(
                            message="Slot has no stages",
                            severity=ValidationSeverity.ERROR,
                            location=f"Day {day_number}, slot '{slot.id}'",
                        )
                    )

        return issues

    def _validate_slot_identity(self, definition: ProgramDefinition) -> List[ValidationIssue]:
        issues = []
        ladder_lengths: Dict[str, int] = {}
        exercise_ids: Dict[str, str] = {}

        for _, slot in definition.iter_slots():
            first_exercise = exercise_ids.setdefault(slot.id, slot.exercise_id)
            if first_exercise != slot.exercise_id:
                issues.append(
                    ValidationIssue(
                        message=(
                            f"Slot id reused with exercise '{slot.exercise_id}'; "
                            f"first occurrence uses '{first_exercise}'"
                        ),
                        severity=ValidationSeverity.ERROR,
                        location=f"Slot '{slot.id}'",
                    )
                )

            expected = ladder_lengths.setdefault(slot.id, len(slot.stages))
            if expected != len(slot.stages):
                issues.append(
                    ValidationIssue(
                        message=(
                            f"Slot id reused with {len(slot.stages)} stage(s); "
                            f"first occurrence has {expected}"
                        ),
                        severity=ValidationSeverity.ERROR,
                        location=f"Slot '{slot.id}'",
                    )
                )

        return issues

    def _validate_rules(self, definition: ProgramDefinition) -> List[ValidationIssue]:
        issues = []
        seen = set()

        for _, slot in definition.iter_slots():
            if slot.training_max_key is not None or slot.id in seen:
                continue
            if any(isinstance(rule, UpdateTrainingMaxRule) for rule in slot.rules()):
                seen.add(slot.id)
                issues.append(
                    ValidationIssue(
                        message="update_tm rule requires trainingMaxKey on slot",
                        severity=ValidationSeverity.ERROR,
                        location=f"Slot '{slot.id}'",
                    )
                )

        return issues

    def _validate_config(
        self,
        definition: ProgramDefinition,
        config: Mapping[str, Any],
    ) -> List[ValidationIssue]:
        issues = []
        checked = set()

        for _, slot in definition.iter_slots():
            keys = [slot.start_weight_key]
            if slot.training_max_key is not None:
                keys.append(slot.training_max_key)

            for key in keys:
                if key in checked:
                    continue
                checked.add(key)
                try:
                    read_config_number(config, key, slot.id)
                except ConfigurationError as e:
                    issues.append(
                        ValidationIssue(message=str(e), severity=ValidationSeverity.ERROR)
                    )

        return issues

    def _validate_increments(self, definition: ProgramDefinition) -> List[ValidationIssue]:
        issues = []
        growth_rules = (AddWeightRule, AdvanceStageAddWeightRule)
        flagged = set()

        for _, slot in definition.iter_slots():
            if slot.exercise_id in flagged or slot.exercise_id in definition.weight_increments:
                continue
            if any(isinstance(rule, growth_rules) for rule in slot.rules()):
                flagged.add(slot.exercise_id)
                issues.append(
                    ValidationIssue(
                        message=(
                            f"Exercise '{slot.exercise_id}' has no weight increment; "
                            "add_weight rules will not change its weight"
                        ),
                        severity=ValidationSeverity.WARNING,
                        location=f"Slot '{slot.id}'",
                    )
                )

        return issues
