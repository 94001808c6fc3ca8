"""
Unit tests for services/program_validator.py
"""

import pytest

from progression_api.application.exceptions import ConfigurationError
from progression_api.models.program import ProgramDefinition
from progression_api.services.program_validator import (
    ProgramValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)


@pytest.fixture
def validator():
    return ProgramValidator()


@pytest.fixture
def validate(validator, definition_factory):
    def _validate(config=None, **definition_kwargs):
        definition = ProgramDefinition.model_validate(definition_factory(**definition_kwargs))
        return validator.validate(definition, {"squat": 60} if config is None else config)

    return _validate


@pytest.mark.unit
class TestValidDefinitions:
    def test_clean_definition(self, validate):
        result = validate()

        assert result.is_valid is True
        assert result.issues == []
        assert result.summary == "Program 'test-program' validated with no issues."

    def test_presets_are_clean(self, validator):
        from progression_api.programs import list_presets

        for preset in list_presets():
            result = validator.validate(preset.definition, preset.default_config)
            assert result.issues == [], preset.id


@pytest.mark.unit
class TestStructure:
    def test_non_positive_cycle_length(self, validate):
        result = validate(cycle_length=0)
        assert result.is_valid is False
        assert "cycleLength must be positive" in result.errors[0].message

    def test_cycle_longer_than_days(self, validate):
        result = validate(cycle_length=3)
        assert "exceeds the 1 defined day(s)" in result.errors[0].message

    def test_non_positive_total_workouts(self, validate):
        result = validate(total_workouts=-1)
        assert "totalWorkouts must be positive" in result.errors[0].message

    def test_empty_stage_ladder(self, validate, slot_factory):
        result = validate(slots=[slot_factory(stages=[])])
        assert result.errors[0].message == "Slot has no stages"
        assert result.errors[0].location == "Day 1, slot 'main'"

    def test_reused_slot_keeps_ladder_length(self, validate, slot_factory):
        days = [
            {"name": "A", "slots": [slot_factory()]},
            {"name": "B", "slots": [slot_factory(stages=[{"sets": 5, "reps": 5}])]},
        ]
        result = validate(days=days)
        assert result.errors[0].location == "Slot 'main'"

    def test_reused_slot_same_ladder_is_fine(self, validate, slot_factory):
        days = [
            {"name": "A", "slots": [slot_factory()]},
            {"name": "B", "slots": [slot_factory(onSuccess={"type": "no_change"})]},
        ]
        assert validate(days=days).is_valid is True

    def test_reused_slot_keeps_exercise(self, validate, slot_factory):
        days = [
            {"name": "A", "slots": [slot_factory("main", "squat")]},
            {"name": "B", "slots": [slot_factory("main", "bench")]},
        ]
        result = validate(days=days, config={"squat": 60, "bench": 40})

        assert len(result.errors) == 1
        assert result.errors[0].location == "Slot 'main'"
        assert "exercise 'bench'" in result.errors[0].message
        assert "'squat'" in result.errors[0].message


@pytest.mark.unit
class TestRulesAndConfig:
    def test_update_tm_requires_training_max_key(self, validate, slot_factory):
        slot = slot_factory(onSuccess={"type": "update_tm", "amount": 5, "minAmrapReps": 1})
        result = validate(slots=[slot])
        assert result.errors[0].message == "update_tm rule requires trainingMaxKey on slot"

    def test_missing_config_key(self, validate):
        result = validate(config={})
        assert result.is_valid is False
        assert "'squat'" in result.errors[0].message

    def test_missing_training_max(self, validate, slot_factory):
        slot = slot_factory(trainingMaxKey="squat_tm", tmPercent=0.8)
        result = validate(slots=[slot])
        assert len(result.errors) == 1
        assert "squat_tm" in result.errors[0].message

    def test_config_key_reported_once(self, validate, slot_factory):
        result = validate(slots=[slot_factory("a"), slot_factory("b")], config={})
        assert len(result.errors) == 1

    def test_missing_increment_is_a_warning(self, validate):
        result = validate(increments={})

        assert result.is_valid is True
        assert len(result.warnings) == 1
        assert "no weight increment" in result.warnings[0].message
        assert result.summary == "Program 'test-program' valid with 1 warning(s)."

    def test_no_warning_without_growth_rules(self, validate, slot_factory):
        slot = slot_factory(
            onSuccess={"type": "no_change"},
            onMidStageFail={"type": "no_change"},
        )
        assert validate(slots=[slot], increments={}).warnings == []


@pytest.mark.unit
class TestValidationResult:
    def test_errors_and_warnings_split(self):
        result = ValidationResult(
            is_valid=False,
            issues=[
                ValidationIssue("bad", ValidationSeverity.ERROR, location="Slot 'x'"),
                ValidationIssue("meh", ValidationSeverity.WARNING),
            ],
        )
        assert [i.message for i in result.errors] == ["bad"]
        assert [i.message for i in result.warnings] == ["meh"]

    def test_raise_for_errors_carries_issues(self, validate):
        result = validate(config={}, cycle_length=0)

        with pytest.raises(ConfigurationError) as exc_info:
            result.raise_for_errors()

        assert str(exc_info.value) == result.summary
        assert len(exc_info.value.issues) == 2
        assert exc_info.value.issues[0].startswith("cycleLength")

    def test_raise_for_errors_noop_when_valid(self, validate):
        validate().raise_for_errors()
