"""
Progression computation engine.

Reconstructs the prescribed state of every workout in a program from:
- A declarative program definition
- A starting numeric config (start weights, training maxes)
- A sparse results map of recorded outcomes

The computation is a single forward pass over the workout indices with one
state threader per slot id. It carries nothing between calls and mutates none
of its inputs, so every change to results or config is handled by simply
computing again.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from progression_api.core.constants import TIER_ROLE_MAP
from progression_api.models.program import ProgramDefinition, Slot, SlotRole
from progression_api.models.results import (
    RawResults,
    read_slot_result,
    results_for_workout,
)
from progression_api.models.rows import GenericSlotRow, GenericWorkoutRow
from progression_api.services.program_validator import ProgramValidator
from progression_api.services.slot_threader import (
    SlotThreader,
    initial_weight,
    read_config_number,
)

logger = logging.getLogger(__name__)


def resolve_role(slot: Slot) -> Optional[SlotRole]:
    """Explicit role wins; otherwise infer from the tier label."""
    if slot.role is not None:
        return slot.role
    inferred = TIER_ROLE_MAP.get(slot.tier)
    return SlotRole(inferred) if inferred is not None else None


class ProgressionEngine:
    """
    Engine for replaying a program definition against recorded results.

    Stateless: one instance can serve any number of concurrent computations.
    """

    def __init__(self, validator: Optional[ProgramValidator] = None):
        self.validator = validator or ProgramValidator()

    def compute(
        self,
        definition: Union[ProgramDefinition, Mapping[str, Any]],
        config: Mapping[str, Any],
        results: Optional[RawResults] = None,
    ) -> List[GenericWorkoutRow]:
        """
        Compute every workout row of a program.

        Args:
            definition: Program definition (model or camelCase dict)
            config: Start weights and training maxes keyed by config key
            results: Recorded outcomes keyed by workout index, then slot id

        Returns:
            One GenericWorkoutRow per workout, in index order

        Raises:
            ConfigurationError: If the definition or config cannot produce
                correct rows
        """
        if not isinstance(definition, ProgramDefinition):
            definition = ProgramDefinition.model_validate(definition)

        validation = self.validator.validate(definition, config)
        for issue in validation.warnings:
            logger.debug("Program '%s': %s", definition.id, issue.message)
        if not validation.is_valid:
            logger.warning(validation.summary)
        validation.raise_for_errors()

        threaders = self._create_threaders(definition, config)
        training_maxes = self._initial_training_maxes(definition, config)

        rows: List[GenericWorkoutRow] = []
        for index in range(definition.total_workouts):
            day = definition.day_for(index)
            workout_results = results_for_workout(results, index)

            # Snapshot every slot before any transition of this workout
            slot_rows = [
                self._build_slot_row(
                    definition,
                    slot,
                    threaders[slot.id],
                    training_maxes,
                    workout_results.get(slot.id),
                )
                for slot in day.slots
            ]
            rows.append(
                GenericWorkoutRow(
                    index=index,
                    day_name=day.name,
                    slots=slot_rows,
                    is_changed=any(s.is_changed for s in slot_rows),
                )
            )

            for slot in day.slots:
                threaders[slot.id].advance(
                    slot,
                    read_slot_result(workout_results.get(slot.id)),
                    training_maxes,
                )

        logger.debug(
            "Computed %d workout(s) for program '%s' (%d slot(s))",
            len(rows),
            definition.id,
            len(threaders),
        )
        return rows

    def _create_threaders(
        self,
        definition: ProgramDefinition,
        config: Mapping[str, Any],
    ) -> Dict[str, SlotThreader]:
        """One threader per slot id, seeded from its first occurrence."""
        threaders: Dict[str, SlotThreader] = {}
        for _, slot in definition.iter_slots():
            if slot.id in threaders:
                continue
            increment = definition.increment_for(slot.exercise_id)
            threaders[slot.id] = SlotThreader(
                slot_id=slot.id,
                start_weight=initial_weight(slot, config, increment),
                increment=increment,
            )
        return threaders

    def _initial_training_maxes(
        self,
        definition: ProgramDefinition,
        config: Mapping[str, Any],
    ) -> Dict[str, float]:
        training_maxes: Dict[str, float] = {}
        for _, slot in definition.iter_slots():
            key = slot.training_max_key
            if key is not None and key not in training_maxes:
                training_maxes[key] = read_config_number(config, key, slot.id)
        return training_maxes

    def _build_slot_row(
        self,
        definition: ProgramDefinition,
        slot: Slot,
        threader: SlotThreader,
        training_maxes: Mapping[str, float],
        raw_result: Any,
    ) -> GenericSlotRow:
        prescription = threader.prescribe(slot, training_maxes)
        stage = slot.stages[prescription.stage]
        result = read_slot_result(raw_result)

        return GenericSlotRow(
            slot_id=slot.id,
            exercise_id=slot.exercise_id,
            exercise_name=definition.exercise_name(slot.exercise_id),
            tier=slot.tier,
            weight=prescription.weight,
            stage=prescription.stage,
            sets=stage.sets,
            reps=stage.reps,
            reps_max=stage.reps_max,
            is_amrap=stage.amrap,
            stages_count=len(slot.stages),
            result=result.result,
            amrap_reps=result.amrap_reps,
            rpe=result.rpe,
            is_changed=prescription.is_changed,
            is_deload=prescription.is_deload,
            role=resolve_role(slot),
            notes=slot.notes,
        )


def compute_generic_program(
    definition: Union[ProgramDefinition, Mapping[str, Any]],
    config: Mapping[str, Any],
    results: Optional[RawResults] = None,
) -> List[GenericWorkoutRow]:
    """Compute every workout row of a program with a default engine."""
    return ProgressionEngine().compute(definition, config, results)
