"""
Slot state threader.

Carries one slot's progression state across every occurrence of that slot in
the rotating day template, in increasing workout-index order.

The state reported for an occurrence is the state *before* that occurrence's
transition: what the lifter actually trained at. The result recorded at
occurrence k only shapes occurrences k+1 onward, which is what makes editing
or deleting a historical result replay cleanly.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from progression_api.application.exceptions import ConfigurationError
from progression_api.core.rounding import round_to_nearest_half
from progression_api.models.program import (
    NoChangeRule,
    ProgressionRule,
    Slot,
    UpdateTrainingMaxRule,
)
from progression_api.models.results import ResultValue, SlotResult
from progression_api.services.progression_rules import (
    SlotState,
    apply_rule,
    changes_state,
)

logger = logging.getLogger(__name__)

NO_CHANGE = NoChangeRule()


def read_config_number(config: Mapping[str, Any], key: str, slot_id: str) -> float:
    """
    Read a numeric starting parameter from config.

    Numeric strings are accepted since config forms may submit text.

    Raises:
        ConfigurationError: If the key is missing or not a finite number
    """
    if key not in config:
        raise ConfigurationError(
            f"Config has no value for '{key}' (required by slot '{slot_id}')"
        )

    value = config[key]
    number: Optional[float] = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            number = None

    if number is None or not math.isfinite(number):
        raise ConfigurationError(
            f"Config value for '{key}' is not a number: {value!r} (slot '{slot_id}')"
        )
    return number


def initial_weight(slot: Slot, config: Mapping[str, Any], increment: float) -> float:
    """
    Starting weight of a slot before its first occurrence.

    The multiplier lets a secondary slot start at a fraction of a primary
    slot's configured weight. The offset walks the weight back a number of
    increment steps from a configured target (reverse periodization).
    """
    base = read_config_number(config, slot.start_weight_key, slot.id)
    multiplied = round_to_nearest_half(base * slot.start_weight_multiplier)
    return round_to_nearest_half(multiplied - slot.start_weight_offset * increment)


def select_rule(slot: Slot, stage: int, result: Optional[ResultValue]) -> ProgressionRule:
    """
    Pick the rule that fires for an occurrence.

    Args:
        slot: Slot definition at this occurrence
        stage: Stage the lifter trained at
        result: Recorded outcome, None when unattempted

    Returns:
        The progression rule to apply
    """
    is_final = stage >= slot.last_stage_index

    if result is None:
        return slot.on_undefined if slot.on_undefined is not None else NO_CHANGE

    if result == ResultValue.SUCCESS:
        if is_final and slot.on_final_stage_success is not None:
            return slot.on_final_stage_success
        return slot.on_success

    if is_final:
        return slot.on_final_stage_fail
    return slot.on_mid_stage_fail


@dataclass(frozen=True)
class Prescription:
    """What a slot prescribes at one occurrence."""

    weight: float
    stage: int
    is_changed: bool
    is_deload: bool


class SlotThreader:
    """
    Threads one slot's state across its occurrences.

    Training maxes are shared between every slot naming the same key, so the
    caller owns that mapping and passes it to prescribe() and advance().
    """

    def __init__(self, slot_id: str, start_weight: float, increment: float):
        self.slot_id = slot_id
        self.increment = increment
        self._state = SlotState(weight=start_weight)
        self._previous_weight: Optional[float] = None

    @property
    def state(self) -> SlotState:
        return self._state

    def prescribe(self, slot: Slot, training_maxes: Mapping[str, float]) -> Prescription:
        """
        Report the state for the current occurrence.

        Must be called exactly once per occurrence, before advance().
        """
        state = self._state
        if slot.uses_training_max:
            weight = round_to_nearest_half(
                training_maxes[slot.training_max_key] * slot.tm_percent
            )
        else:
            weight = state.weight

        is_deload = (
            self._previous_weight is not None
            and weight > 0
            and weight < self._previous_weight
        )
        if weight > 0:
            self._previous_weight = weight

        return Prescription(
            weight=weight,
            stage=state.stage,
            is_changed=state.ever_changed,
            is_deload=is_deload,
        )

    def advance(
        self,
        slot: Slot,
        result: SlotResult,
        training_maxes: Dict[str, float],
    ) -> SlotState:
        """
        Apply the transition for the current occurrence.

        Args:
            slot: Slot definition at this occurrence
            result: Recorded outcome (empty when unattempted)
            training_maxes: Shared training maxes, updated in place by update_tm

        Returns:
            The state for the slot's next occurrence
        """
        state = self._state
        rule = select_rule(slot, state.stage, result.result)

        if isinstance(rule, UpdateTrainingMaxRule):
            self._state = self._apply_training_max_update(rule, slot, result, training_maxes)
            return self._state

        next_state = apply_rule(rule, state, self.increment, slot.last_stage_index)
        failed_with_change = result.result == ResultValue.FAIL and changes_state(rule)
        self._state = replace(
            next_state, ever_changed=state.ever_changed or failed_with_change
        )
        return self._state

    def _apply_training_max_update(
        self,
        rule: UpdateTrainingMaxRule,
        slot: Slot,
        result: SlotResult,
        training_maxes: Dict[str, float],
    ) -> SlotState:
        key = slot.training_max_key
        if key is None:
            raise ConfigurationError(
                f"Slot '{slot.id}' uses update_tm but has no trainingMaxKey"
            )

        if result.amrap_reps is None or result.amrap_reps < rule.min_amrap_reps:
            return self._state

        training_maxes[key] = round_to_nearest_half(training_maxes[key] + rule.amount)
        logger.debug(
            "Training max '%s' updated to %s by slot '%s'",
            key,
            training_maxes[key],
            slot.id,
        )
        return replace(self._state, ever_changed=True)
