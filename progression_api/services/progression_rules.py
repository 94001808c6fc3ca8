"""
Progression rule interpreter.

A pure transition function from one slot state to the next. The interpreter
has no notion of why a rule fired (success, failure or a missing result);
rule selection lives in the slot threader. That split is what lets a single
interpreter serve linear, double-progression, static and training-max
programs alike.

Every weight mutation is rounded to the nearest 0.5 as it happens, so no
state ever carries a fractional weight from one occurrence to the next.
"""

from dataclasses import dataclass, replace

from progression_api.core.rounding import round_to_nearest_half
from progression_api.models.program import (
    AddWeightResetStageRule,
    AddWeightRule,
    AdvanceStageAddWeightRule,
    AdvanceStageRule,
    DeloadPercentRule,
    NoChangeRule,
    ProgressionRule,
    UpdateTrainingMaxRule,
)


@dataclass(frozen=True)
class SlotState:
    """Progression state of one slot between occurrences."""

    weight: float
    stage: int = 0
    ever_changed: bool = False


def apply_rule(
    rule: ProgressionRule,
    state: SlotState,
    increment: float,
    last_stage_index: int,
) -> SlotState:
    """
    Apply a progression rule to a slot state.

    Args:
        rule: The rule selected for this occurrence
        state: State the lifter trained at
        increment: Weight increment for the slot's exercise
        last_stage_index: Index of the final stage of the slot's ladder

    Returns:
        The state for the slot's next occurrence

    Raises:
        TypeError: If the rule is not a known progression rule
    """
    if isinstance(rule, AddWeightRule):
        return replace(state, weight=round_to_nearest_half(state.weight + increment))

    if isinstance(rule, AdvanceStageRule):
        # Only selected below the final stage; the clamp keeps the bound anyway
        return replace(state, stage=min(state.stage + 1, last_stage_index))

    if isinstance(rule, AdvanceStageAddWeightRule):
        return replace(
            state,
            stage=min(state.stage + 1, last_stage_index),
            weight=round_to_nearest_half(state.weight + increment),
        )

    if isinstance(rule, DeloadPercentRule):
        return replace(
            state,
            weight=round_to_nearest_half(state.weight * (1 - rule.percent / 100)),
            stage=0,
        )

    if isinstance(rule, AddWeightResetStageRule):
        return replace(
            state,
            weight=round_to_nearest_half(state.weight + rule.amount),
            stage=0,
        )

    if isinstance(rule, (NoChangeRule, UpdateTrainingMaxRule)):
        # update_tm moves the shared training max, not the slot state
        return state

    raise TypeError(f"Unknown progression rule: {rule!r}")


def changes_state(rule: ProgressionRule) -> bool:
    """Whether a rule can move a slot's own weight or stage."""
    return not isinstance(rule, (NoChangeRule, UpdateTrainingMaxRule))
