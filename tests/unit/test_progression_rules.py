"""
Unit tests for services/progression_rules.py

The interpreter is a pure function of (rule, state, increment, last stage).
"""

import pytest

from progression_api.models.program import (
    AddWeightResetStageRule,
    AddWeightRule,
    AdvanceStageAddWeightRule,
    AdvanceStageRule,
    DeloadPercentRule,
    NoChangeRule,
    UpdateTrainingMaxRule,
)
from progression_api.services.progression_rules import (
    SlotState,
    apply_rule,
    changes_state,
)

LAST_STAGE = 2


@pytest.fixture
def state():
    return SlotState(weight=60.0, stage=0)


# ---------------------------------------------------------------------------
# Weight rules
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestWeightRules:
    """Rules that move the weight."""

    def test_add_weight_keeps_stage(self, state):
        result = apply_rule(AddWeightRule(), SlotState(60.0, stage=1), 5, LAST_STAGE)
        assert result == SlotState(65.0, stage=1)

    def test_add_weight_rounds_immediately(self, state):
        result = apply_rule(AddWeightRule(), state, 1.25, LAST_STAGE)
        assert result.weight == 61.5

    def test_add_weight_with_zero_increment(self, state):
        assert apply_rule(AddWeightRule(), state, 0, LAST_STAGE).weight == 60.0

    def test_deload_resets_stage(self):
        result = apply_rule(
            DeloadPercentRule(percent=10), SlotState(60.0, stage=2), 5, LAST_STAGE
        )
        assert result == SlotState(54.0, stage=0)

    def test_deload_rounds_to_half(self):
        result = apply_rule(DeloadPercentRule(percent=10), SlotState(47.5), 5, LAST_STAGE)
        assert result.weight == 43.0

    def test_add_weight_reset_stage_uses_rule_amount(self):
        result = apply_rule(
            AddWeightResetStageRule(amount=15), SlotState(26.0, stage=2), 2.5, LAST_STAGE
        )
        assert result == SlotState(41.0, stage=0)


# ---------------------------------------------------------------------------
# Stage rules
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestStageRules:
    """Rules that walk the stage ladder."""

    def test_advance_stage_keeps_weight(self, state):
        result = apply_rule(AdvanceStageRule(), state, 5, LAST_STAGE)
        assert result == SlotState(60.0, stage=1)

    def test_advance_stage_clamps_at_final_stage(self):
        result = apply_rule(AdvanceStageRule(), SlotState(60.0, stage=2), 5, LAST_STAGE)
        assert result.stage == LAST_STAGE

    def test_advance_stage_add_weight(self, state):
        result = apply_rule(AdvanceStageAddWeightRule(), state, 2.5, LAST_STAGE)
        assert result == SlotState(62.5, stage=1)

    def test_advance_stage_add_weight_clamps_stage(self):
        result = apply_rule(
            AdvanceStageAddWeightRule(), SlotState(60.0, stage=2), 2.5, LAST_STAGE
        )
        assert result == SlotState(62.5, stage=2)


# ---------------------------------------------------------------------------
# Identity rules
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestIdentityRules:
    """Rules that leave the slot state alone."""

    def test_no_change_returns_same_state(self, state):
        assert apply_rule(NoChangeRule(), state, 5, LAST_STAGE) is state

    def test_update_tm_does_not_touch_slot_state(self, state):
        rule = UpdateTrainingMaxRule(amount=5, min_amrap_reps=1)
        assert apply_rule(rule, state, 5, LAST_STAGE) is state

    def test_ever_changed_is_carried(self):
        state = SlotState(60.0, stage=0, ever_changed=True)
        assert apply_rule(AddWeightRule(), state, 5, LAST_STAGE).ever_changed is True

    def test_unknown_rule_raises(self, state):
        with pytest.raises(TypeError, match="Unknown progression rule"):
            apply_rule({"type": "add_weight"}, state, 5, LAST_STAGE)


@pytest.mark.unit
class TestChangesState:
    @pytest.mark.parametrize(
        "rule",
        [
            AddWeightRule(),
            AdvanceStageRule(),
            AdvanceStageAddWeightRule(),
            DeloadPercentRule(percent=10),
            AddWeightResetStageRule(amount=2.5),
        ],
    )
    def test_state_moving_rules(self, rule):
        assert changes_state(rule) is True

    @pytest.mark.parametrize(
        "rule", [NoChangeRule(), UpdateTrainingMaxRule(amount=5, min_amrap_reps=1)]
    )
    def test_identity_rules(self, rule):
        assert changes_state(rule) is False
