"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Every emitted weight is a multiple of this step
WEIGHT_STEP = 0.5

# Increment used when a definition has no entry for an exercise
DEFAULT_WEIGHT_INCREMENT = 0.0

# Accepted RPE range for recorded results
MIN_RPE = 1.0
MAX_RPE = 10.0

# Role inferred from a tier label when a slot sets no explicit role.
# Values are SlotRole values; unknown tiers infer no role.
TIER_ROLE_MAP = {
    "t1": "primary",
    "t2": "secondary",
    "t3": "primary",
}
