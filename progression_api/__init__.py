"""
Generic progression computation engine for workout programs.

Usage:
    from progression_api import compute_generic_program
    from progression_api.programs import get_preset

    preset = get_preset("gzclp")
    rows = compute_generic_program(preset.definition, preset.default_config, results={})
"""

from progression_api.application.exceptions import (
    ConfigurationError,
    ProgressionEngineError,
)
from progression_api.services.progression_engine import (
    ProgressionEngine,
    compute_generic_program,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "ProgressionEngine",
    "ProgressionEngineError",
    "compute_generic_program",
]
