"""Application layer for progression-api."""

from progression_api.application.exceptions import (
    ConfigurationError,
    ProgressionEngineError,
    UnknownPresetError,
)

__all__ = [
    "ConfigurationError",
    "ProgressionEngineError",
    "UnknownPresetError",
]
