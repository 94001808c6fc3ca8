"""Preset program definitions."""

from progression_api.programs.registry import (
    PRESETS,
    ProgramPreset,
    get_preset,
    list_presets,
)

__all__ = [
    "PRESETS",
    "ProgramPreset",
    "get_preset",
    "list_presets",
]
