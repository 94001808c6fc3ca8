"""
Preset program registry.

Presets are stored in the same camelCase shape as user-authored definitions
and are parsed once at import, so a malformed preset fails loudly at startup.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping

from progression_api.application.exceptions import UnknownPresetError
from progression_api.models.program import ProgramDefinition
from progression_api.programs.fsl531 import FSL531_DEFAULT_CONFIG, FSL531_DEFINITION
from progression_api.programs.gzclp import GZCLP_DEFAULT_CONFIG, GZCLP_DEFINITION
from progression_api.programs.stronglifts import (
    STRONGLIFTS_DEFAULT_CONFIG,
    STRONGLIFTS_DEFINITION,
)


@dataclass(frozen=True)
class ProgramPreset:
    """A preset definition with a sensible starting config."""

    definition: ProgramDefinition
    default_config: Mapping[str, float]

    @property
    def id(self) -> str:
        return self.definition.id


def _build(raw_definition: dict, default_config: dict) -> ProgramPreset:
    return ProgramPreset(
        definition=ProgramDefinition.model_validate(raw_definition),
        default_config=dict(default_config),
    )


PRESETS: Dict[str, ProgramPreset] = {
    preset.id: preset
    for preset in (
        _build(GZCLP_DEFINITION, GZCLP_DEFAULT_CONFIG),
        _build(STRONGLIFTS_DEFINITION, STRONGLIFTS_DEFAULT_CONFIG),
        _build(FSL531_DEFINITION, FSL531_DEFAULT_CONFIG),
    )
}


def get_preset(preset_id: str) -> ProgramPreset:
    """
    Look up a preset by id.

    Raises:
        UnknownPresetError: If no preset has that id
    """
    try:
        return PRESETS[preset_id]
    except KeyError:
        raise UnknownPresetError(preset_id) from None


def list_presets() -> List[ProgramPreset]:
    """All presets, sorted by id."""
    return [PRESETS[preset_id] for preset_id in sorted(PRESETS)]
