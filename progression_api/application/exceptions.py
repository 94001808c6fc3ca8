"""
Application-layer exceptions.

These exceptions are raised by the engine and the preset registry and are the
only errors callers need to handle.
"""

from typing import List, Optional


class ProgressionEngineError(Exception):
    """Base class for progression engine errors."""

    pass


class ConfigurationError(ProgressionEngineError):
    """Definition or config authoring defect.

    Raised when the definition or its starting config cannot produce correct
    rows: a missing start weight, an empty stage ladder, a non-positive cycle
    length, and similar. The whole computation is aborted instead of emitting
    rows built on a silently defaulted value.
    """

    def __init__(self, message: str, issues: Optional[List[str]] = None):
        super().__init__(message)
        self.issues: List[str] = list(issues) if issues else [message]


class UnknownPresetError(ProgressionEngineError, KeyError):
    """No preset program is registered under the requested id."""

    def __init__(self, preset_id: str):
        super().__init__(preset_id)
        self.preset_id = preset_id

    def __str__(self) -> str:
        return f"Unknown preset program: '{self.preset_id}'"
