"""Core constants, configuration and exceptions."""

from expguard.core.config import GuardConfig
from expguard.core.constants import ConflictReason, ExperimentStatus
from expguard.core.exceptions import ConflictError, GuardError

__all__ = [
    "ConflictError",
    "ConflictReason",
    "ExperimentStatus",
    "GuardConfig",
    "GuardError",
]
