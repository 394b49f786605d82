"""Guard exception hierarchy."""

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from expguard.models.target import ActiveTarget


class GuardError(Exception):
    """Base exception for all guard errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(GuardError):
    """Raised when configuration is invalid."""

    pass


class TargetFileError(GuardError):
    """Raised when an active-target snapshot cannot be loaded."""

    def __init__(
        self, message: str, path: Path | None = None, details: dict[str, Any] | None = None
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        super().__init__(message, details)
        self.path = path


class ConflictError(GuardError):
    """Raised by a publish workflow when a candidate collides with active targets.

    The message defaults to the formatted conflict list. ``details`` holds the
    code and the serialized targets so API layers can return them as-is.
    """

    def __init__(
        self,
        code: str,
        conflicts: list["ActiveTarget"],
        message: str | None = None,
    ) -> None:
        from expguard.conflicts.report import format_conflict_error

        super().__init__(
            message or format_conflict_error(conflicts),
            details={
                "code": code,
                "experiment_ids": [c.experiment_id for c in conflicts],
            },
        )
        self.code = code
        self.conflicts = list(conflicts)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "conflicts": [c.to_dict() for c in self.conflicts],
        }
