"""Conflict check result models."""

from dataclasses import dataclass, field
from typing import Any

from expguard.core.constants import ConflictReason
from expguard.models.target import ActiveTarget, CandidateTarget


@dataclass(frozen=True)
class ConflictMatch:
    """An active target that collides with a candidate, and why."""

    target: ActiveTarget
    reason: ConflictReason

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "target": self.target.to_dict(),
            "reason": self.reason.value,
        }


@dataclass
class ConflictCheck:
    """Outcome of checking one candidate against an active-target snapshot."""

    candidate: CandidateTarget
    candidate_pattern: str
    matches: list[ConflictMatch] = field(default_factory=list)
    message: str = ""

    @property
    def conflicts(self) -> list[ActiveTarget]:
        """Get the conflicting targets in snapshot order."""
        return [m.target for m in self.matches]

    @property
    def has_conflicts(self) -> bool:
        """Check whether publishing would collide with a running experiment."""
        return bool(self.matches)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "candidate": self.candidate.to_dict(),
            "candidate_pattern": self.candidate_pattern,
            "has_conflicts": self.has_conflicts,
            "matches": [m.to_dict() for m in self.matches],
            "message": self.message,
        }
