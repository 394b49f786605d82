"""Reserved-payload models handed to prompt assembly."""

from dataclasses import dataclass, field
from typing import Any

from expguard.core.constants import RESERVATION_RULES


@dataclass(frozen=True)
class ReservedTarget:
    """Redacted summary of one reservation.

    The raw selector is never carried; ``selector_hint`` only signals that a
    selector-based reservation exists.
    """

    scope: str
    role: str | None
    selector_hint: str | None
    semantics: list[str]
    experiment_id: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "scope": self.scope,
            "role": self.role,
            "selector_hint": self.selector_hint,
            "semantics": list(self.semantics),
            "experiment_id": self.experiment_id,
        }


@dataclass(frozen=True)
class ReservationRules:
    """Fixed policy flags communicated to the payload consumer."""

    strict: bool = RESERVATION_RULES["strict"]
    check_overlaps: bool = RESERVATION_RULES["check_overlaps"]
    prevent_indirect_changes: bool = RESERVATION_RULES["prevent_indirect_changes"]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "strict": self.strict,
            "check_overlaps": self.check_overlaps,
            "prevent_indirect_changes": self.prevent_indirect_changes,
        }


@dataclass(frozen=True)
class ReservedPayload:
    """Bounded summary of reservations in scope of a page."""

    context_url: str
    context_pattern: str
    reserved_targets: list[ReservedTarget] = field(default_factory=list)
    rules: ReservationRules = field(default_factory=ReservationRules)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "context_url": self.context_url,
            "context_pattern": self.context_pattern,
            "reserved_targets": [t.to_dict() for t in self.reserved_targets],
            "rules": self.rules.to_dict(),
        }
