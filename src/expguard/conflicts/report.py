"""Human-readable conflict rendering."""

from typing import Iterable

from expguard.core.constants import CONFLICTS_HEADER, NO_CONFLICTS_MESSAGE
from expguard.models.target import ActiveTarget


def format_conflict_line(target: ActiveTarget) -> str:
    """Render one conflicting target."""
    return f"  - Experiment {target.experiment_id}: {target.label} on {target.url_pattern}"


def format_conflict_error(conflicts: Iterable[ActiveTarget]) -> str:
    """Format conflicting targets for operators and API error responses."""
    lines = [format_conflict_line(c) for c in conflicts]
    if not lines:
        return NO_CONFLICTS_MESSAGE
    return CONFLICTS_HEADER + "\n" + "\n".join(lines)
