"""Experiment conflict guard.

Decides whether a proposed experiment target collides with targets already
reserved by running experiments, and summarizes reservations for planning
prompts.
"""

from expguard.conflicts.detector import explain_conflicts, find_conflicts
from expguard.conflicts.guard import ConflictGuard
from expguard.conflicts.indirect import might_indirectly_affect
from expguard.conflicts.keys import sha256, target_keys
from expguard.conflicts.payload import to_reserved_payload
from expguard.conflicts.report import format_conflict_error
from expguard.conflicts.targets import targets_from_experiments

__all__ = [
    "ConflictGuard",
    "explain_conflicts",
    "find_conflicts",
    "format_conflict_error",
    "might_indirectly_affect",
    "sha256",
    "target_keys",
    "targets_from_experiments",
    "to_reserved_payload",
]
