"""Conflict detection between a candidate and active targets.

A candidate conflicts with an active target when their URL patterns overlap
and they share an identity: the same canonical selector hash, or the same
semantic role. Distinct selectors on the same page may coexist.
"""

import logging
from typing import Iterable

from expguard.core.constants import ConflictReason
from expguard.models.conflict import ConflictMatch
from expguard.models.target import ActiveTarget, CandidateTarget, TargetKeys
from expguard.conflicts.keys import target_keys
from expguard.normalization.url import normalize_url_to_pattern, url_overlap

logger = logging.getLogger(__name__)


def match_reason(keys: TargetKeys, target: ActiveTarget) -> ConflictReason | None:
    """Compare candidate keys with one active target on an overlapping page.

    Returns:
        The reason for the collision, or None if the targets may coexist.
    """
    if keys.target_key and target.target_key and keys.target_key == target.target_key:
        return ConflictReason.SELECTOR

    if keys.role_key and target.role_key and keys.role_key == target.role_key:
        return ConflictReason.ROLE

    return None


def explain_conflicts(
    active: Iterable[ActiveTarget],
    candidate: CandidateTarget,
) -> list[ConflictMatch]:
    """Find every active target colliding with a candidate, with reasons.

    Args:
        active: Snapshot of targets reserved by running experiments.
        candidate: The proposed target.

    Returns:
        Matches in snapshot order.
    """
    candidate_pattern = normalize_url_to_pattern(candidate.url)
    keys = target_keys(candidate.selector, candidate.role)
    matches: list[ConflictMatch] = []

    for target in active:
        if not url_overlap(candidate_pattern, target.url_pattern):
            continue

        reason = match_reason(keys, target)
        if reason is not None:
            matches.append(ConflictMatch(target=target, reason=reason))

    if matches:
        logger.info(
            f"Candidate on {candidate_pattern} conflicts with "
            f"{len(matches)} active target(s): "
            f"{', '.join(m.target.experiment_id for m in matches)}"
        )
    return matches


def find_conflicts(
    active: Iterable[ActiveTarget],
    candidate: CandidateTarget,
) -> list[ActiveTarget]:
    """Find every active target colliding with a candidate.

    An empty list means the candidate may be published.
    """
    return [m.target for m in explain_conflicts(active, candidate)]
