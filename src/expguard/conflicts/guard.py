"""Conflict guard facade.

Binds the pure detection functions to a configuration and applies the
publish policy: strict mode raises ``ConflictError``, lenient mode logs a
warning and lets the caller proceed.
"""

import logging
from typing import Iterable, Mapping

from expguard.core.config import GuardConfig
from expguard.core.exceptions import ConflictError
from expguard.models.conflict import ConflictCheck
from expguard.models.payload import ReservedPayload
from expguard.models.target import ActiveTarget, CandidateTarget
from expguard.conflicts.detector import explain_conflicts
from expguard.conflicts.indirect import might_indirectly_affect
from expguard.conflicts.payload import to_reserved_payload
from expguard.conflicts.report import format_conflict_error
from expguard.normalization.url import normalize_url_to_pattern

logger = logging.getLogger(__name__)


class ConflictGuard:
    """Publish-time gate over a snapshot of active targets.

    The guard holds no state besides its configuration; every call works
    on the snapshot passed in.
    """

    def __init__(self, config: GuardConfig | None = None) -> None:
        """Initialize the guard.

        Args:
            config: Optional configuration.
        """
        self._config = config or GuardConfig()

    @property
    def config(self) -> GuardConfig:
        """Get the active configuration."""
        return self._config

    def check(
        self,
        active: Iterable[ActiveTarget],
        candidate: CandidateTarget,
    ) -> ConflictCheck:
        """Check a candidate against active targets."""
        matches = explain_conflicts(active, candidate)
        return ConflictCheck(
            candidate=candidate,
            candidate_pattern=normalize_url_to_pattern(candidate.url),
            matches=matches,
            message=format_conflict_error(m.target for m in matches),
        )

    def ensure_no_conflicts(
        self,
        active: Iterable[ActiveTarget],
        candidate: CandidateTarget,
    ) -> ConflictCheck:
        """Check a candidate and apply the conflict policy.

        Raises:
            ConflictError: If conflicts exist and the policy is strict.
        """
        result = self.check(active, candidate)
        if not result.has_conflicts:
            return result

        if self._config.conflicts.strict:
            raise ConflictError(self._config.conflicts.error_code, result.conflicts)

        logger.warning(f"Publishing despite conflicts: {result.message}")
        return result

    def indirect_warnings(
        self,
        proposal_selector: str | None,
        reserved_selectors: Mapping[str, str],
    ) -> list[str]:
        """List experiments whose reserved selector the proposal may disturb.

        Args:
            proposal_selector: Selector the new experiment changes.
            reserved_selectors: Raw reserved selector per experiment id.

        Returns:
            Experiment ids flagged by the heuristic.
        """
        flagged = [
            experiment_id
            for experiment_id, selector in reserved_selectors.items()
            if might_indirectly_affect(proposal_selector, selector)
        ]
        if flagged:
            logger.info(f"Possible indirect effects on experiments: {', '.join(flagged)}")
        return flagged

    def reserved_payload(
        self,
        context_url: str,
        active: Iterable[ActiveTarget],
    ) -> ReservedPayload:
        """Build the reserved payload with the configured size bound."""
        return to_reserved_payload(
            context_url, active, max_items=self._config.payload.max_items
        )
