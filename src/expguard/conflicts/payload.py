"""Reserved-payload builder for generation prompts."""

import logging
from typing import Iterable

from expguard.core.constants import (
    DEFAULT_MAX_RESERVED_ITEMS,
    REDACTED_SELECTOR,
    ROLE_PREFIX,
)
from expguard.models.payload import ReservationRules, ReservedPayload, ReservedTarget
from expguard.models.target import ActiveTarget
from expguard.normalization.url import normalize_url_to_pattern, url_overlap

logger = logging.getLogger(__name__)


def to_reserved_target(target: ActiveTarget) -> ReservedTarget:
    """Project an active target into its redacted summary."""
    return ReservedTarget(
        scope=target.url_pattern,
        role=target.role_key.removeprefix(ROLE_PREFIX) if target.role_key else None,
        selector_hint=REDACTED_SELECTOR if target.target_key else None,
        semantics=[target.label],
        experiment_id=target.experiment_id,
    )


def to_reserved_payload(
    context_url: str,
    active: Iterable[ActiveTarget],
    max_items: int = DEFAULT_MAX_RESERVED_ITEMS,
) -> ReservedPayload:
    """Summarize the reservations relevant to a page.

    Only targets whose pattern overlaps the page are kept, and at most
    ``max_items`` of them to bound prompt size. Raw selectors never appear.

    Args:
        context_url: URL of the page being planned for.
        active: Snapshot of active targets.
        max_items: Maximum number of reservations to include.

    Returns:
        The reserved payload.
    """
    scope = normalize_url_to_pattern(context_url)
    in_scope = [t for t in active if url_overlap(scope, t.url_pattern)]

    if len(in_scope) > max_items:
        logger.debug(
            f"Truncating reservations for {scope} from {len(in_scope)} to {max_items}"
        )

    return ReservedPayload(
        context_url=context_url,
        context_pattern=scope,
        reserved_targets=[to_reserved_target(t) for t in in_scope[:max(max_items, 0)]],
        rules=ReservationRules(),
    )
