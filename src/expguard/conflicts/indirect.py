"""Indirect-effect heuristic.

Advisory only: flags selector pairs that are not identical but may still
interact (ancestor/descendant, shared parent, document-wide scope). The
false-positive rate is high, so the result never gates publication.
"""

import re

from expguard.core.constants import GLOBAL_SCOPE_PREFIXES

_WHITESPACE_RE = re.compile(r"\s+")


def parent_selector(selector: str) -> str:
    """Strip the last whitespace-delimited token of a selector."""
    parts = _WHITESPACE_RE.split(selector.strip())
    return " ".join(parts[:-1])


def might_indirectly_affect(
    proposal_selector: str | None,
    reserved_selector: str | None,
) -> bool:
    """Check if a proposal might indirectly affect a reserved target.

    Args:
        proposal_selector: Selector the new experiment changes.
        reserved_selector: Selector held by a running experiment.

    Returns:
        True if the pair may interact.
    """
    if not proposal_selector or not reserved_selector:
        return False

    proposal = proposal_selector.lower()
    reserved = reserved_selector.lower()

    # Ancestor or descendant
    if proposal in reserved or reserved in proposal:
        return True

    # Siblings under the same parent may shift each other
    proposal_parent = parent_selector(proposal)
    reserved_parent = parent_selector(reserved)
    if proposal_parent and proposal_parent == reserved_parent:
        return True

    # Document-wide rules cascade everywhere
    return proposal.lstrip().startswith(GLOBAL_SCOPE_PREFIXES)
