"""expguard - conflict guard for website experiments.

Checks whether a proposed DOM change (a URL plus a CSS selector or semantic
role) collides with experiments already running, and builds redacted
reservation summaries for planning prompts.
"""

__version__ = "0.1.0"

from expguard.core import (
    ConflictError,
    ConflictReason,
    GuardConfig,
    GuardError,
)
from expguard.models import ActiveTarget, CandidateTarget, ReservedPayload
from expguard.conflicts import (
    ConflictGuard,
    find_conflicts,
    might_indirectly_affect,
    target_keys,
    to_reserved_payload,
)
from expguard.normalization import (
    canonicalize_selector,
    normalize_url_to_pattern,
    url_overlap,
)

__all__ = [
    "__version__",
    # Models
    "ActiveTarget",
    "CandidateTarget",
    "ReservedPayload",
    "ConflictReason",
    # Guard
    "ConflictGuard",
    "canonicalize_selector",
    "find_conflicts",
    "might_indirectly_affect",
    "normalize_url_to_pattern",
    "target_keys",
    "to_reserved_payload",
    "url_overlap",
    # Config
    "GuardConfig",
    # Errors
    "GuardError",
    "ConflictError",
]
