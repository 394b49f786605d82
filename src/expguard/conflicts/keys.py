"""Identity keys for targets.

Targets are compared by key, never by raw selector or role text, so
cosmetic differences in markup references cannot hide a collision.
"""

import hashlib

from expguard.core.constants import ROLE_PREFIX
from expguard.models.target import TargetKeys
from expguard.normalization.selector import canonicalize_selector


def sha256(text: str) -> str:
    """Get the hex SHA-256 digest of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def selector_key(selector: str) -> str:
    """Hash the canonical form of a selector."""
    return sha256(canonicalize_selector(selector))


def role_key(role: str) -> str:
    """Build the normalized key for a semantic role label."""
    return f"{ROLE_PREFIX}{role.strip().lower()}"


def target_keys(selector: str | None = None, role: str | None = None) -> TargetKeys:
    """Derive identity keys for a selector and/or role.

    Each key is present only when its input was supplied. Blank input
    counts as absent.
    """
    canonical = canonicalize_selector(selector)
    return TargetKeys(
        target_key=sha256(canonical) if canonical else None,
        role_key=role_key(role) if role and role.strip() else None,
    )
