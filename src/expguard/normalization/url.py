"""URL pattern normalization and overlap detection.

Experiments target a class of pages rather than one page, so concrete URLs
are generalized into wildcard patterns:

- ``https://example.com/`` -> ``/``
- ``https://example.com/products/shoe-123`` -> ``/products/*``
- ``https://example.com/blog/2024/03/post`` -> ``/blog/*/*/*``
- ``/collections/summer`` -> ``/collections/summer``

Overlap checks err towards reporting overlap: a false positive blocks a
publish for review, a false negative lets two experiments fight over a page.
"""

import logging
import re
from functools import lru_cache
from typing import Any, Mapping
from urllib.parse import urlsplit

from expguard.core.constants import ALL_PATHS_PATTERN, ROOT_PATTERN, WILDCARD

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_REPEATED_SLASHES_RE = re.compile(r"/+")
_DIGIT_RE = re.compile(r"\d")
_SLUG_RE = re.compile(r"[-_]")
_YEAR_RE = re.compile(r"^\d{4}$")
_UUID_RE = re.compile(
    r"^[a-f0-9]{8}-?[a-f0-9]{4}-?[a-f0-9]{4}-?[a-f0-9]{4}-?[a-f0-9]{12}$",
    re.IGNORECASE,
)


def is_dynamic_segment(segment: str) -> bool:
    """Check whether a path segment looks like an id, slug, date or UUID."""
    return bool(
        _DIGIT_RE.search(segment)
        or _SLUG_RE.search(segment)
        or _YEAR_RE.match(segment)
        or _UUID_RE.match(segment)
    )


def normalize_url_to_pattern(url: str) -> str:
    """Normalize a URL or bare path into a canonical wildcard pattern.

    The first segment (the resource type) is always kept; later segments
    become ``*`` when they look dynamic or sit below a dynamic segment
    (``/blog/2024/03/post`` addresses one post, not a ``post`` section).
    Input that already holds a wildcard is only cleaned up. If the URL cannot be parsed the input is returned
    unchanged and callers treat it as an opaque literal.

    Args:
        url: Full URL or path.

    Returns:
        The canonical pattern.
    """
    try:
        if _SCHEME_RE.match(url):
            pathname = urlsplit(url).path
        else:
            pathname = url

        pathname = _REPEATED_SLASHES_RE.sub("/", pathname)
        pathname = pathname.removesuffix("/")

        if pathname in ("", ROOT_PATTERN):
            return ROOT_PATTERN

        segments = [s for s in pathname.split("/") if s]
        if not segments:
            return ROOT_PATTERN

        if WILDCARD in pathname:
            return pathname if pathname.startswith("/") else "/" + pathname

        pattern: list[str] = []
        below_dynamic = False
        for index, segment in enumerate(segments):
            if index > 0 and (below_dynamic or is_dynamic_segment(segment)):
                pattern.append(WILDCARD)
                below_dynamic = True
            else:
                pattern.append(segment)
        return "/" + "/".join(pattern)

    except ValueError as e:
        logger.debug(f"Treating unparsable URL as literal pattern: {url!r} ({e})")
        return url


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern:
    """Compile a wildcard pattern; each ``*`` matches one path segment."""
    body = "[^/]+".join(re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(f"^{body}(?:/|$)")


def _strip_trailing_slashes(pattern: str) -> str:
    return pattern.rstrip("/") or ROOT_PATTERN


def url_overlap(a: str, b: str) -> bool:
    """Check whether two patterns could match the same concrete URL.

    Examples:
        ``/`` and ``/products`` -> False
        ``/products/*`` and ``/products/shoe`` -> True
        ``/products/*`` and ``/products/*`` -> True
        ``/products/*/reviews`` and ``/products/123/reviews`` -> True

    Args:
        a: First pattern.
        b: Second pattern.

    Returns:
        True if the patterns overlap.
    """
    normalized_a = _strip_trailing_slashes(a)
    normalized_b = _strip_trailing_slashes(b)

    if normalized_a == normalized_b:
        return True

    # "/*" reserves every page, the root included
    if ALL_PATHS_PATTERN in (normalized_a, normalized_b):
        return True

    a_has_wildcard = WILDCARD in normalized_a
    b_has_wildcard = WILDCARD in normalized_b

    if a_has_wildcard and b_has_wildcard:
        # Over-approximation: nested literal prefixes count as overlap
        a_prefix = normalized_a.split(WILDCARD, 1)[0]
        b_prefix = normalized_b.split(WILDCARD, 1)[0]
        return a_prefix.startswith(b_prefix) or b_prefix.startswith(a_prefix)

    if a_has_wildcard:
        return _compile_pattern(normalized_a).match(normalized_b + "/") is not None

    if b_has_wildcard:
        return _compile_pattern(normalized_b).match(normalized_a + "/") is not None

    return normalized_a.startswith(normalized_b + "/") or normalized_b.startswith(
        normalized_a + "/"
    )


def url_matches_pattern(url: str, pattern: str) -> bool:
    """Check if a concrete URL falls under a pattern."""
    return url_overlap(normalize_url_to_pattern(url), pattern)


def extract_url_pattern(url_config: str | Mapping[str, Any] | None) -> str:
    """Extract a pattern from a stored experiment URL setting.

    Stored settings are either a URL string or a mapping with ``pattern`` or
    ``url``. Missing settings mean the experiment runs on every page.
    """
    if not url_config:
        return ALL_PATHS_PATTERN

    if isinstance(url_config, str):
        return normalize_url_to_pattern(url_config)

    if isinstance(url_config, Mapping):
        return normalize_url_to_pattern(
            url_config.get("pattern") or url_config.get("url") or ALL_PATHS_PATTERN
        )

    return ALL_PATHS_PATTERN
