"""URL and selector normalization."""

from expguard.normalization.selector import canonicalize_selector
from expguard.normalization.url import (
    extract_url_pattern,
    normalize_url_to_pattern,
    url_matches_pattern,
    url_overlap,
)

__all__ = [
    "canonicalize_selector",
    "extract_url_pattern",
    "normalize_url_to_pattern",
    "url_matches_pattern",
    "url_overlap",
]
