"""CSS selector canonicalization.

Canonical selectors only need to be stable: two spellings of the same
selector must produce the same text so their hashes match. The grammar is
not validated; malformed input still yields a usable canonical form.
"""

import re

# Attribute brackets and quoted strings are copied through untouched
_PROTECTED_RE = re.compile(r"""(\[[^\]]*\]|"[^"]*"|'[^']*')""")
_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"(^|[\s>+~,(])([A-Za-z][A-Za-z0-9-]*)")
_COMBINATOR_RE = re.compile(r"\s*([>+,]|~(?!=))\s*")
_TAG_CLASS_GAP_RE = re.compile(r"(^|[\s>+~,(])([a-z][a-z0-9-]*) (?=\.)")
_CLASS_RUN_RE = re.compile(r"(?:\.[\w-]+){2,}")


def _format_combinator(match: re.Match) -> str:
    combinator = match.group(1)
    if combinator == ",":
        return ", "
    return f" {combinator} "


def _sort_classes(match: re.Match) -> str:
    classes = [c for c in match.group(0).split(".") if c]
    return "." + ".".join(sorted(classes))


def _canonicalize_plain(text: str) -> str:
    text = _TAG_RE.sub(lambda m: m.group(1) + m.group(2).lower(), text)
    text = _COMBINATOR_RE.sub(_format_combinator, text)
    text = _TAG_CLASS_GAP_RE.sub(r"\1\2", text)
    return _CLASS_RUN_RE.sub(_sort_classes, text)


def canonicalize_selector(selector: str | None) -> str:
    """Canonicalize a CSS selector for comparison.

    - Collapses whitespace
    - Lowercases element names
    - Normalizes spacing around combinators (``>``, ``+``, ``~``, ``,``)
    - Folds ``tag .class`` into ``tag.class``
    - Sorts each run of class names

    Args:
        selector: Raw selector text.

    Returns:
        The canonical selector, or an empty string when no selector was given.
    """
    if not selector:
        return ""

    text = _WHITESPACE_RE.sub(" ", selector.strip())
    parts = _PROTECTED_RE.split(text)
    canonical = "".join(
        part if index % 2 else _canonicalize_plain(part)
        for index, part in enumerate(parts)
    )
    return canonical.strip()
