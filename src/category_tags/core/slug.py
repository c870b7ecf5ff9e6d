"""URL slug derivation for category names."""

from __future__ import annotations

import regex

# Underscores and anything outside \p{Word} (letters, marks, decimal digits, connector punctuation).
_SEPARATOR_RUN_PATTERN = regex.compile(r"[_\P{Word}]+")


def slugify(name: str) -> str:
    """Derive the URL slug for a category name.

    Every run of underscores or non-word characters becomes a single hyphen,
    hyphens at either end are dropped and the result is lower-cased. Letters,
    combining marks and digits from any script are kept, so decomposed (NFD)
    names stay in one piece.

    A name made only of separators slugifies to ``""``; its URL is then the
    category directory itself.

    Example:
        ``slugify("Sci-Fi & Fantasy")`` -> ``"sci-fi-fantasy"``
        ``slugify("C++")`` -> ``"c"``
        ``slugify("Café Culture")`` -> ``"café-culture"``
    """
    return _SEPARATOR_RUN_PATTERN.sub("-", name).strip("-").lower()


__all__ = ["slugify"]
