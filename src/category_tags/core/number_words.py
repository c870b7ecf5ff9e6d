"""English word forms for post counts."""

from __future__ import annotations

_ONES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
_TENS = ("twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def _build_number_words() -> tuple[str, ...]:
    words = list(_ONES)
    for tens in _TENS:
        words.append(tens)
        words.extend(f"{tens}-{ones}" for ones in _ONES[1:10])
    words.append("one hundred")
    return tuple(words)


# Index i holds the word form of i, for 0 <= i <= 100.
NUMBER_WORDS: tuple[str, ...] = _build_number_words()

OVERFLOW_COUNT = "100+"


def count_in_words(count: int) -> str:
    """Return the English word for *count*, or ``"100+"`` past the table."""
    if 0 <= count < len(NUMBER_WORDS):
        return NUMBER_WORDS[count]
    return OVERFLOW_COUNT


def humanize_count(count: int) -> str:
    """Format a post count for display.

    Example:
        ``humanize_count(1)`` -> ``"one post"``
        ``humanize_count(42)`` -> ``"forty-two posts"``
        ``humanize_count(250)`` -> ``"100+ posts"``
    """
    suffix = "post" if count == 1 else "posts"
    return f"{count_in_words(count)} {suffix}"


__all__ = ["NUMBER_WORDS", "OVERFLOW_COUNT", "count_in_words", "humanize_count"]
