"""Text utilities: word frequencies, reversal and palindrome checks."""

from __future__ import annotations

from collections import Counter


def word_frequency(text: str) -> dict[str, int]:
    """Count case-insensitive, whitespace-separated words in first-seen order."""
    return dict(Counter(text.lower().split()))


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return all(text[i] == text[-1 - i] for i in range(len(text) // 2))