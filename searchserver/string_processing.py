"""Splitting text into words and normalising word collections."""

from collections.abc import Iterable


def split_into_words(text: str) -> list[str]:
    """Split ``text`` on space characters, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """Return the distinct non-empty strings of ``strings``."""
    return {string for string in strings if string}