"""Small helpers over strings and lists of strings."""

from typing import Callable, Iterable


def first_char(s: str) -> str:
    """First character of ``s``, or ``s`` itself when empty."""
    return s[0] if s else s


def last_char(s: str) -> str:
    """Last character of ``s``, or ``s`` itself when empty."""
    return s[-1] if s else s


def unique_strings(strings: Iterable[str]) -> list[str]:
    """Drop duplicates. The order of the result is not guaranteed."""
    return list(set(strings))


def filter_strings(strings: Iterable[str], predicate: Callable[[str], bool]) -> list[str]:
    """Keep the strings matching ``predicate``, in input order."""
    return [s for s in strings if predicate(s)]


def trim_all(strings: Iterable[str]) -> list[str]:
    return [s.strip() for s in strings]


def remove_blank(strings: Iterable[str]) -> list[str]:
    """Drop entries that are empty once whitespace is stripped, and non-strings.

    Kept entries are returned as given, not trimmed.
    """
    return [s for s in strings if isinstance(s, str) and s.strip()]
