"""Recursive string exercises: reversal, permutations, subsequences."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import groupby


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return "".join(reversed(text))


def collapse_repeats(text: str) -> str:
    """Collapse every run of equal adjacent characters to a single one."""
    return "".join(char for char, _ in groupby(text))


def permutations(text: str) -> Iterator[str]:
    """Yield every ordering of the characters of text.

    Characters are picked left to right, so repeated characters give
    repeated results, and the empty string yields one empty permutation.
    """
    if not text:
        yield ""
        return
    for i, char in enumerate(text):
        for rest in permutations(text[:i] + text[i + 1 :]):
            yield char + rest


def subsequences(text: str) -> Iterator[str]:
    """Yield all subsequences of text, those leaving out the first
    character before those keeping it."""
    if not text:
        yield ""
        return
    head, rest = text[0], text[1:]
    tails = list(subsequences(rest))
    yield from tails
    for tail in tails:
        yield head + tail


def subsequences_with_codes(text: str) -> Iterator[str]:
    """Yield subsequences where each character is left out, kept, or
    replaced by its decimal character code, in that order."""
    if not text:
        yield ""
        return
    head, rest = text[0], text[1:]
    tails = list(subsequences_with_codes(rest))
    yield from tails
    for tail in tails:
        yield head + tail
    code = str(ord(head))
    for tail in tails:
        yield code + tail


def is_palindrome(text: str) -> bool:
    """True when text reads the same forwards and backwards."""
    size = len(text)
    return all(text[i] == text[size - i - 1] for i in range(size // 2))


def replace_pi(text: str) -> str:
    """Replace each occurrence of "pi", scanning left to right, with "3.14"."""
    return text.replace("pi", "3.14")