"""Character-level string algorithms over ASCII text."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterator
from itertools import zip_longest

_UPPER = string.ascii_uppercase
_LOWER = string.ascii_lowercase
_TO_LOWER = str.maketrans(_UPPER, _LOWER)
_TOGGLE = str.maketrans(_UPPER + _LOWER, _LOWER + _UPPER)
_VOWELS = frozenset("aeiouAEIOU")
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)


def length(text: str) -> int:
    """Number of characters in text."""
    return sum(1 for _ in text)


def to_lower(text: str) -> str:
    """Turn ASCII upper-case letters into lower case."""
    return text.translate(_TO_LOWER)


def toggle_case(text: str) -> str:
    """Swap the case of every ASCII letter, leaving other characters alone."""
    return text.translate(_TOGGLE)


def count_vowels_consonants(text: str) -> tuple[int, int]:
    """Return (vowels, consonants) among the ASCII letters of text."""
    vowels = sum(1 for ch in text if ch in _VOWELS)
    letters = sum(1 for ch in text if ch in _LETTERS)
    return vowels, letters - vowels


def count_words(text: str) -> int:
    """Count words as runs of spaces plus one."""
    gaps = sum(
        1 for previous, ch in zip("\0" + text, text) if ch == " " and previous != " "
    )
    return gaps + 1


def is_valid(text: str) -> bool:
    """True if text holds only ASCII letters and digits."""
    return all(ch in _ALNUM for ch in text)


def reverse(text: str) -> str:
    """Reverse text by copying it back to front."""
    return "".join(reversed(text))


def reverse_by_swap(text: str) -> str:
    """Reverse text by swapping characters from both ends inward."""
    chars = list(text)
    i, j = 0, len(chars) - 1
    while i < j:
        chars[i], chars[j] = chars[j], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def compare(first: str, second: str) -> int:
    """Compare character by character: -1, 0 or 1 like a three-way comparison."""
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return -1 if a < b else 1
    return 0


def is_palindrome(text: str) -> bool:
    """True if text reads the same forwards and backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))


def _require_lowercase(text: str) -> None:
    bad = {ch for ch in text if ch not in _LOWER}
    if bad:
        raise ValueError(f"only lower-case ASCII letters are allowed, got {sorted(bad)}")


def duplicate_counts(text: str) -> dict[str, int]:
    """Letters that occur more than once, in alphabetical order, with their counts."""
    _require_lowercase(text)
    counts = Counter(text)
    return {ch: counts[ch] for ch in _LOWER if counts[ch] > 1}


def duplicates_bitwise(text: str) -> list[str]:
    """Each repeated letter, reported every time it is seen again, via a bit mask."""
    _require_lowercase(text)
    seen = 0
    repeats = []
    for ch in text:
        bit = 1 << (ord(ch) - ord("a"))
        if seen & bit:
            repeats.append(ch)
        else:
            seen |= bit
    return repeats


def is_anagram(first: str, second: str) -> bool:
    """True if both strings use exactly the same characters."""
    if len(first) != len(second):
        return False
    balance = Counter(first)
    balance.subtract(second)
    return not any(balance.values())


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of text, choosing unused positions in order."""
    used = [False] * len(text)
    chosen: list[str] = []

    def build() -> Iterator[str]:
        if len(chosen) == len(text):
            yield "".join(chosen)
            return
        for position, ch in enumerate(text):
            if not used[position]:
                used[position] = True
                chosen.append(ch)
                yield from build()
                chosen.pop()
                used[position] = False

    yield from build()


def permutations_by_swap(text: str) -> Iterator[str]:
    """Yield every arrangement of text by swapping each character into place."""
    chars = list(text)
    last = len(chars) - 1

    def build(low: int) -> Iterator[str]:
        if low >= last:
            yield "".join(chars)
            return
        for i in range(low, last + 1):
            chars[i], chars[low] = chars[low], chars[i]
            yield from build(low + 1)
            chars[i], chars[low] = chars[low], chars[i]

    yield from build(0)