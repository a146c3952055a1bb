"""Sort strategies for word count listings.

Each SortMode maps to a key function through ``SORT_KEYS``. Alphabetic order
uses ``collation_key``, which follows the Polish alphabet: case is ignored and
the letters ą ć ę ł ń ó ś ź ż sort right after their base letter
(a < ą < b, l < ł < m). Other accents are secondary differences, so
``é`` groups with ``e`` and only decides ties between otherwise equal words.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from typing import Any, Final

from textscan.analyzer.models import SortMode, WordCount

# Letters of the Polish alphabet that carry a diacritic
POLISH_LETTERS: Final[frozenset[str]] = frozenset("ąćęłńóśźż")

# Letters whose stroke is not a combining mark under NFD
STROKED_LETTERS: Final[dict[str, tuple[str, str]]] = {
    "ł": ("l", "\u0335"),
    "ø": ("o", "\u0335"),
    "đ": ("d", "\u0335"),
    "ħ": ("h", "\u0335"),
    "ŧ": ("t", "\u0335"),
}

CollationKey = tuple[tuple[str, ...], tuple[str, ...]]


def _split_letter(char: str) -> tuple[str, str]:
    if char in STROKED_LETTERS:
        return STROKED_LETTERS[char]
    decomposed = unicodedata.normalize("NFD", char)
    marks = "".join(c for c in decomposed[1:] if unicodedata.combining(c))
    return decomposed[0], marks


def collation_key(word: str) -> CollationKey:
    """Build a case-insensitive sort key in Polish alphabet order.

    The key has two levels. The primary level holds one entry per letter:
    the base letter, extended with its diacritic for Polish letters so that
    ``ą`` sorts after every word continuing with plain ``a``. The secondary
    level holds the remaining accent marks and only breaks ties, which means
    ``"éa" < "eb"`` while ``"e" < "é"``.

    Args:
        word: The word to build a key for.

    Returns:
        Tuple of (primary, secondary) letter tuples.
    """
    primary: list[str] = []
    secondary: list[str] = []
    for char in unicodedata.normalize("NFC", word.casefold()):
        base, marks = _split_letter(char)
        if char in POLISH_LETTERS:
            primary.append(base + marks)
            secondary.append("")
        else:
            primary.append(base)
            secondary.append(marks)
    return tuple(primary), tuple(secondary)


def _alphabetic_key(item: WordCount) -> tuple[Any, ...]:
    return (collation_key(item.word), item.word)


def _frequency_desc_key(item: WordCount) -> tuple[Any, ...]:
    return (-item.count, collation_key(item.word), item.word)


def _frequency_asc_key(item: WordCount) -> tuple[Any, ...]:
    return (item.count, collation_key(item.word), item.word)


SORT_KEYS: Final[dict[SortMode, Callable[[WordCount], tuple[Any, ...]]]] = {
    SortMode.ALPHABETIC: _alphabetic_key,
    SortMode.FREQUENCY_DESC: _frequency_desc_key,
    SortMode.FREQUENCY_ASC: _frequency_asc_key,
}


def sort_word_counts(
    items: Iterable[WordCount],
    mode: SortMode = SortMode.FREQUENCY_DESC,
) -> tuple[WordCount, ...]:
    """Sort word counts according to a sort mode.

    Args:
        items: Word counts to sort.
        mode: Sort mode selecting the key function.

    Returns:
        Tuple of WordCount items in the requested order.
    """
    return tuple(sorted(items, key=SORT_KEYS[SortMode(mode)]))
