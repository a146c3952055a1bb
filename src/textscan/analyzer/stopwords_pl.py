"""Polish stop words for word frequency analysis."""

from __future__ import annotations

POLISH_STOP_WORDS = frozenset(
    {
        "i", "oraz", "że", "to", "w", "na", "z", "do", "się", "jest", "nie", "a",
        "o", "po", "u", "ten", "ta", "jak", "który", "która", "które", "te",
        "dla", "przy", "albo", "lub", "czy", "tam", "tu", "nad", "pod", "od",
        "bez", "więc", "co", "tak", "tylko", "mnie", "ciebie", "jego", "jej", "ich",
    }
)  # fmt: skip


def get_polish_stop_words() -> frozenset[str]:
    """Get the default set of Polish stop words.

    Returns:
        A frozenset of lowercase Polish stop words.
    """
    return POLISH_STOP_WORDS
