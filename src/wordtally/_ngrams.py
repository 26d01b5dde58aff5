"""Sliding-window n-gram generation."""

from __future__ import annotations

from collections.abc import Sequence


def generate_ngrams(tokens: Sequence[str], n: int) -> list[str]:
    """Join each stride-1 window of n tokens with a single space.

    n == 1 returns the tokens unchanged. Fewer than n tokens yields an
    empty list.
    """
    if n < 1:
        raise ValueError(f"n-gram width must be at least 1, got {n}")
    if n == 1:
        return list(tokens)
    return [
        " ".join(tokens[i:i + n])
        for i in range(len(tokens) - n + 1)
    ]
