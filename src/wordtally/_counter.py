"""Frequency aggregation and ranking."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from ._ngrams import generate_ngrams
from ._types import RankedEntry


def count_frequencies(grams: Iterable[str]) -> Counter[str]:
    """Count occurrences of each distinct gram in a single pass."""
    table: Counter[str] = Counter()
    for gram in grams:
        table[gram] += 1
    return table


def merge_counts(*tables: Counter[str]) -> Counter[str]:
    """Sum partial frequency tables key by key."""
    merged: Counter[str] = Counter()
    for table in tables:
        merged.update(table)
    return merged


def count_frequencies_chunked(
    chunks: Iterable[Sequence[str]], n: int
) -> Counter[str]:
    """Count n-grams per token chunk and merge the partial tables.

    Windows never span two chunks, so each chunk should be a unit whose
    boundary is also a valid n-gram boundary (e.g. one document each).
    """
    return merge_counts(
        *(count_frequencies(generate_ngrams(chunk, n)) for chunk in chunks)
    )


def rank(table: Counter[str]) -> list[RankedEntry]:
    """Sort entries by count descending, ties by gram ascending."""
    ordered = sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))
    return [RankedEntry(gram, count) for gram, count in ordered]
