"""Token filter chain: stopwords, regex, minimum length, starts-with."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ._stop_words import STOP_WORDS
from ._types import FilterSpec


def filter_stopwords(
    tokens: Iterable[str], stopwords: frozenset[str] = STOP_WORDS
) -> list[str]:
    """Drop tokens present in the stopword set."""
    return [t for t in tokens if t not in stopwords]


def filter_regex(tokens: Iterable[str], pattern: re.Pattern[str]) -> list[str]:
    """Keep tokens in which the pattern matches anywhere."""
    return [t for t in tokens if pattern.search(t) is not None]


def filter_min_length(tokens: Iterable[str], min_length: int) -> list[str]:
    """Keep tokens strictly longer than min_length."""
    return [t for t in tokens if len(t) > min_length]


def filter_starts_with(tokens: Iterable[str], char: str) -> list[str]:
    """Keep tokens whose first character equals char."""
    return [t for t in tokens if t[:1] == char]


def apply_filters(
    tokens: Iterable[str],
    spec: FilterSpec,
    stopwords: frozenset[str] = STOP_WORDS,
) -> list[str]:
    """Run the enabled filters in fixed order and return surviving tokens.

    Order: stopword exclusion, regex match, minimum length, starts-with.
    Stages that are not enabled in spec are skipped.
    """
    result = list(tokens)
    if spec.filter_stopwords:
        result = filter_stopwords(result, stopwords)
    if spec.pattern is not None:
        result = filter_regex(result, spec.pattern)
    if spec.min_length is not None:
        result = filter_min_length(result, spec.min_length)
    if spec.starts_with is not None:
        result = filter_starts_with(result, spec.starts_with)
    return result
