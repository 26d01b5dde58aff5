"""Data structures for wordtally."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class FilterSpec:
    pattern: re.Pattern[str] | None = None
    min_length: int | None = None   # keep tokens strictly longer than this
    starts_with: str | None = None  # single character, compared as-is
    filter_stopwords: bool = False

    @property
    def is_empty(self) -> bool:
        """True when no filter stage is enabled."""
        return (
            self.pattern is None
            and self.min_length is None
            and self.starts_with is None
            and not self.filter_stopwords
        )


@dataclass(slots=True, frozen=True)
class RankedEntry:
    gram: str
    count: int

    def __iter__(self) -> Iterator[str | int]:
        yield self.gram
        yield self.count


@dataclass(slots=True, frozen=True)
class AnalysisReport:
    total_items: int      # length of the gram sequence
    unique_items: int     # number of distinct grams
    ranked: list[RankedEntry] = field(default_factory=list)
    top_n: int = 10

    @property
    def is_empty(self) -> bool:
        return not self.ranked

    @property
    def most_frequent(self) -> RankedEntry | None:
        return self.ranked[0] if self.ranked else None

    @property
    def top_entries(self) -> list[RankedEntry]:
        return self.ranked[:self.top_n]
