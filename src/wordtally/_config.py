"""Run configuration with lenient parsing of raw option values."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ._types import FilterSpec

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10
DEFAULT_NGRAMS = 1

# ASCII digits only, optional leading plus
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def _parse_int(
    raw: str | int | None, default: int | None, name: str, minimum: int = 0
) -> int | None:
    if raw is None:
        return default
    if isinstance(raw, int):
        value = raw
    elif _UNSIGNED_RE.fullmatch(raw):
        value = int(raw)
    else:
        logger.debug("Ignoring non-numeric %s=%r, using %r", name, raw, default)
        return default
    if value < minimum:
        logger.debug("Ignoring out-of-range %s=%r, using %r", name, raw, default)
        return default
    return value


def _compile_pattern(raw: str | None) -> re.Pattern[str] | None:
    if raw is None:
        return None
    try:
        return re.compile(raw)
    except re.error as exc:
        logger.debug("Invalid regex %r (%s); regex filter disabled", raw, exc)
        return None


def _parse_char(raw: str | None) -> str | None:
    if raw is None:
        return None
    if len(raw) != 1:
        logger.debug(
            "starts-with expects a single character, got %r; filter disabled",
            raw,
        )
        return None
    return raw


@dataclass(slots=True, frozen=True)
class AnalysisConfig:
    top_n: int = DEFAULT_TOP_N
    ngrams: int = DEFAULT_NGRAMS
    pattern: re.Pattern[str] | None = None
    min_length: int | None = None
    starts_with: str | None = None
    filter_stopwords: bool = False

    @classmethod
    def from_options(
        cls,
        top: str | int | None = None,
        match_regex: str | None = None,
        ngrams: str | int | None = None,
        filter_stopwords: bool = False,
        min_length: str | int | None = None,
        starts_with: str | None = None,
    ) -> AnalysisConfig:
        """Build a config from raw option values.

        Malformed numbers fall back to their defaults, an invalid regex or
        a starts-with value that is not exactly one character disables that
        filter. Nothing here raises.
        """
        return cls(
            top_n=_parse_int(top, DEFAULT_TOP_N, "top"),
            ngrams=_parse_int(ngrams, DEFAULT_NGRAMS, "ngrams", minimum=1),
            pattern=_compile_pattern(match_regex),
            min_length=_parse_int(min_length, None, "min-length"),
            starts_with=_parse_char(starts_with),
            filter_stopwords=bool(filter_stopwords),
        )

    @property
    def filter_spec(self) -> FilterSpec:
        return FilterSpec(
            pattern=self.pattern,
            min_length=self.min_length,
            starts_with=self.starts_with,
            filter_stopwords=self.filter_stopwords,
        )
