"""End-to-end analysis: tokenize, filter, n-gram, count, rank."""

from __future__ import annotations

import logging
from pathlib import Path

from ._config import AnalysisConfig
from ._counter import count_frequencies, rank
from ._filters import apply_filters
from ._loader import read_text
from ._ngrams import generate_ngrams
from ._stop_words import STOP_WORDS
from ._tokenizer import tokenize
from ._types import AnalysisReport

logger = logging.getLogger(__name__)


def analyze(
    text: str,
    config: AnalysisConfig | None = None,
    stopwords: frozenset[str] = STOP_WORDS,
) -> AnalysisReport:
    """Run the full pipeline over text and return the ranked report.

    Each stage consumes the complete output of the previous one. An input
    whose tokens are all filtered out produces an empty report, not an
    error.
    """
    if config is None:
        config = AnalysisConfig()

    tokens = tokenize(text)
    filtered = apply_filters(tokens, config.filter_spec, stopwords)
    grams = generate_ngrams(filtered, config.ngrams)
    table = count_frequencies(grams)
    ranked = rank(table)
    logger.debug(
        "tokens=%d filtered=%d grams=%d unique=%d",
        len(tokens), len(filtered), len(grams), len(table),
    )

    return AnalysisReport(
        total_items=len(grams),
        unique_items=len(table),
        ranked=ranked,
        top_n=config.top_n,
    )


def analyze_file(
    path: Path | str,
    config: AnalysisConfig | None = None,
    encoding: str = "utf-8",
) -> AnalysisReport:
    """Read a document and analyze it.

    Raises WordtallyReadError before any processing if the file cannot be
    read.
    """
    return analyze(read_text(path, encoding=encoding), config)
