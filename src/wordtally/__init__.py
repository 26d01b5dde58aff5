"""Wordtally: ranked word and n-gram frequency analysis for text documents."""

from __future__ import annotations

from ._config import AnalysisConfig
from ._counter import count_frequencies, count_frequencies_chunked, merge_counts, rank
from ._errors import WordtallyError, WordtallyReadError
from ._filters import (
    apply_filters,
    filter_min_length,
    filter_regex,
    filter_starts_with,
    filter_stopwords,
)
from ._loader import read_text
from ._ngrams import generate_ngrams
from ._pipeline import analyze, analyze_file
from ._report import render_bar_chart, render_report
from ._stop_words import STOP_WORDS
from ._tokenizer import tokenize
from ._types import AnalysisReport, FilterSpec, RankedEntry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "analyze",
    "analyze_file",
    "apply_filters",
    "count_frequencies",
    "count_frequencies_chunked",
    "filter_min_length",
    "filter_regex",
    "filter_starts_with",
    "filter_stopwords",
    "generate_ngrams",
    "merge_counts",
    "rank",
    "read_text",
    "render_bar_chart",
    "render_report",
    "tokenize",
    "AnalysisConfig",
    "AnalysisReport",
    "FilterSpec",
    "RankedEntry",
    "STOP_WORDS",
    "WordtallyError",
    "WordtallyReadError",
]
