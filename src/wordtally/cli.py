"""Command-line driver: wordtally FILE [options]."""

from __future__ import annotations

import logging
import sys

import click

from ._config import AnalysisConfig
from ._errors import WordtallyError
from ._pipeline import analyze_file
from ._report import render_report

logger = logging.getLogger(__name__)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "auto_envvar_prefix": "WORDTALLY",
    }
)
@click.argument("file", type=click.Path())
@click.option("--top", default=None, help="Number of entries to chart (default 10)")
@click.option("--match-regex", default=None, help="Keep only tokens matching PATTERN")
@click.option("--ngrams", default=None, help="N-gram width (default 1)")
@click.option("--filter-stopwords", is_flag=True, default=False, help="Exclude common English stop words")
@click.option("--min-length", default=None, help="Keep only tokens longer than N characters")
@click.option("--starts-with", default=None, help="Keep only tokens starting with this character")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging on stderr")
@click.pass_context
def main(ctx, file, top, match_regex, ngrams, filter_stopwords, min_length,
         starts_with, verbose):
    """Rank the most frequent words or n-grams in FILE as a bar chart."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if ctx.args:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(ctx.args))

    config = AnalysisConfig.from_options(
        top=top,
        match_regex=match_regex,
        ngrams=ngrams,
        filter_stopwords=filter_stopwords,
        min_length=min_length,
        starts_with=starts_with,
    )

    try:
        report = analyze_file(file, config)
    except WordtallyError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)

    click.echo(render_report(report))


if __name__ == "__main__":
    main()
