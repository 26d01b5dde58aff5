"""Terminal rendering of an AnalysisReport: summary lines and a bar chart."""

from __future__ import annotations

import math

import click

from ._types import AnalysisReport, RankedEntry

MAX_BAR = 40
LABEL_WIDTH = 20
COUNT_WIDTH = 5
BAR_CHAR = "█"
NO_MATCHES = "No words matched the filter."


def bar_length(count: int, max_count: int, max_bar: int = MAX_BAR) -> int:
    """Scale count against max_count, rounding halves up."""
    if max_count <= 0:
        return 0
    return int(math.floor(count / max_count * max_bar + 0.5))


def render_bar_chart(
    entries: list[RankedEntry], max_bar: int = MAX_BAR
) -> list[str]:
    """One line per entry, bars proportional to the first entry's count."""
    if not entries:
        return []
    max_count = entries[0].count
    lines: list[str] = []
    for entry in entries:
        bar = BAR_CHAR * bar_length(entry.count, max_count, max_bar)
        label = click.style(f"{entry.gram:<{LABEL_WIDTH}}", bold=True)
        lines.append(
            f"{label} {entry.count:>{COUNT_WIDTH}} {click.style(bar, fg='blue')}"
        )
    return lines


def render_report(report: AnalysisReport, max_bar: int = MAX_BAR) -> str:
    """Format the full report as styled text."""
    lines = [
        click.style("Text Analysis Report", fg="cyan", bold=True, underline=True),
        f"{click.style('Total items:', fg='green')} {report.total_items}",
        f"{click.style('Unique items:', fg='green')} {report.unique_items}",
    ]

    top = report.most_frequent
    if top is None:
        lines.append(click.style(NO_MATCHES, fg="red"))
        return "\n".join(lines)

    lines.append(
        f"{click.style('Most frequent:', fg='green')} {top.gram} ({top.count})"
    )
    lines.append("")
    lines.append(
        click.style(f"Top {report.top_n} frequent:", fg="yellow", bold=True)
    )
    lines.extend(render_bar_chart(report.top_entries, max_bar))
    return "\n".join(lines)
