"""Markdown table formatters for the RFM segment rollup.

Formats segment summaries as markdown tables for the reports dashboard
export and the command line.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from crm_insights.foundation.rfm import SegmentSummary
from crm_insights.foundation.segments import segment_label


def format_brl(amount: Decimal | float) -> str:
    """Format an amount in Brazilian reais, e.g. ``R$ 1.234,56``.

    Examples
    --------
    >>> format_brl(Decimal("1234.5"))
    'R$ 1.234,50'
    >>> format_brl(0)
    'R$ 0,00'
    """
    us_style = f"{amount:,.2f}"
    # Swap thousands and decimal separators for pt-BR
    return "R$ " + us_style.replace(",", "_").replace(".", ",").replace("_", ".")


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def format_segment_table(summaries: Sequence[SegmentSummary]) -> str:
    """Format RFM segment summaries as a markdown table.

    Parameters
    ----------
    summaries:
        Output of :func:`~crm_insights.foundation.rfm.aggregate_segments`

    Returns
    -------
    str:
        Markdown-formatted table, one row per segment in input order, with a
        totals row. An empty rollup renders a short notice instead.

    Examples
    --------
    >>> from crm_insights.foundation.rfm import SegmentSummary
    >>> summary = SegmentSummary("champions", 2, Decimal("200"), 5.0, 4.5, 5.0)
    >>> print(format_segment_table([summary]))
    """
    if not summaries:
        return "## Matriz RFM\n\n_No scored leads._\n"

    table = """## Matriz RFM

| Segment | Leads | Total Value | Avg R | Avg F | Avg M |
|---------|-------|-------------|-------|-------|-------|
"""
    for s in summaries:
        table += (
            f"| {_escape_cell(segment_label(s.segment))} | {s.count:,} | {format_brl(s.total_value)} "
            f"| {s.avg_recency:.2f} | {s.avg_frequency:.2f} | {s.avg_monetary:.2f} |\n"
        )

    total_count = sum(s.count for s in summaries)
    total_value = sum((s.total_value for s in summaries), Decimal("0"))
    table += f"| **Total** | **{total_count:,}** | **{format_brl(total_value)}** | | | |\n"
    return table
