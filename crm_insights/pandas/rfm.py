"""Pandas DataFrame adapters for RFM segment rollups."""

from typing import List, Sequence

import pandas as pd  # type: ignore

from crm_insights.foundation.rfm import (
    ScoreRecord,
    SegmentSummary,
    aggregate_segments,
    score_record_from_row,
)
from crm_insights.foundation.segments import segment_label
from ._utils import decimal_to_float, nan_to_none

SUMMARY_COLUMNS = [
    "segment",
    "label",
    "count",
    "total_value",
    "avg_recency",
    "avg_frequency",
    "avg_monetary",
]


def dataframe_to_score_records(
    scores_df: pd.DataFrame,
    segment_col: str = "rfm_segment",
    recency_col: str = "recency_score",
    frequency_col: str = "frequency_score",
    monetary_col: str = "monetary_score",
    total_value_col: str = "total_value",
) -> List[ScoreRecord]:
    """Convert a DataFrame of lead RFM scores to ScoreRecord objects.

    Args:
        scores_df: DataFrame exported from the ``lead_rfm_scores`` table
        *_col: Column name mappings for flexibility

    Returns:
        List of ScoreRecord objects in row order. Null cells are treated as
        missing: numeric fields become zero and blank segments become
        ``"unknown"``.

    Raises:
        ValueError: If DataFrame is missing required columns

    Example:
        >>> scores_df = pd.read_csv('lead_rfm_scores.csv')
        >>> records = dataframe_to_score_records(scores_df)
        >>> summaries = aggregate_segments(records)
    """
    required_cols = [
        segment_col,
        recency_col,
        frequency_col,
        monetary_col,
        total_value_col,
    ]

    missing_cols = set(required_cols) - set(scores_df.columns)
    if missing_cols:
        raise ValueError(f"DataFrame missing required columns: {missing_cols}")

    if scores_df.empty:
        return []

    records = []
    for row in scores_df[required_cols].to_dict("records"):
        records.append(
            score_record_from_row(
                {column: nan_to_none(value) for column, value in row.items()},
                segment_field=segment_col,
                recency_field=recency_col,
                frequency_field=frequency_col,
                monetary_field=monetary_col,
                total_value_field=total_value_col,
            )
        )

    return records


def segment_summaries_to_dataframe(
    summaries: Sequence[SegmentSummary],
) -> pd.DataFrame:
    """Convert segment summaries to a pandas DataFrame.

    Args:
        summaries: Sequence of SegmentSummary objects

    Returns:
        DataFrame with columns: segment, label, count, total_value,
        avg_recency, avg_frequency, avg_monetary. Row order follows the
        input order.
    """
    if not summaries:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    rows = [
        {
            "segment": s.segment,
            "label": segment_label(s.segment),
            "count": s.count,
            "total_value": decimal_to_float(s.total_value),
            "avg_recency": s.avg_recency,
            "avg_frequency": s.avg_frequency,
            "avg_monetary": s.avg_monetary,
        }
        for s in summaries
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def aggregate_segments_df(
    scores_df: pd.DataFrame,
    segment_col: str = "rfm_segment",
    recency_col: str = "recency_score",
    frequency_col: str = "frequency_score",
    monetary_col: str = "monetary_score",
    total_value_col: str = "total_value",
) -> pd.DataFrame:
    """Aggregate a DataFrame of lead RFM scores into per-segment rows.

    Convenience function that combines conversion and aggregation.

    Example:
        >>> summary_df = aggregate_segments_df(scores_df)
        >>> summary_df.sort_values("total_value", ascending=False).head(4)
    """
    records = dataframe_to_score_records(
        scores_df,
        segment_col=segment_col,
        recency_col=recency_col,
        frequency_col=frequency_col,
        monetary_col=monetary_col,
        total_value_col=total_value_col,
    )
    return segment_summaries_to_dataframe(aggregate_segments(records))
