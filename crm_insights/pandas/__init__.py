"""Pandas DataFrame adapters for CRM insight components."""

from .rfm import (
    dataframe_to_score_records,
    segment_summaries_to_dataframe,
    aggregate_segments_df,
)

__all__ = [
    "dataframe_to_score_records",
    "segment_summaries_to_dataframe",
    "aggregate_segments_df",
]
