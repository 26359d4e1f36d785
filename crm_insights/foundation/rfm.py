"""RFM (Recency-Frequency-Monetary) segment rollups.

Each lead is scored by the backend on three 1-5 ordinal scales and assigned
a named segment (e.g. ``champions``, ``at_risk``). This module folds those
per-lead score records into one summary per segment for the reports
dashboard: how many leads fall in each segment, how much value they carry,
and their average component scores.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)

#: Segment assigned to rows whose segment label is missing or blank.
UNKNOWN_SEGMENT = "unknown"


@dataclass(frozen=True)
class ScoreRecord:
    """RFM scores for a single lead.

    Attributes
    ----------
    segment:
        Segment label assigned by the scoring job. Must be non-empty.
    recency_score:
        Recency score (conventionally 1-5, not enforced)
    frequency_score:
        Frequency score (conventionally 1-5, not enforced)
    monetary_score:
        Monetary score (conventionally 1-5, not enforced)
    total_value:
        Total value attributed to the lead. ``None`` is stored as zero.
    """

    segment: str
    recency_score: float
    frequency_score: float
    monetary_score: float
    total_value: Optional[Decimal] = Decimal("0")

    def __post_init__(self) -> None:
        """Validate the segment label and normalise total_value."""
        if not isinstance(self.segment, str) or not self.segment:
            raise ValueError(f"Segment must be a non-empty string: {self.segment!r}")

        total_value = self.total_value
        if total_value is None:
            total_value = Decimal("0")
        elif not isinstance(total_value, Decimal):
            try:
                total_value = Decimal(str(total_value))
            except InvalidOperation as exc:
                raise ValueError(
                    f"Total value is not a number: {self.total_value!r} (segment={self.segment})"
                ) from exc
        if not total_value.is_finite():
            raise ValueError(
                f"Total value must be finite: {total_value} (segment={self.segment})"
            )
        if total_value < 0:
            raise ValueError(
                f"Total value cannot be negative: {total_value} (segment={self.segment})"
            )
        object.__setattr__(self, "total_value", total_value)


@dataclass(frozen=True)
class SegmentSummary:
    """Aggregated RFM figures for one segment.

    Attributes
    ----------
    segment:
        Segment label
    count:
        Number of score records folded into this summary (always >= 1)
    total_value:
        Sum of total_value over the folded records
    avg_recency:
        Mean recency score
    avg_frequency:
        Mean frequency score
    avg_monetary:
        Mean monetary score
    """

    segment: str
    count: int
    total_value: Decimal
    avg_recency: float
    avg_frequency: float
    avg_monetary: float

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(
                f"Segment count must be positive: {self.count} (segment={self.segment})"
            )

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable dictionary."""
        return {
            "segment": self.segment,
            "count": self.count,
            "total_value": float(self.total_value),
            "avg_recency": self.avg_recency,
            "avg_frequency": self.avg_frequency,
            "avg_monetary": self.avg_monetary,
        }


@dataclass
class _SegmentAccumulator:
    count: int = 0
    total_value: Decimal = Decimal("0")
    recency_sum: float = 0.0
    frequency_sum: float = 0.0
    monetary_sum: float = 0.0


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _score_or_zero(value: Any) -> float:
    return 0.0 if _is_missing(value) else float(value)


def score_record_from_row(
    row: Mapping[str, Any],
    *,
    segment_field: str = "rfm_segment",
    recency_field: str = "recency_score",
    frequency_field: str = "frequency_score",
    monetary_field: str = "monetary_score",
    total_value_field: str = "total_value",
) -> ScoreRecord:
    """Build a :class:`ScoreRecord` from a raw ``lead_rfm_scores`` row.

    Rows come straight from the backend and may carry nulls. Missing or null
    numeric fields become zero, and a missing or blank segment label is
    mapped to :data:`UNKNOWN_SEGMENT` so those leads still show up in the
    rollup under an explicit bucket.

    Parameters
    ----------
    row:
        Mapping of column name to value.
    *_field:
        Column names to read, defaulting to the backend schema.

    Examples
    --------
    >>> record = score_record_from_row(
    ...     {"rfm_segment": "champions", "recency_score": 5,
    ...      "frequency_score": 4, "monetary_score": 5, "total_value": None}
    ... )
    >>> record.total_value
    Decimal('0')
    >>> score_record_from_row({"rfm_segment": "  "}).segment
    'unknown'
    """
    segment = row.get(segment_field)
    if _is_missing(segment) or not str(segment).strip():
        segment = UNKNOWN_SEGMENT

    total_value = row.get(total_value_field)
    if _is_missing(total_value):
        total_value = Decimal("0")

    return ScoreRecord(
        segment=str(segment),
        recency_score=_score_or_zero(row.get(recency_field)),
        frequency_score=_score_or_zero(row.get(frequency_field)),
        monetary_score=_score_or_zero(row.get(monetary_field)),
        total_value=total_value,
    )


def aggregate_segments(records: Iterable[ScoreRecord]) -> list[SegmentSummary]:
    """Roll up score records into one summary per segment.

    Raw sums are accumulated in a single pass and divided by each segment's
    final count afterwards, so the averages are exact arithmetic means that
    do not depend on record order.

    Parameters
    ----------
    records:
        Score records to fold. Not mutated.

    Returns
    -------
    list[SegmentSummary]
        One summary per distinct segment label, in the order each label was
        first seen. Empty input gives an empty list.

    Raises
    ------
    TypeError
        If ``records`` is None.

    Examples
    --------
    >>> summaries = aggregate_segments([
    ...     ScoreRecord("A", 2, 2, 2, Decimal("50")),
    ...     ScoreRecord("A", 4, 4, 4, Decimal("150")),
    ... ])
    >>> summaries[0].count, summaries[0].total_value, summaries[0].avg_recency
    (2, Decimal('200'), 3.0)
    """
    if records is None:
        raise TypeError("records must be an iterable of ScoreRecord, got None")

    buckets: dict[str, _SegmentAccumulator] = {}
    for record in records:
        bucket = buckets.get(record.segment)
        if bucket is None:
            bucket = buckets[record.segment] = _SegmentAccumulator()

        bucket.count += 1
        bucket.total_value += record.total_value
        bucket.recency_sum += record.recency_score
        bucket.frequency_sum += record.frequency_score
        bucket.monetary_sum += record.monetary_score

    summaries = [
        SegmentSummary(
            segment=segment,
            count=bucket.count,
            total_value=bucket.total_value,
            avg_recency=bucket.recency_sum / bucket.count,
            avg_frequency=bucket.frequency_sum / bucket.count,
            avg_monetary=bucket.monetary_sum / bucket.count,
        )
        for segment, bucket in buckets.items()
    ]

    logger.debug(
        "Aggregated %d score records into %d segments",
        sum(summary.count for summary in summaries),
        len(summaries),
    )
    return summaries
