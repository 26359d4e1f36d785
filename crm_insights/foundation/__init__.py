"""Foundational business rules for the CRM.

This package exposes CNPJ and phone number validation for company
registration, and RFM (Recency-Frequency-Monetary) segment rollups for
the reports dashboard.
"""

from .cnpj import compute_check_digit, format_cnpj, is_valid_cnpj, strip_non_digits
from .phone import format_phone, is_valid_phone
from .rfm import (
    UNKNOWN_SEGMENT,
    ScoreRecord,
    SegmentSummary,
    aggregate_segments,
    score_record_from_row,
)
from .segments import (
    DEFAULT_SEGMENT_COLOR,
    SEGMENT_STYLES,
    SegmentStyle,
    segment_color,
    segment_label,
)

__all__ = [
    "compute_check_digit",
    "format_cnpj",
    "is_valid_cnpj",
    "strip_non_digits",
    "format_phone",
    "is_valid_phone",
    "UNKNOWN_SEGMENT",
    "ScoreRecord",
    "SegmentSummary",
    "aggregate_segments",
    "score_record_from_row",
    "DEFAULT_SEGMENT_COLOR",
    "SEGMENT_STYLES",
    "SegmentStyle",
    "segment_color",
    "segment_label",
]
