"""Display catalog for RFM segment labels.

The scoring job emits snake_case segment keys. The dashboard shows them with
Portuguese labels and a fixed colour per segment; unknown keys fall back to
the raw key and a neutral grey.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from crm_insights.foundation.rfm import UNKNOWN_SEGMENT

DEFAULT_SEGMENT_COLOR = "#94a3b8"


@dataclass(frozen=True)
class SegmentStyle:
    """Display label and chart colour for a segment."""

    label: str
    color: str


SEGMENT_STYLES: Mapping[str, SegmentStyle] = {
    "champions": SegmentStyle("Campeões", "#10b981"),
    "loyal_customers": SegmentStyle("Clientes Leais", "#3b82f6"),
    "potential_loyalist": SegmentStyle("Potenciais Leais", "#8b5cf6"),
    "new_customers": SegmentStyle("Novos Clientes", "#06b6d4"),
    "promising": SegmentStyle("Promissores", "#14b8a6"),
    "need_attention": SegmentStyle("Precisam Atenção", "#f59e0b"),
    "about_to_sleep": SegmentStyle("Prestes a Dormir", "#f97316"),
    "at_risk": SegmentStyle("Em Risco", "#ef4444"),
    "cant_lose": SegmentStyle("Não Pode Perder", "#dc2626"),
    "hibernating": SegmentStyle("Hibernando", "#6b7280"),
    "lost": SegmentStyle("Perdidos", "#374151"),
    UNKNOWN_SEGMENT: SegmentStyle("Sem Segmento", DEFAULT_SEGMENT_COLOR),
}


def segment_label(segment: str) -> str:
    """Return the display label for ``segment``, or the key itself."""
    style = SEGMENT_STYLES.get(segment)
    return style.label if style is not None else segment


def segment_color(segment: str) -> str:
    """Return the chart colour for ``segment``."""
    style = SEGMENT_STYLES.get(segment)
    return style.color if style is not None else DEFAULT_SEGMENT_COLOR
