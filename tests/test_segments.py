"""Tests for the RFM segment display catalog."""

from crm_insights.foundation.rfm import UNKNOWN_SEGMENT
from crm_insights.foundation.segments import (
    DEFAULT_SEGMENT_COLOR,
    SEGMENT_STYLES,
    segment_color,
    segment_label,
)


class TestSegmentCatalog:
    """Test segment_label and segment_color lookups."""

    def test_known_segment(self):
        assert segment_label("champions") == "Campeões"
        assert segment_color("champions") == "#10b981"

    def test_unknown_key_falls_back(self):
        """Keys outside the catalog show as-is in neutral grey."""
        assert segment_label("vip_custom") == "vip_custom"
        assert segment_color("vip_custom") == DEFAULT_SEGMENT_COLOR

    def test_unknown_bucket_has_label(self):
        """The bucket for unlabelled leads has its own label."""
        assert segment_label(UNKNOWN_SEGMENT) == "Sem Segmento"

    def test_catalog_covers_standard_segments(self):
        """All eleven standard segments are present."""
        expected = {
            "champions",
            "loyal_customers",
            "potential_loyalist",
            "new_customers",
            "promising",
            "need_attention",
            "about_to_sleep",
            "at_risk",
            "cant_lose",
            "hibernating",
            "lost",
        }
        assert expected <= set(SEGMENT_STYLES)
