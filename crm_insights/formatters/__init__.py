"""Report formatters for CRM insight results."""

from .markdown_tables import format_brl, format_segment_table

__all__ = [
    "format_brl",
    "format_segment_table",
]
