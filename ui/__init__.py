"""
UI Package

Presentation layer for the console report.
Turns Region query results into text; holds no business logic.
"""

from ui.formatters import (
    format_mapping,
    format_names_per_count,
    format_nested_mapping,
    format_optional,
    render_region_report,
)

__all__ = [
    "format_mapping",
    "format_names_per_count",
    "format_nested_mapping",
    "format_optional",
    "render_region_report",
]
