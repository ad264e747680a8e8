"""
Report Formatting Utilities

Helper functions turning query results into plain-text tables for the
console report.

Design Principles:
- Pure functions with no side effects
- Accept the plain dict results returned by Region queries
- Return str so callers decide where output goes
"""

from typing import Mapping, Optional

import pandas as pd


def format_optional(value: Optional[int]) -> str:
    """
    Format a value that may be missing.

    Args:
        value: Integer or None

    Returns:
        The number as text, or "N/A" for None
    """
    if value is None:
        return "N/A"
    return str(value)


def format_mapping(result: Mapping, key_header: str, value_header: str) -> str:
    """
    Format a flat key -> value mapping as a two-column table.

    Args:
        result: Mapping as returned by a Region query
        key_header: Column title for keys
        value_header: Column title for values

    Returns:
        Table text, or "(no data)" for an empty mapping
    """
    if not result:
        return "(no data)"
    df = pd.DataFrame(
        {key_header: list(result.keys()), value_header: [format_optional(v) for v in result.values()]}
    )
    return df.to_string(index=False)


def format_nested_mapping(result: Mapping[str, Mapping[str, int]], outer_header: str,
                          inner_header: str, value_header: str) -> str:
    """Format a two-level mapping as a three-column table."""
    rows = [
        (outer, inner, format_optional(value))
        for outer, inner_map in result.items()
        for inner, value in inner_map.items()
    ]
    if not rows:
        return "(no data)"
    df = pd.DataFrame(rows, columns=[outer_header, inner_header, value_header])
    return df.to_string(index=False)


def format_names_per_count(result: Mapping[int, list[str]], count_header: str = "Huts",
                           names_header: str = "Municipalities") -> str:
    """Format count -> names mappings with the names joined by commas."""
    if not result:
        return "(no data)"
    df = pd.DataFrame(
        {count_header: list(result.keys()), names_header: [", ".join(names) for names in result.values()]}
    )
    return df.to_string(index=False)


def render_region_report(region) -> str:
    """
    Render all aggregation queries of a region as one text report.

    Args:
        region: A facades.Region instance

    Returns:
        Multi-section report text
    """
    sections = [
        ("Municipalities per province",
         format_mapping(region.count_municipalities_per_province(), "Province", "Municipalities")),
        ("Mountain huts per municipality per province",
         format_nested_mapping(region.count_mountain_huts_per_municipality_per_province(),
                               "Province", "Municipality", "Huts")),
        ("Mountain huts per altitude range",
         format_mapping(region.count_mountain_huts_per_altitude_range(), "Range", "Huts")),
        ("Total beds per province",
         format_mapping(region.total_beds_number_per_province(), "Province", "Beds")),
        ("Maximum beds per altitude range",
         format_mapping(region.maximum_beds_number_per_altitude_range(), "Range", "Max beds")),
        ("Municipalities per number of mountain huts",
         format_names_per_count(region.municipality_names_per_count_of_mountain_huts())),
    ]
    header = f"Region: {region.name}"
    parts = [header, "=" * len(header)]
    for title, body in sections:
        parts.extend(["", title, "-" * len(title), body])
    return "\n".join(parts)
