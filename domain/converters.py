"""
Type Conversion Utilities for Domain Model Factories

Strict integer conversion for the text fields of the huts data file.
Unlike a lenient "return a default" converter, a malformed value is a
data error and raises ParseError naming the field and the line.

Usage:
    ```python
    from domain.converters import parse_int, parse_optional_int

    beds = parse_int(fields[6], "BedsNumber", line_number=3)
    altitude = parse_optional_int(fields[4], "Altitude", line_number=3)  # None if empty
    ```
"""

from typing import Optional

import pandas as pd

from domain.errors import ParseError


def _describe(field: str, line_number: Optional[int]) -> str:
    if line_number is None:
        return f"field '{field}'"
    return f"field '{field}' at line {line_number}"


def parse_int(value, field: str, line_number: Optional[int] = None) -> int:
    """
    Convert a required value to int, raising ParseError if null or invalid.

    Surrounding whitespace is ignored. Empty strings and pandas NA values
    count as missing.

    Args:
        value: Raw value (usually a str from a split line)
        field: Field name used in the error message
        line_number: Optional 1-based source line number

    Returns:
        Integer value

    Raises:
        ParseError: If the value is missing or not an integer

    Examples:
        >>> parse_int(" 42 ", "BedsNumber")
        42
        >>> parse_int("abc", "BedsNumber")
        Traceback (most recent call last):
        ...
        domain.errors.ParseError: Invalid integer 'abc' for field 'BedsNumber'
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        raise ParseError(
            f"Missing integer for {_describe(field, line_number)}",
            field=field, value="", line_number=line_number,
        )
    text = str(value).strip()
    try:
        # int() also accepts digit grouping ("1_000"), which is not a valid field
        if "_" in text:
            raise ValueError(text)
        return int(text)
    except ValueError:
        raise ParseError(
            f"Invalid integer '{text}' for {_describe(field, line_number)}",
            field=field, value=text, line_number=line_number,
        ) from None


def parse_optional_int(value, field: str, line_number: Optional[int] = None) -> Optional[int]:
    """
    Convert an optional value to int, returning None if empty or null.

    A non-empty value that is not an integer still raises ParseError;
    only absence maps to None. Zero is returned as 0, never as None.
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if not str(value).strip():
        return None
    return parse_int(value, field, line_number)
