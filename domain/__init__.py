"""
Domain Models Package

This package contains the core domain models for a mountain huts region.
These dataclasses provide typed, immutable structures for the entities
loaded from the huts data file.

Key Components:
- Models: Municipality, MountainHut, HutRecord
- Ranges: AltitudeRange, DEFAULT_RANGE_LABEL
- Errors: ParseError
"""

from domain.altitude_range import AltitudeRange, DEFAULT_RANGE_LABEL, find_range_label
from domain.errors import ParseError
from domain.models import (
    FIELD_COUNT,
    FIELD_NAMES,
    HutRecord,
    MountainHut,
    Municipality,
)

__all__ = [
    # Ranges
    "AltitudeRange",
    "DEFAULT_RANGE_LABEL",
    "find_range_label",
    # Errors
    "ParseError",
    # Models
    "FIELD_COUNT",
    "FIELD_NAMES",
    "HutRecord",
    "MountainHut",
    "Municipality",
]
