"""
Domain Models

Dataclasses representing the entities of a mountain huts region.

Design Principles:
1. Immutability (frozen=True) - Entities never change after creation
2. Identity by name - The Region registry deduplicates on name only
3. Explicit absence - A hut altitude of None means "unknown", 0 is a real altitude
4. Factory methods - Clean construction from split data rows
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from domain.converters import parse_int, parse_optional_int
from domain.errors import ParseError


# Positional layout of a data row
FIELD_NAMES = (
    "Province",
    "Municipality",
    "MunicipalityAltitude",
    "Name",
    "Altitude",
    "Category",
    "BedsNumber",
)
FIELD_COUNT = len(FIELD_NAMES)


# =============================================================================
# Municipality - Hosts one or more mountain huts
# =============================================================================

@dataclass(frozen=True)
class Municipality:
    """
    A municipality that hosts mountain huts.

    Attributes:
        name: Municipality name (identity key within a region)
        province: Province the municipality belongs to
        altitude: Altitude of the municipality in meters
    """
    name: str
    province: str
    altitude: int


# =============================================================================
# MountainHut - A hut located in a municipality
# =============================================================================

@dataclass(frozen=True)
class MountainHut:
    """
    A mountain hut with an optional altitude.

    The municipality is a plain reference to the entity kept in the Region
    registry; the hut never owns it.

    Attributes:
        name: Hut name (identity key within a region)
        category: Hut category (e.g. "Rifugio alpino")
        beds_number: Number of beds available
        municipality: Municipality where the hut is located
        altitude: Hut altitude in meters, None when not available
    """
    name: str
    category: str
    beds_number: int
    municipality: Municipality
    altitude: Optional[int] = None

    @property
    def effective_altitude(self) -> int:
        """Hut altitude if known, otherwise the altitude of its municipality."""
        if self.altitude is None:
            return self.municipality.altitude
        return self.altitude

    @property
    def province(self) -> str:
        """Province of the hut's municipality."""
        return self.municipality.province


# =============================================================================
# HutRecord - One parsed row of the huts data file
# =============================================================================

@dataclass(frozen=True)
class HutRecord:
    """
    A row of the huts data file with its numeric fields converted.

    Attributes:
        province: Field 0
        municipality_name: Field 1
        municipality_altitude: Field 2
        hut_name: Field 3
        hut_altitude: Field 4, None when the field is empty
        category: Field 5
        beds_number: Field 6
    """
    province: str
    municipality_name: str
    municipality_altitude: int
    hut_name: str
    hut_altitude: Optional[int]
    category: str
    beds_number: int

    @classmethod
    def from_fields(cls, fields: Sequence[str], line_number: Optional[int] = None) -> "HutRecord":
        """
        Factory method to create a HutRecord from the split fields of a line.

        Args:
            fields: The ';'-separated fields of one data line
            line_number: Optional 1-based line number used in error messages

        Returns:
            A new HutRecord instance

        Raises:
            ParseError: If the row is too short or a numeric field is invalid
        """
        if len(fields) < FIELD_COUNT:
            where = f" at line {line_number}" if line_number is not None else ""
            raise ParseError(
                f"Expected {FIELD_COUNT} fields{where}, got {len(fields)}",
                field="row", value=";".join(fields), line_number=line_number,
            )
        return cls(
            province=fields[0],
            municipality_name=fields[1],
            municipality_altitude=parse_int(fields[2], "MunicipalityAltitude", line_number),
            hut_name=fields[3],
            hut_altitude=parse_optional_int(fields[4], "Altitude", line_number),
            category=fields[5],
            beds_number=parse_int(fields[6], "BedsNumber", line_number),
        )
