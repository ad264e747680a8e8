"""
Region Facade

Class Region is the main entry point of the mountain huts system. It owns
the registry of municipalities and huts, the configured altitude ranges,
and exposes the aggregation queries.

This facade orchestrates:
- HutsFileRepository (reading and parsing data files)
- RegionStatsService (grouped statistics)

Example Usage:
```python
from facades import Region

region = Region.from_file("Piemonte", "data/mountain_huts.csv")
region.set_altitude_ranges("0-1000", "1000-2000", "2000-3000")

region.count_mountain_huts_per_altitude_range()
# {"1000-2000": 4, "2000-3000": 5}
region.municipality_names_per_count_of_mountain_huts()
# {1: ["Formazza", "Macugnaga", "Usseaux"], 2: ["Acceglio", "Ceresole Reale", "Valdieri"]}
```

The registry is not thread safe: create-or-get calls must come from a
single writer. Queries share a huts DataFrame that is built by the first
query after a change to the huts or the ranges, so queries may run
concurrently with each other only once that first query has returned.
"""

from pathlib import Path
from typing import Iterable, Optional
import logging

import pandas as pd

from domain import (
    AltitudeRange,
    HutRecord,
    MountainHut,
    Municipality,
    find_range_label,
)
from logging_config import setup_logging
from repositories import HutsFileRepository, get_huts_file_repository
from services import RegionStatsService, get_region_stats_service

module_logger = setup_logging(__name__)


class Region:
    """
    A geographic region with its municipalities and mountain huts.

    ## Registry
    - create_or_get_municipality(name, province, altitude)
    - create_or_get_mountain_hut(name, category, beds_number, municipality, altitude=None)
    - get_municipalities() / get_mountain_huts() - sorted by name, read-only

    ## Altitude Ranges
    - set_altitude_ranges(*ranges) - replace the "min-max" ranges
    - get_altitude_range(altitude) - label of the first matching range or "0-INF"

    ## Loading
    - Region.from_file(name, path)
    - Region.from_lines(name, lines)

    ## Queries
    - count_municipalities_per_province()
    - count_mountain_huts_per_municipality_per_province()
    - count_mountain_huts_per_altitude_range()
    - total_beds_number_per_province()
    - maximum_beds_number_per_altitude_range()
    - municipality_names_per_count_of_mountain_huts()
    """

    def __init__(
        self,
        name: str,
        stats_service: Optional[RegionStatsService] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Create an empty region.

        Args:
            name: The name of the region
            stats_service: Optional RegionStatsService (created if None)
            logger: Optional logger instance
        """
        self._name = name
        self._municipalities: dict[str, Municipality] = {}
        self._mountain_huts: dict[str, MountainHut] = {}
        self._altitude_ranges: tuple[AltitudeRange, ...] = ()
        self._stats = stats_service or get_region_stats_service()
        self._logger = logger or module_logger
        self._huts_df: Optional[pd.DataFrame] = None

    def __repr__(self) -> str:
        return (
            f"Region(name={self._name!r}, municipalities={len(self._municipalities)}, "
            f"mountain_huts={len(self._mountain_huts)})"
        )

    @property
    def name(self) -> str:
        """The name of the region."""
        return self._name

    # =========================================================================
    # Altitude Ranges
    # =========================================================================

    def set_altitude_ranges(self, *ranges: Optional[str]) -> None:
        """
        Replace the altitude ranges with the given "[minValue]-[maxValue]" specs.

        Order matters: get_altitude_range() returns the first match. All
        specs are parsed before the current ranges are dropped, so a
        ParseError leaves the previous configuration in place.

        Raises:
            ParseError: If a spec is malformed
        """
        parsed = tuple(AltitudeRange.parse(spec) for spec in ranges if spec is not None)
        self._altitude_ranges = parsed
        self._huts_df = None
        self._logger.info(
            f"Region {self._name}: altitude ranges set to {[r.label for r in parsed]}"
        )

    def get_altitude_ranges(self) -> tuple[AltitudeRange, ...]:
        """The configured altitude ranges, in match order."""
        return self._altitude_ranges

    def get_altitude_range(self, altitude: Optional[int]) -> str:
        """
        Return the label of the range including altitude, or "0-INF".

        None (unknown altitude) always maps to "0-INF".
        """
        return find_range_label(self._altitude_ranges, altitude)

    # =========================================================================
    # Registry
    # =========================================================================

    def get_municipalities(self) -> tuple[Municipality, ...]:
        """All municipalities, sorted by name."""
        return tuple(self._municipalities[name] for name in sorted(self._municipalities))

    def get_mountain_huts(self) -> tuple[MountainHut, ...]:
        """All mountain huts, sorted by name."""
        return tuple(self._mountain_huts[name] for name in sorted(self._mountain_huts))

    def create_or_get_municipality(self, name: str, province: str, altitude: int) -> Municipality:
        """
        Create a new municipality or return the one already registered.

        Duplicates are detected by name only: for a known name the given
        province and altitude are ignored.
        """
        municipality = self._municipalities.get(name)
        if municipality is None:
            municipality = Municipality(name=name, province=province, altitude=altitude)
            self._municipalities[name] = municipality
            self._logger.debug(f"Created municipality {name} ({province}, {altitude} m)")
        return municipality

    def create_or_get_mountain_hut(
        self,
        name: str,
        category: str,
        beds_number: int,
        municipality: Municipality,
        altitude: Optional[int] = None,
    ) -> MountainHut:
        """
        Create a new mountain hut or return the one already registered.

        Duplicates are detected by name only. The altitude may be omitted
        when unknown; queries then use the municipality altitude.

        A municipality that is not yet registered under its name is
        registered first, so every hut points into the registry.
        """
        hut = self._mountain_huts.get(name)
        if hut is not None:
            return hut
        municipality = self._municipalities.setdefault(municipality.name, municipality)
        hut = MountainHut(
            name=name,
            category=category,
            beds_number=beds_number,
            municipality=municipality,
            altitude=altitude,
        )
        self._mountain_huts[name] = hut
        self._huts_df = None
        self._logger.debug(f"Created mountain hut {name} in {municipality.name}")
        return hut

    def add_record(self, record: HutRecord) -> MountainHut:
        """Register the municipality and the hut described by a data row."""
        municipality = self.create_or_get_municipality(
            record.municipality_name, record.province, record.municipality_altitude
        )
        return self.create_or_get_mountain_hut(
            record.hut_name,
            record.category,
            record.beds_number,
            municipality,
            altitude=record.hut_altitude,
        )

    # =========================================================================
    # Loading
    # =========================================================================

    @classmethod
    def from_lines(
        cls,
        name: str,
        lines: Iterable[str],
        repository: Optional[HutsFileRepository] = None,
    ) -> "Region":
        """
        Create a region from the lines of a huts data file.

        The first line is a header and is skipped.

        Raises:
            ParseError: If a data line is malformed
        """
        if name is None:
            raise TypeError("Region name must not be None")
        repository = repository or get_huts_file_repository()
        region = cls(name)
        rows = 0
        for record in repository.parse_records(lines):
            region.add_record(record)
            rows += 1
        region._logger.info(
            f"Region {name}: loaded {rows} rows, {len(region._municipalities)} municipalities, "
            f"{len(region._mountain_huts)} mountain huts"
        )
        return region

    @classmethod
    def from_file(
        cls,
        name: str,
        path: str | Path,
        repository: Optional[HutsFileRepository] = None,
    ) -> "Region":
        """
        Create a region from a ';'-separated huts data file.

        The file has a header line followed by rows with the fields
        Province, Municipality, MunicipalityAltitude, Name, Altitude,
        Category, BedsNumber. Altitude may be empty.

        An unreadable file is logged and yields an empty region.

        Raises:
            ParseError: If a data line is malformed
        """
        if name is None or path is None:
            raise TypeError("Region name and file path must not be None")
        repository = repository or get_huts_file_repository()
        return cls.from_lines(name, repository.read_data(path), repository)

    # =========================================================================
    # Queries
    # =========================================================================

    def _frame(self) -> pd.DataFrame:
        """Huts DataFrame, rebuilt on first use after a hut or range change."""
        if self._huts_df is None:
            self._huts_df = self._stats.huts_frame(self.get_mountain_huts(), self.get_altitude_range)
        return self._huts_df

    def count_municipalities_per_province(self) -> dict[str, int]:
        """
        Count the municipalities with at least one mountain hut per province.

        Returns:
            Province -> number of municipalities
        """
        return self._stats.count_municipalities_per_province(self._frame())

    def count_mountain_huts_per_municipality_per_province(self) -> dict[str, dict[str, int]]:
        """
        Count the mountain huts per municipality within each province.

        Returns:
            Province -> (municipality -> number of huts)
        """
        return self._stats.count_mountain_huts_per_municipality_per_province(self._frame())

    def count_mountain_huts_per_altitude_range(self) -> dict[str, int]:
        """
        Count the mountain huts per altitude range. A hut without altitude
        is classified by the altitude of its municipality.

        Returns:
            Range label -> number of huts
        """
        return self._stats.count_mountain_huts_per_altitude_range(self._frame())

    def total_beds_number_per_province(self) -> dict[str, int]:
        """
        Total number of beds of the mountain huts per province.

        Returns:
            Province -> total beds
        """
        return self._stats.total_beds_number_per_province(self._frame())

    def maximum_beds_number_per_altitude_range(self) -> dict[str, Optional[int]]:
        """
        Maximum number of beds of a single mountain hut per altitude range.
        A hut without altitude is classified by the altitude of its
        municipality.

        Returns:
            Range label -> maximum beds, None for a range without beds data
        """
        return self._stats.maximum_beds_number_per_altitude_range(self._frame())

    def municipality_names_per_count_of_mountain_huts(self) -> dict[int, list[str]]:
        """
        Municipality names per number of mountain huts in the municipality.

        Returns:
            Number of huts -> alphabetically sorted municipality names
        """
        return self._stats.municipality_names_per_count_of_mountain_huts(self._frame())


def get_region(settings_path: str | Path = "settings.toml") -> Region:
    """
    Factory loading the region configured in settings.toml.

    Uses [region] name, data_file and altitude_ranges. Without a data_file
    the region is empty.
    """
    from settings_service import SettingsService

    settings = SettingsService(settings_path)
    data_file = settings.data_file
    if data_file:
        region = Region.from_file(settings.region_name, data_file)
    else:
        region = Region(settings.region_name)
    region.set_altitude_ranges(*settings.altitude_ranges)
    return region
