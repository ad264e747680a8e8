"""
Region Stats Service

Aggregation queries over the mountain huts of a region.

The huts are flattened into a DataFrame (one row per hut) and every query
is a pandas groupby over that frame. Results are converted back to plain
dicts with Python scalars, keys in ascending order (groupby sorts keys).

Design Principles:
1. Stateless - The service holds no region data; callers pass the frame
2. Range resolution injected - The altitude-range label of each hut is
   computed by the caller's resolver when the frame is built
3. Clean separation - No file access, no registry logic
"""

from typing import Callable, Iterable, Optional

import pandas as pd

from domain import MountainHut, find_range_label

HUTS_FRAME_COLUMNS = ["hut", "municipality", "province", "beds_number", "altitude_range"]

RangeResolver = Callable[[Optional[int]], str]


class RegionStatsService:
    """
    Service computing the grouped statistics of a region.

    Example:
        service = RegionStatsService()
        df = service.huts_frame(region.get_mountain_huts(), region.get_altitude_range)
        service.total_beds_number_per_province(df)  # {"CN": 139, "TO": 63, "VB": 92}
    """

    @staticmethod
    def huts_frame(huts: Iterable[MountainHut], range_resolver: Optional[RangeResolver] = None) -> pd.DataFrame:
        """
        Flatten huts into a DataFrame with HUTS_FRAME_COLUMNS.

        The altitude_range column holds the label for the hut altitude, or
        the municipality altitude when the hut altitude is unknown.

        Args:
            huts: Huts to include
            range_resolver: Maps an altitude to a range label; without one
                every hut falls in the default range

        Returns:
            DataFrame with one row per hut
        """
        resolve = range_resolver or (lambda altitude: find_range_label((), altitude))
        rows = [
            (
                hut.name,
                hut.municipality.name,
                hut.municipality.province,
                hut.beds_number,
                resolve(hut.effective_altitude),
            )
            for hut in huts
        ]
        return pd.DataFrame(rows, columns=HUTS_FRAME_COLUMNS)

    def count_municipalities_per_province(self, df: pd.DataFrame) -> dict[str, int]:
        """Number of distinct municipalities with at least one hut, per province."""
        if df.empty:
            return {}
        counts = df.groupby("province")["municipality"].nunique()
        return {province: int(count) for province, count in counts.items()}

    def count_mountain_huts_per_municipality_per_province(self, df: pd.DataFrame) -> dict[str, dict[str, int]]:
        """Number of huts per municipality, nested under the province."""
        if df.empty:
            return {}
        counts = df.groupby(["province", "municipality"]).size()
        result: dict[str, dict[str, int]] = {}
        for (province, municipality), count in counts.items():
            result.setdefault(province, {})[municipality] = int(count)
        return result

    def count_mountain_huts_per_altitude_range(self, df: pd.DataFrame) -> dict[str, int]:
        """Number of huts per altitude range label."""
        if df.empty:
            return {}
        counts = df.groupby("altitude_range").size()
        return {label: int(count) for label, count in counts.items()}

    def total_beds_number_per_province(self, df: pd.DataFrame) -> dict[str, int]:
        """Sum of beds of the huts in each province."""
        if df.empty:
            return {}
        totals = df.groupby("province")["beds_number"].sum()
        return {province: int(total) for province, total in totals.items()}

    def maximum_beds_number_per_altitude_range(self, df: pd.DataFrame) -> dict[str, Optional[int]]:
        """Largest beds number of a single hut per altitude range label."""
        if df.empty:
            return {}
        maxima = df.groupby("altitude_range")["beds_number"].max()
        return {
            label: None if pd.isna(maximum) else int(maximum)
            for label, maximum in maxima.items()
        }

    def municipality_names_per_count_of_mountain_huts(self, df: pd.DataFrame) -> dict[int, list[str]]:
        """
        Municipality names grouped by how many huts each municipality has.

        Two passes: huts are counted per municipality, then municipalities
        are grouped by that count. Name lists are sorted alphabetically.
        """
        if df.empty:
            return {}
        per_municipality = df.groupby("municipality").size()
        result: dict[int, list[str]] = {}
        for count, names in per_municipality.groupby(per_municipality):
            result[int(count)] = sorted(names.index)
        return result


def get_region_stats_service() -> RegionStatsService:
    """Factory function returning a stats service."""
    return RegionStatsService()
