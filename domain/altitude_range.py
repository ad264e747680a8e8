"""
Altitude Range Domain Model

A bounded altitude interval (min, max] with the textual label used as the
grouping key in the altitude-range queries.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from domain.errors import ParseError


# Label used when an altitude is unknown or falls outside every configured range
DEFAULT_RANGE_LABEL = "0-INF"


@dataclass(frozen=True)
class AltitudeRange:
    """
    Half-open altitude interval: min is excluded, max is included.

    Attributes:
        min: Lower bound (exclusive)
        max: Upper bound (inclusive)
        label: Canonical "min-max" text, as written in the configuration
    """
    min: int
    max: int
    label: str

    @classmethod
    def parse(cls, spec: str) -> "AltitudeRange":
        """
        Build a range from its textual form "[minValue]-[maxValue]".

        Whitespace around the whole spec and around each bound is dropped;
        the label keeps the bounds exactly as written otherwise, so
        " 0 - 1000 " becomes "0-1000".

        Args:
            spec: Range text such as "1000-2000"

        Returns:
            A new AltitudeRange

        Raises:
            ParseError: If the spec does not split into two integer bounds
        """
        if spec is None:
            raise ParseError("Altitude range spec is missing", field="AltitudeRange")
        parts = spec.strip().split("-")
        if len(parts) != 2:
            raise ParseError(
                f"Invalid altitude range '{spec}': expected '<min>-<max>'",
                field="AltitudeRange", value=spec,
            )
        left, right = parts[0].strip(), parts[1].strip()
        try:
            if "_" in left or "_" in right:
                raise ValueError(spec)
            low, high = int(left), int(right)
        except ValueError:
            raise ParseError(
                f"Invalid altitude range '{spec}': bounds must be integers",
                field="AltitudeRange", value=spec,
            ) from None
        return cls(min=low, max=high, label=f"{left}-{right}")

    def contains(self, altitude: int) -> bool:
        """True if min < altitude <= max."""
        return self.min < altitude <= self.max


def find_range_label(ranges: Iterable[AltitudeRange], altitude: Optional[int]) -> str:
    """Return the label of the first range containing altitude, or DEFAULT_RANGE_LABEL."""
    if altitude is None:
        return DEFAULT_RANGE_LABEL
    for altitude_range in ranges:
        if altitude_range.contains(altitude):
            return altitude_range.label
    return DEFAULT_RANGE_LABEL
