"""UK holiday regions (ISO 3166-2:GB subdivisions used by gov.uk)."""

from collections.abc import Iterable
from enum import Enum

from gb_holidays.src.errors import UnknownRegion


class Region(str, Enum):
    EAW = "EAW"
    NIR = "NIR"
    SCT = "SCT"

    @property
    def display_name(self) -> str:
        return REGION_NAMES[self]

    @classmethod
    def parse(cls, code: "str | Region") -> "Region":
        """Return the Region for a code such as 'SCT' (case-insensitive)."""
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise UnknownRegion(
                f"Unknown region code {code!r}, expected one of {', '.join(REGION_CODES)}"
            ) from None


REGION_NAMES = {
    Region.EAW: "England & Wales",
    Region.NIR: "Northern Ireland",
    Region.SCT: "Scotland",
}

# Canonical processing order: lexicographic by code
ALL_REGIONS: tuple[Region, ...] = tuple(sorted(Region, key=lambda r: r.value))
REGION_CODES: tuple[str, ...] = tuple(r.value for r in ALL_REGIONS)


def parse_regions(regions: "Iterable[str | Region] | str | Region | None") -> tuple[Region, ...]:
    """Normalize a region filter into a sorted tuple of unique regions.

    None means every region. An empty collection stays empty, which callers
    treat as "no regions of interest". A bare code string is a single region.
    """
    if regions is None:
        return ALL_REGIONS
    if isinstance(regions, (str, Region)):
        regions = [regions]
    parsed = {Region.parse(code) for code in regions}
    return tuple(r for r in ALL_REGIONS if r in parsed)
