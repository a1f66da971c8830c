"""
Fixed region -> coordinate lookup table.
"""
from dataclasses import dataclass
from typing import Dict, Mapping, Iterator, Tuple
from ...common.exceptions import UnknownRegionError


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


class RegionDirectory:
    """
    Maps region keys to display names and coordinates.
    Unknown keys are an error, never a default location.
    """

    def __init__(self, regions: Mapping[str, Tuple[str, Coordinates]]):
        self._regions: Dict[str, Tuple[str, Coordinates]] = dict(regions)

    @classmethod
    def from_config(cls, regions_cfg) -> "RegionDirectory":
        return cls({
            key: (cfg.name or key, Coordinates(float(cfg.latitude), float(cfg.longitude)))
            for key, cfg in regions_cfg.items()
        })

    def coordinates(self, region: str) -> Coordinates:
        if region not in self._regions:
            raise UnknownRegionError(region)
        return self._regions[region][1]

    def display_name(self, region: str) -> str:
        if region not in self._regions:
            raise UnknownRegionError(region)
        return self._regions[region][0]

    def __contains__(self, region: str) -> bool:
        return region in self._regions

    def __iter__(self) -> Iterator[str]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)
