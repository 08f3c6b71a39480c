"""
Linode region registry

The set of regions is closed: six data centers, each with a short
code used in the ping endpoint hostname.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Optional

from .errors import UnknownRegion


URL_TEMPLATE = "http://netint-{abbr}.linode.com/ping/samples"
LABEL_PREFIX = "linode-"

# Sentinel routed to a fixed fixture endpoint instead of URL_TEMPLATE
TEST_REGION = "test"
TEST_URL = "http://netint-test.linode.com/ping/samples"


@dataclass(frozen=True)
class Region:
    """A Linode data center"""
    name: str
    abbreviation: str

    @property
    def label(self) -> str:
        """Key used for this region in ping sample responses"""
        return f"{LABEL_PREFIX}{self.name}"

    @property
    def url(self) -> str:
        return URL_TEMPLATE.format(abbr=self.abbreviation)


class RegionRegistry:
    """
    Immutable name <-> abbreviation lookup.

    Built once from an ordered sequence of regions; iteration and
    names() follow that order.
    """

    def __init__(self, regions: tuple[Region, ...]):
        self._regions = tuple(regions)
        self._by_name = MappingProxyType({r.name: r for r in self._regions})
        self._by_label = MappingProxyType({r.label: r for r in self._regions})

        if len(self._by_name) != len(self._regions):
            raise ValueError("duplicate region name in registry")
        if len({r.abbreviation for r in self._regions}) != len(self._regions):
            raise ValueError("duplicate region abbreviation in registry")

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def names(self) -> list[str]:
        return [r.name for r in self._regions]

    def get(self, name: str) -> Optional[Region]:
        return self._by_name.get(name)

    def abbreviation(self, name: str) -> Optional[str]:
        region = self._by_name.get(name)
        return region.abbreviation if region else None

    def region_for_label(self, label: str) -> Optional[Region]:
        return self._by_label.get(label)

    def resolve(self, name: str) -> Region:
        """Look up a region, raising UnknownRegion if absent"""
        region = self._by_name.get(name)
        if region is None:
            raise UnknownRegion(name)
        return region


REGISTRY = RegionRegistry((
    Region("dallas", "dal"),
    Region("fremont", "fmt"),
    Region("atlanta", "atl"),
    Region("newark", "nwk"),
    Region("london", "lon"),
    Region("tokyo", "tok"),
))


def list_regions() -> list[str]:
    """Names of all known regions, in registry order"""
    return REGISTRY.names()


def abbreviation(name: str) -> Optional[str]:
    """
    Short code for a region name.

    Returns None for unknown names; callers that need a URL
    decide how to report that.
    """
    return REGISTRY.abbreviation(name)


def get_region(name: str) -> Region:
    return REGISTRY.resolve(name)
