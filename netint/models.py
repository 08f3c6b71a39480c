"""
Data models for netint
"""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Optional

from .errors import UnknownRegion
from .regions import REGISTRY


@dataclass(frozen=True)
class Sample:
    """A single point-to-point measurement"""
    epoch: int   # unix seconds
    rtt: int     # ms
    loss: int    # percent
    jitter: int  # ms

    @property
    def timestamp(self) -> Optional[datetime]:
        """UTC datetime for epoch, or None if datetime cannot represent it"""
        try:
            return datetime.fromtimestamp(self.epoch, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Overview:
    """
    The view a single origin region has of every region.

    One Sample per destination in the registry, the origin itself
    included.
    """
    name: str
    dallas: Sample
    fremont: Sample
    atlanta: Sample
    newark: Sample
    london: Sample
    tokyo: Sample

    @property
    def samples(self) -> dict[str, Sample]:
        """Destination name -> Sample, in registry order"""
        return {name: getattr(self, name) for name in REGISTRY.names()}

    def sample(self, name: str) -> Sample:
        """Sample toward the named destination"""
        if name not in REGISTRY:
            raise UnknownRegion(name)
        return getattr(self, name)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "samples": {
                name: sample.to_dict()
                for name, sample in self.samples.items()
            },
        }
