# path_planner/domain/entities/geography.py
from dataclasses import dataclass, field

# Raw coordinates are stored as decimicro degrees (degrees * 1e7)
DECIMICRO = 10_000_000.0

NO_WAY = -1


# Core geometry types used by mechanics
@dataclass(frozen=True)
class Node:
    lat: int  # decimicro degrees
    long: int
    height: float | None = None  # meters, when elevation was joined at ingest


@dataclass(frozen=True)
class Way:
    tags: tuple[str, ...]  # "key/value"
    nodes: tuple[int, ...]  # indices into Data.nodes

    @property
    def routable(self) -> bool:
        return len(self.nodes) >= 2


@dataclass(frozen=True)
class Data:
    nodes: tuple[Node, ...]
    ways: tuple[Way, ...]


@dataclass(frozen=True)
class GeoCoord:
    long: float  # decimal degrees
    lat: float


@dataclass(frozen=True)
class WayPosition:
    """A point along a way: segment nodes[node_index] -> nodes[node_index + 1]."""

    way_id: int = NO_WAY
    node_index: int = 0
    distance_to_next: float = 0.0

    @property
    def valid(self) -> bool:
        return self.way_id != NO_WAY


NO_POSITION = WayPosition()


# Screen space. Pixels have their origin at the top-left, y grows downwards.
@dataclass(frozen=True)
class PixelCoord:
    x: float
    y: float


@dataclass(frozen=True)
class PixelOffset:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    @property
    def center(self) -> PixelCoord:
        return PixelCoord(self.width / 2.0, self.height / 2.0)


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


NEUTRAL = Color(1.0, 1.0, 1.0)


def node_to_geocoord(node: Node) -> GeoCoord:
    return GeoCoord(long=node.long / DECIMICRO, lat=node.lat / DECIMICRO)


@dataclass
class Viewport:
    scale: float  # multiplicative zoom; only ratios between scales matter
    center: GeoCoord = field(default_factory=lambda: GeoCoord(0.0, 0.0))
