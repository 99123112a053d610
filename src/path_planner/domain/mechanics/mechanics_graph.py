# path_planner/domain/mechanics/mechanics_graph.py
import math

from path_planner.domain.entities.geography import (
    DECIMICRO,
    Data,
    GeoCoord,
    Node,
    WayPosition,
    node_to_geocoord,
)


def distance(n1: Node, n2: Node) -> float:
    """
    Equirectangular distance in degrees.

    Longitude is scaled by the cosine of n2's latitude, so
    distance(a, b) != distance(b, a) when a and b sit on different latitudes.
    """
    long_dist = (n2.long - n1.long) * math.cos(math.radians(n2.lat / DECIMICRO))
    long_dist /= DECIMICRO
    lat_dist = (n2.lat - n1.lat) / DECIMICRO
    return math.sqrt(long_dist * long_dist + lat_dist * lat_dist)


class GeoGraph:
    """Read-only adjacency view over ingested nodes and ways."""

    def __init__(self, data: Data):
        self.data = data
        neighbors: list[set[int]] = [set() for _ in data.nodes]
        for way in data.ways:
            nodes = way.nodes
            for i in range(len(nodes) - 1):
                a, b = nodes[i], nodes[i + 1]
                neighbors[a].add(b)
                neighbors[b].add(a)
        # read-only neighbor sets
        self._neighbors = [frozenset(s) for s in neighbors]
        self._coords = [node_to_geocoord(n) for n in data.nodes]

    def __len__(self) -> int:
        return len(self.data.nodes)

    def neighbors(self, node_id: int) -> frozenset[int]:
        return self._neighbors[node_id]

    def distance(self, node_a: int, node_b: int) -> float:
        return distance(self.data.nodes[node_a], self.data.nodes[node_b])

    def coord(self, node_id: int) -> GeoCoord:
        return self._coords[node_id]

    def routable_way_ids(self) -> list[int]:
        return [i for i, way in enumerate(self.data.ways) if way.routable]

    def node_at(self, position: WayPosition) -> int:
        return self.data.ways[position.way_id].nodes[position.node_index]

    def way_position_to_geocoord(self, position: WayPosition) -> GeoCoord | None:
        if not position.valid:
            return None
        way = self.data.ways[position.way_id]
        c1 = self._coords[way.nodes[position.node_index]]
        c2 = self._coords[way.nodes[position.node_index + 1]]
        f = position.distance_to_next
        return GeoCoord(
            long=(c2.long - c1.long) * f + c1.long,
            lat=(c2.lat - c1.lat) * f + c1.lat,
        )

    def tags(self, way_id: int) -> list[str]:
        return list(self.data.ways[way_id].tags)

    def tag_catalogue(self) -> list[str]:
        seen: set[str] = set()
        for way in self.data.ways:
            seen.update(way.tags)
        return sorted(seen)
