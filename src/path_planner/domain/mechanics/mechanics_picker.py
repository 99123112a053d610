# path_planner/domain/mechanics/mechanics_picker.py
import logging

import numpy as np

from path_planner.app.protocols import Rasterizer, WayPicker
from path_planner.domain.entities.geography import NO_POSITION, NO_WAY, GeoCoord, WayPosition
from path_planner.domain.mechanics.mechanics_graph import GeoGraph

log = logging.getLogger(__name__)


def find_closest_way_id_to_center(pixels: np.ndarray) -> int:
    """
    Scan square rings outwards from the center cell; return the first way id.

    For ring k every i in [c-k, c+k] checks, in order, the bottom row (i, c-k),
    the top row (i, c+k), the left column (c-k, i) and the right column (c+k, i).
    """
    res = pixels.shape[0]
    c = res // 2
    for dist in range(c + 1):
        lo, hi = c - dist, c + dist
        for i in range(lo, hi + 1):
            for x, y in ((i, lo), (i, hi), (lo, i), (hi, i)):
                way_id = int(pixels[y, x])
                if way_id != NO_WAY:
                    return way_id
    return NO_WAY


def find_way_position(
    graph: GeoGraph, way_id: int, coord: GeoCoord, samples: int = 10
) -> WayPosition:
    # Step through the way and keep the sampled point closest to coord
    if way_id == NO_WAY:
        return NO_POSITION
    way = graph.data.ways[way_id]
    if not way.routable:
        return NO_POSITION

    best_d2 = float("inf")
    best_node, best_factor = 0, 0.0
    for node_index, (n1, n2) in enumerate(zip(way.nodes, way.nodes[1:])):
        c1, c2 = graph.coord(n1), graph.coord(n2)
        for i in range(samples):
            f = i / samples
            d_long = (c2.long - c1.long) * f + c1.long - coord.long
            d_lat = (c2.lat - c1.lat) * f + c1.lat - coord.lat
            d2 = d_long * d_long + d_lat * d_lat
            if d2 < best_d2:
                best_d2, best_node, best_factor = d2, node_index, f

    return WayPosition(way_id=way_id, node_index=best_node, distance_to_next=best_factor)


class SpatialPicker(WayPicker):
    """
    Nearest-way lookup through a rasterized tile around the cursor.

    Starts zoomed in at view_scale * scale_multiplier and halves the scale
    (covering more ground per pixel) until a way shows up or the scale drops
    to min_scale.
    """

    def __init__(
        self,
        graph: GeoGraph,
        rasterizer: Rasterizer,
        *,
        scale_multiplier: float = 50.0,
        min_scale: float = 50.0,
        samples_per_segment: int = 10,
    ):
        self.G, self.rasterizer = graph, rasterizer
        self.scale_multiplier = scale_multiplier
        self.min_scale = min_scale
        self.samples = samples_per_segment

    def trial_scales(self, view_scale: float) -> list[float]:
        out = []
        scale = view_scale * self.scale_multiplier
        while scale > self.min_scale:
            out.append(scale)
            scale /= 2.0
        return out

    def find_nearest_way(self, cursor: GeoCoord, view_scale: float) -> WayPosition:
        for scale in self.trial_scales(view_scale):
            pixels = self.rasterizer.render_way_ids(scale, cursor)
            way_id = find_closest_way_id_to_center(pixels)
            pos = find_way_position(self.G, way_id, cursor, self.samples)
            if pos.valid:
                return pos
        log.debug("no way near (%.6f, %.6f) at view scale %s", cursor.long, cursor.lat, view_scale)
        return NO_POSITION
