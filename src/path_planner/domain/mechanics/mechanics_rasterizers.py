# path_planner/domain/mechanics/mechanics_rasterizers.py
"""
Software stand-ins for the GPU way-id pass.

Both rasterizers project vertices the way the map vertex shader does:

    pos = (long_lat - center) * scale
    pos.x *= cos(radians(vertex_lat))      # aspect ratio is 1 for the tile

and draw ways as line strips in way-id order into an (N, N) int32 tile, so a
later way overwrites an earlier one where they cross. Row 0 is the bottom row.
"""

import math
from collections import defaultdict

import numpy as np

from path_planner.app.protocols import Rasterizer
from path_planner.domain.entities.geography import NO_WAY, GeoCoord
from path_planner.domain.mechanics.mechanics_graph import GeoGraph


def clip_to_box(x0, y0, x1, y1, lo: float, hi: float):
    """Liang-Barsky clip of a segment to the square [lo, hi]^2; None when outside."""
    dx, dy = x1 - x0, y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - lo), (dx, hi - x0), (-dy, y0 - lo), (dy, hi - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            t0 = max(t0, r)
        else:
            if r < t0:
                return None
            t1 = min(t1, r)
    return x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy


class _TileRasterizer(Rasterizer):
    def __init__(self, graph: GeoGraph, resolution: int = 11):
        self.G = graph
        self.resolution = resolution
        coords = [graph.coord(i) for i in range(len(graph))]
        self._long = np.array([c.long for c in coords], dtype=np.float64)
        self._lat = np.array([c.lat for c in coords], dtype=np.float64)
        self._cos_lat = np.cos(np.radians(self._lat))

        # one row per drawable segment: (way_id, node_a, node_b), in draw order
        rows = []
        for way_id in graph.routable_way_ids():
            nodes = graph.data.ways[way_id].nodes
            rows.extend((way_id, a, b) for a, b in zip(nodes, nodes[1:]))
        self.segments = np.array(rows, dtype=np.int64).reshape(-1, 3)

    def _project(self, nodes: np.ndarray, scale: float, center: GeoCoord):
        n = self.resolution
        x = (self._long[nodes] - center.long) * scale * self._cos_lat[nodes]
        y = (self._lat[nodes] - center.lat) * scale
        return (x + 1.0) * 0.5 * n, (y + 1.0) * 0.5 * n

    def _draw(self, seg_ids: np.ndarray, scale: float, center: GeoCoord) -> np.ndarray:
        n = self.resolution
        tile = np.full((n, n), NO_WAY, dtype=np.int32)
        if len(seg_ids) == 0:
            return tile

        segs = self.segments[seg_ids]
        ax, ay = self._project(segs[:, 1], scale, center)
        bx, by = self._project(segs[:, 2], scale, center)

        # trivially reject segments entirely off one side of the tile
        off = (
            ((ax < 0) & (bx < 0))
            | ((ax > n) & (bx > n))
            | ((ay < 0) & (by < 0))
            | ((ay > n) & (by > n))
        )
        for k in np.flatnonzero(~off):
            clipped = clip_to_box(ax[k], ay[k], bx[k], by[k], 0.0, float(n))
            if clipped is None:
                continue
            x0, y0, x1, y1 = clipped
            steps = int(math.ceil(max(abs(x1 - x0), abs(y1 - y0)) * 2.0)) + 1
            t = np.linspace(0.0, 1.0, steps + 1)
            xs = np.clip(np.floor(x0 + t * (x1 - x0)).astype(np.int64), 0, n - 1)
            ys = np.clip(np.floor(y0 + t * (y1 - y0)).astype(np.int64), 0, n - 1)
            tile[ys, xs] = segs[k, 0]
        return tile


class ScanRasterizer(_TileRasterizer):
    """Considers every segment on every call."""

    def render_way_ids(self, scale: float, center: GeoCoord) -> np.ndarray:
        return self._draw(np.arange(len(self.segments)), scale, center)


class SegmentIndex:
    """Uniform grid of segment buckets keyed by (floor(long / cell), floor(lat / cell))."""

    def __init__(self, long: np.ndarray, lat: np.ndarray, segments: np.ndarray, cell_size_deg: float):
        if cell_size_deg <= 0:
            raise ValueError("cell_size_deg must be > 0")
        self.cell = cell_size_deg
        self.buckets: dict[tuple[int, int], list[int]] = defaultdict(list)
        a, b = segments[:, 1], segments[:, 2]
        ix0 = np.floor(np.minimum(long[a], long[b]) / self.cell).astype(np.int64)
        ix1 = np.floor(np.maximum(long[a], long[b]) / self.cell).astype(np.int64)
        iy0 = np.floor(np.minimum(lat[a], lat[b]) / self.cell).astype(np.int64)
        iy1 = np.floor(np.maximum(lat[a], lat[b]) / self.cell).astype(np.int64)
        for s in range(len(segments)):
            for ix in range(int(ix0[s]), int(ix1[s]) + 1):
                for iy in range(int(iy0[s]), int(iy1[s]) + 1):
                    self.buckets[(ix, iy)].append(s)

    def query(self, long_min: float, long_max: float, lat_min: float, lat_max: float) -> np.ndarray:
        ix0, ix1 = math.floor(long_min / self.cell), math.floor(long_max / self.cell)
        iy0, iy1 = math.floor(lat_min / self.cell), math.floor(lat_max / self.cell)
        # wider than the whole index is cheaper to answer from the bucket keys
        if (ix1 - ix0 + 1) * (iy1 - iy0 + 1) > len(self.buckets):
            hits = {
                s
                for (ix, iy), segs in self.buckets.items()
                if ix0 <= ix <= ix1 and iy0 <= iy <= iy1
                for s in segs
            }
        else:
            hits = set()
            for ix in range(ix0, ix1 + 1):
                for iy in range(iy0, iy1 + 1):
                    hits.update(self.buckets.get((ix, iy), ()))
        return np.array(sorted(hits), dtype=np.int64)


class BucketedRasterizer(_TileRasterizer):
    """Only draws segments whose buckets overlap the tile's geographic extent."""

    def __init__(self, graph: GeoGraph, resolution: int = 11, cell_size_deg: float = 0.01):
        super().__init__(graph, resolution)
        self.index = SegmentIndex(self._long, self._lat, self.segments, cell_size_deg)

    def render_way_ids(self, scale: float, center: GeoCoord) -> np.ndarray:
        lat_half = 1.0 / scale
        # longitude extent is widest at the tile's most poleward row
        cos_min = math.cos(math.radians(min(89.9, abs(center.lat) + lat_half)))
        long_half = 1.0 / (scale * max(cos_min, 1e-6))
        seg_ids = self.index.query(
            center.long - long_half,
            center.long + long_half,
            center.lat - lat_half,
            center.lat + lat_half,
        )
        return self._draw(seg_ids, scale, center)
