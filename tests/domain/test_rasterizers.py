# tests/domain/test_rasterizers.py
import numpy as np
import pytest

from path_planner.app.protocols import Rasterizer
from path_planner.domain.entities.geography import NO_WAY, GeoCoord
from path_planner.domain.mechanics.mechanics_graph import GeoGraph
from path_planner.domain.mechanics.mechanics_rasterizers import (
    BucketedRasterizer,
    ScanRasterizer,
    SegmentIndex,
    clip_to_box,
)


@pytest.fixture
def cross_graph(make_data) -> GeoGraph:
    # way 0 west-east, way 1 south-north crossing it at the origin, way 2 near the top edge
    return GeoGraph(
        make_data(
            [
                (-0.001, 0.0),
                (0.001, 0.0),
                (0.0, -0.001),
                (0.0, 0.001),
                (-0.0005, 0.0018),
                (0.0005, 0.0018),
            ],
            [
                (["highway/primary"], [0, 1]),
                (["highway/secondary"], [2, 3]),
                (["highway/footway"], [4, 5]),
            ],
        )
    )


@pytest.mark.parametrize("raster_cls", [BucketedRasterizer, ScanRasterizer])
def test_tile_shape_and_layout(cross_graph, raster_cls):
    r = raster_cls(cross_graph, resolution=11)
    assert isinstance(r, Rasterizer)
    tile = r.render_way_ids(500.0, GeoCoord(0.0, 0.0))
    assert tile.shape == (11, 11)
    assert tile.dtype == np.int32
    assert tile[5, 2] == 0  # on way 0, west of the crossing
    assert tile[2, 5] == 1  # on way 1, south of the crossing
    assert tile[5, 5] == 1  # later way overwrites at the crossing
    # row 0 is the bottom of the tile
    assert tile[10, 5] == 2
    assert tile[0, 5] == NO_WAY
    assert tile[0, 0] == NO_WAY


@pytest.mark.parametrize(
    "scale, center",
    [
        (500.0, GeoCoord(0.0, 0.0)),
        (250.0, GeoCoord(0.0004, -0.0003)),
        (1000.0, GeoCoord(-0.0007, 0.0011)),
        (62.5, GeoCoord(0.01, 0.01)),
        (5000.0, GeoCoord(3.0, 3.0)),
    ],
)
def test_bucketed_matches_scan(cross_graph, scale, center):
    bucketed = BucketedRasterizer(cross_graph, resolution=11, cell_size_deg=0.0005)
    scan = ScanRasterizer(cross_graph, resolution=11)
    np.testing.assert_array_equal(
        bucketed.render_way_ids(scale, center), scan.render_way_ids(scale, center)
    )


def test_short_ways_are_not_drawn(make_data):
    g = GeoGraph(make_data([(0.0, 0.0)], [(["a/b"], [0])]))
    r = BucketedRasterizer(g, resolution=5)
    assert r.segments.shape == (0, 3)
    assert (r.render_way_ids(100.0, GeoCoord(0.0, 0.0)) == NO_WAY).all()


def test_segment_index_query_returns_sorted_ids():
    long = np.array([0.0, 0.05, 0.05, 0.2])
    lat = np.array([0.0, 0.0, 0.05, 0.2])
    segments = np.array([[0, 0, 1], [0, 1, 2], [1, 2, 3]])
    idx = SegmentIndex(long, lat, segments, cell_size_deg=0.01)
    assert idx.query(0.0, 0.001, 0.0, 0.001).tolist() == [0]
    assert idx.query(0.049, 0.051, 0.01, 0.02).tolist() == [1]
    assert idx.query(-1.0, 1.0, -1.0, 1.0).tolist() == [0, 1, 2]
    assert idx.query(5.0, 6.0, 5.0, 6.0).tolist() == []


def test_segment_index_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        SegmentIndex(np.zeros(1), np.zeros(1), np.zeros((0, 3), dtype=np.int64), 0.0)


def test_clip_to_box():
    assert clip_to_box(-1.0, 0.5, 2.0, 0.5, 0.0, 1.0) == pytest.approx((0.0, 0.5, 1.0, 0.5))
    assert clip_to_box(2.0, 2.0, 3.0, 3.0, 0.0, 1.0) is None
    assert clip_to_box(0.25, 0.25, 0.75, 0.75, 0.0, 1.0) == (0.25, 0.25, 0.75, 0.75)
