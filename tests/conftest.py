# tests/conftest.py
import pytest

from path_planner.domain.entities.geography import DECIMICRO, Data, Node, Way


def to_data(points, ways) -> Data:
    """points: [(long_deg, lat_deg)], ways: [(tags, node_ids)]"""
    nodes = tuple(Node(lat=int(round(lat * DECIMICRO)), long=int(round(lon * DECIMICRO))) for lon, lat in points)
    return Data(nodes=nodes, ways=tuple(Way(tags=tuple(t), nodes=tuple(n)) for t, n in ways))


@pytest.fixture
def make_data():
    return to_data


@pytest.fixture
def abcd_data() -> Data:
    # A(0,0) B(1,0) C(1,1) D(0,1), one way A-B-C-D
    return to_data(
        [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)],
        [(["highway/residential"], [0, 1, 2, 3])],
    )


@pytest.fixture
def street_data() -> Data:
    # Main street along the equator, a footway heading north from its east end
    return to_data(
        [(-0.001, 0.0), (0.0, 0.0), (0.001, 0.0), (0.001, 0.001)],
        [
            (["highway/residential", "name/Main"], [0, 1, 2]),
            (["highway/footway"], [2, 3]),
        ],
    )
