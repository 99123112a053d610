from typing import Protocol, runtime_checkable

import numpy as np

from path_planner.domain.entities.geography import GeoCoord, WayPosition


# ------------- Mechanics --------------------
@runtime_checkable
class Rasterizer(Protocol):
    """
    Responsibilities:
      • Draw every routable way, colored by its way id, into a small square tile
        centered on `center` at zoom `scale`.
      • Return the tile as an (N, N) int32 array indexed [y, x] with y = 0 at the
        bottom row. Cells nothing was drawn into hold -1.
    Must be deterministic and synchronous.
    """

    resolution: int

    def render_way_ids(self, scale: float, center: GeoCoord) -> np.ndarray: ...


@runtime_checkable
class PathPlanner(Protocol):
    """
    Responsibilities:
      • Shortest path between two graph nodes, returned end -> start.
      • In debug mode, the coordinates of every node the search reached instead.
    Never raises for "no path"; returns an empty list.
    """

    def plan_path(self, start_node: int, end_node: int, debug: bool = False) -> list[GeoCoord]: ...


@runtime_checkable
class WayPicker(Protocol):
    """Resolve the way nearest to a geo coordinate as seen at `view_scale`."""

    def find_nearest_way(self, cursor: GeoCoord, view_scale: float) -> WayPosition: ...
