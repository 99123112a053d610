# path_planner/domain/mechanics/mechanics_core.py
from dataclasses import dataclass

from path_planner.app.protocols import PathPlanner, Rasterizer, WayPicker
from path_planner.domain.entities.geography import GeoCoord, WayPosition
from path_planner.domain.mechanics.mechanics_graph import GeoGraph


@dataclass
class Mechanics:
    """Bundles the graph with the components that query it."""

    graph: GeoGraph
    rasterizer: Rasterizer
    picker: WayPicker
    planner: PathPlanner

    def find_nearest_way(self, cursor: GeoCoord, view_scale: float) -> WayPosition:
        return self.picker.find_nearest_way(cursor, view_scale)

    def plan_path(self, start_node: int, end_node: int, debug: bool = False) -> list[GeoCoord]:
        return self.planner.plan_path(start_node, end_node, debug)

    def plan_between(
        self, start: WayPosition, end: WayPosition, debug: bool = False
    ) -> list[GeoCoord]:
        if not (start.valid and end.valid):
            return []
        return self.planner.plan_path(self.graph.node_at(start), self.graph.node_at(end), debug)
