# path_planner/app/controllers/cursor.py
from path_planner.app.events import HoverChanged, PathPlanned, PointerMoved
from path_planner.domain.mechanics.mechanics_core import Mechanics
from path_planner.domain.mechanics.mechanics_viewport import ViewportTransform
from path_planner.domain.state import SessionState


class CursorHandler:
    def __init__(self, state: SessionState, transform: ViewportTransform, mechanics: Mechanics):
        self.state = state
        self.transform = transform
        self.mechanics = mechanics

    def on_pointer_moved(self, ev: PointerMoved):
        s = self.state
        s.pointer, s.viewport_size = ev.pixel, ev.viewport
        prev = s.hover

        if ev.pixel is None:
            s.clear_hover()
        else:
            cursor = self.transform.pixel_to_geo(ev.pixel, ev.viewport)
            s.hover = self.mechanics.find_nearest_way(cursor, s.viewport.scale)

        out: list[object] = []
        if s.hover != prev:
            out.append(
                HoverChanged(
                    t=ev.t,
                    way_id=s.hover.way_id,
                    node_index=s.hover.node_index,
                    distance_to_next=s.hover.distance_to_next,
                )
            )

        if s.path_start.valid and s.hover.valid:
            g = self.mechanics.graph
            start, end = g.node_at(s.path_start), g.node_at(s.hover)
            # replaced wholesale, never patched
            s.planned_path = self.mechanics.plan_path(start, end, s.debug)
            out.append(
                PathPlanned(
                    t=ev.t,
                    start_node=start,
                    end_node=end,
                    points=len(s.planned_path),
                    debug=s.debug,
                )
            )
        else:
            s.planned_path = []
        return out
