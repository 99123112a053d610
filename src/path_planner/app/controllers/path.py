# path_planner/app/controllers/path.py
from path_planner.app.events import (
    DebugModeChanged,
    DebugModeRequested,
    PathCleared,
    PathClearRequested,
    PathStarted,
    PathStartRequested,
    PointerMoved,
)
from path_planner.domain.entities.geography import NO_POSITION
from path_planner.domain.state import SessionState


class PathHandler:
    def __init__(self, state: SessionState):
        self.state = state

    def on_start_requested(self, ev: PathStartRequested):
        # snapshot; later hover updates don't move the start
        self.state.path_start = self.state.hover
        return [
            PathStarted(
                t=ev.t,
                way_id=self.state.path_start.way_id,
                node_index=self.state.path_start.node_index,
            )
        ]

    def on_clear_requested(self, ev: PathClearRequested):
        self.state.path_start = NO_POSITION
        return [PathCleared(t=ev.t)]

    def on_debug_requested(self, ev: DebugModeRequested):
        self.state.debug = ev.enabled
        out: list[object] = [DebugModeChanged(t=ev.t, enabled=ev.enabled)]
        # replan in the new mode if we know where the pointer is
        if self.state.viewport_size is not None:
            out.append(
                PointerMoved(t=ev.t, pixel=self.state.pointer, viewport=self.state.viewport_size)
            )
        return out
