# path_planner/app/wiring.py
from path_planner.app.controllers.cursor import CursorHandler
from path_planner.app.controllers.path import PathHandler
from path_planner.app.controllers.viewport import ViewportHandler
from path_planner.app.events import (
    DebugModeRequested,
    PanRequested,
    PathClearRequested,
    PathStartRequested,
    PointerMoved,
    ZoomRequested,
)
from path_planner.engine.kernel import Kernel


def wire(
    kernel: Kernel,
    *,
    cursor: CursorHandler,
    viewport: ViewportHandler,
    path: PathHandler,
) -> None:
    k = kernel

    # pointer → pick → plan
    k.on(PointerMoved, cursor.on_pointer_moved)

    # view changes replay the pointer (PointerMoved)
    k.on(ZoomRequested, viewport.on_zoom)
    k.on(PanRequested, viewport.on_pan)

    # path commands
    k.on(PathStartRequested, path.on_start_requested)
    k.on(PathClearRequested, path.on_clear_requested)
    k.on(DebugModeRequested, path.on_debug_requested)
