# path_planner/app/build.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from path_planner.app.controllers.cursor import CursorHandler
from path_planner.app.controllers.path import PathHandler
from path_planner.app.controllers.viewport import ViewportHandler
from path_planner.app.events import (
    DebugModeRequested,
    HighlightsChanged,
    PanRequested,
    PathClearRequested,
    PathStartRequested,
    PointerMoved,
    ZoomRequested,
)
from path_planner.app.wiring import wire
from path_planner.config.models import AppModel
from path_planner.domain.entities.geography import (
    Color,
    Data,
    GeoCoord,
    PixelCoord,
    PixelOffset,
    Size,
    Viewport,
    WayPosition,
)
from path_planner.domain.mechanics.mechanics_core import Mechanics
from path_planner.domain.mechanics.mechanics_factory import build_mechanics
from path_planner.domain.mechanics.mechanics_highlights import compile_highlights, way_color
from path_planner.domain.mechanics.mechanics_viewport import (
    ViewportTransform,
    scroll_zoom_factor,
)
from path_planner.domain.state import SessionState
from path_planner.engine.hooks import NoopHooks
from path_planner.engine.kernel import Kernel
from path_planner.io.kernel_logging import KernelLogging
from path_planner.io.recorder import Recorder


@dataclass
class App:
    """
    Orchestrator. Every command becomes an event on the kernel and is handled
    to completion (follow-up events included) before the method returns.
    """

    kernel: Kernel
    state: SessionState
    transform: ViewportTransform
    mechanics: Mechanics
    cursor: CursorHandler
    viewport_handler: ViewportHandler
    path: PathHandler
    zoom_base: float = 1.003
    _tick: int = field(default=0, repr=False)

    def _send(self, ev_type, **kw) -> None:
        self._tick += 1
        self.kernel.dispatch(ev_type(t=float(self._tick), **kw))

    # ---------------- input commands ----------------

    def update_cursor_pos(self, pixel: PixelCoord | None, viewport_size: Size) -> None:
        self._send(PointerMoved, pixel=pixel, viewport=viewport_size)

    def zoom(self, factor: float, anchor: PixelCoord, viewport_size: Size) -> None:
        self._send(ZoomRequested, factor=factor, anchor=anchor, viewport=viewport_size)

    def scroll(self, delta: float, anchor: PixelCoord, viewport_size: Size) -> None:
        self.zoom(scroll_zoom_factor(delta, self.zoom_base), anchor, viewport_size)

    def move_map(self, offset: PixelOffset, viewport_size: Size) -> None:
        self._send(PanRequested, offset=offset, viewport=viewport_size)

    def drag(self, pointer_delta: PixelOffset, viewport_size: Size) -> None:
        # dragging right moves the map right, i.e. the view center left
        self.move_map(PixelOffset(-pointer_delta.x, -pointer_delta.y), viewport_size)

    def start_path_plan(self) -> None:
        self._send(PathStartRequested)

    def clear_path_plan(self) -> None:
        self._send(PathClearRequested)

    def set_debug_mode(self, enable: bool) -> None:
        self._send(DebugModeRequested, enabled=enable)

    def set_highlight_list(self, highlights: Iterable[tuple[str, Color]]) -> None:
        """Raises HighlightPatternError and keeps the current list if any pattern is bad."""
        compiled = compile_highlights(highlights)
        self.state.highlights = compiled
        self._send(HighlightsChanged, patterns=tuple(r.pattern for r, _ in compiled))

    # ---------------- queries ----------------

    @property
    def hover(self) -> WayPosition:
        return self.state.hover

    @property
    def path_start(self) -> WayPosition:
        return self.state.path_start

    @property
    def planned_path(self) -> list[GeoCoord]:
        return self.state.planned_path

    @property
    def viewport(self) -> Viewport:
        return self.state.viewport

    def pixel_to_geo(self, pixel: PixelCoord, viewport_size: Size) -> GeoCoord:
        return self.transform.pixel_to_geo(pixel, viewport_size)

    def geo_to_pixel(self, coord: GeoCoord, viewport_size: Size) -> PixelCoord:
        return self.transform.geo_to_pixel(coord, viewport_size)

    def find_nearest_way(self, cursor: GeoCoord) -> WayPosition:
        return self.mechanics.find_nearest_way(cursor, self.state.viewport.scale)

    def plan_between(
        self, start: WayPosition, end: WayPosition, debug: bool = False
    ) -> list[GeoCoord]:
        return self.mechanics.plan_between(start, end, debug)

    def selected_tags(self) -> list[str]:
        if not self.state.hover.valid:
            return []
        return self.mechanics.graph.tags(self.state.hover.way_id)

    def hover_coord(self) -> GeoCoord | None:
        return self.mechanics.graph.way_position_to_geocoord(self.state.hover)

    def way_color(self, way_id: int) -> Color:
        return way_color(self.mechanics.graph.data.ways[way_id], self.state.highlights)


def build(
    cfg: AppModel | Mapping | None,
    data: Data,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = AppModel()
    else:
        model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) Kernel (with hooks)
    hooks = (
        KernelLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)

    # 2) Graph, picker, planner
    mechanics = build_mechanics(model.mechanics, data)

    # 3) Session state
    vp = model.viewport
    state = SessionState(
        viewport=Viewport(scale=vp.scale, center=GeoCoord(long=vp.center_long, lat=vp.center_lat)),
        debug=model.debug,
        highlights=compile_highlights(
            (h.pattern, Color(*h.color)) for h in model.highlights
        ),
    )
    transform = ViewportTransform(state.viewport)

    # 4) Handlers (inject deps explicitly)
    cursor = CursorHandler(state=state, transform=transform, mechanics=mechanics)
    viewport_handler = ViewportHandler(state=state, transform=transform)
    path = PathHandler(state=state)

    # 5) Wiring
    wire(kernel, cursor=cursor, viewport=viewport_handler, path=path)

    return App(
        kernel=kernel,
        state=state,
        transform=transform,
        mechanics=mechanics,
        cursor=cursor,
        viewport_handler=viewport_handler,
        path=path,
        zoom_base=vp.zoom_base,
    )
