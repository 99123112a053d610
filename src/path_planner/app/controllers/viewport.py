# path_planner/app/controllers/viewport.py
from path_planner.app.events import PanRequested, PointerMoved, ZoomRequested
from path_planner.domain.mechanics.mechanics_viewport import ViewportTransform
from path_planner.domain.state import SessionState


class ViewportHandler:
    """Pan/zoom, then replay the pointer so hover and path match the new view."""

    def __init__(self, state: SessionState, transform: ViewportTransform):
        self.state = state
        self.transform = transform

    def on_zoom(self, ev: ZoomRequested):
        self.transform.zoom(ev.factor, ev.anchor, ev.viewport)
        return [PointerMoved(t=ev.t, pixel=ev.anchor, viewport=ev.viewport)]

    def on_pan(self, ev: PanRequested):
        self.transform.pan(ev.offset, ev.viewport)
        return [PointerMoved(t=ev.t, pixel=self.state.pointer, viewport=ev.viewport)]
