# app/events.py
from dataclasses import dataclass

from path_planner.domain.entities.geography import PixelCoord, PixelOffset, Size
from path_planner.engine.event import BaseEvent


# Input side
@dataclass(order=True)
class PointerMoved(BaseEvent):
    pixel: PixelCoord | None  # None when the pointer left the view
    viewport: Size


@dataclass(order=True)
class ZoomRequested(BaseEvent):
    factor: float
    anchor: PixelCoord
    viewport: Size


@dataclass(order=True)
class PanRequested(BaseEvent):
    offset: PixelOffset
    viewport: Size


@dataclass(order=True)
class PathStartRequested(BaseEvent):
    pass


@dataclass(order=True)
class PathClearRequested(BaseEvent):
    pass


@dataclass(order=True)
class DebugModeRequested(BaseEvent):
    enabled: bool


# Outcomes (no subscribers by default; logged and recorded by the kernel hooks)
@dataclass(order=True)
class HoverChanged(BaseEvent):
    way_id: int
    node_index: int
    distance_to_next: float


@dataclass(order=True)
class PathPlanned(BaseEvent):
    start_node: int
    end_node: int
    points: int  # coordinates in the planned path; 0 means no route
    debug: bool


@dataclass(order=True)
class PathStarted(BaseEvent):
    way_id: int
    node_index: int


@dataclass(order=True)
class PathCleared(BaseEvent):
    pass


@dataclass(order=True)
class DebugModeChanged(BaseEvent):
    enabled: bool


@dataclass(order=True)
class HighlightsChanged(BaseEvent):
    patterns: tuple[str, ...]
