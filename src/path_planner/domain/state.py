# path_planner/domain/state.py
from dataclasses import dataclass, field

from path_planner.domain.entities.geography import (
    NO_POSITION,
    GeoCoord,
    PixelCoord,
    Size,
    Viewport,
    WayPosition,
)
from path_planner.domain.mechanics.mechanics_highlights import Highlight


@dataclass
class SessionState:
    """Everything the orchestrator mutates in response to input."""

    viewport: Viewport
    hover: WayPosition = NO_POSITION
    path_start: WayPosition = NO_POSITION
    planned_path: list[GeoCoord] = field(default_factory=list)
    debug: bool = False
    highlights: list[Highlight] = field(default_factory=list)

    # last pointer input, replayed after zoom/pan
    pointer: PixelCoord | None = None
    viewport_size: Size | None = None

    def clear_hover(self) -> None:
        self.hover = NO_POSITION
        self.planned_path = []
