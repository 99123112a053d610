# path_planner/io/business_events.py

from dataclasses import dataclass


# Base type for analytics records (not scheduled in the kernel!)
@dataclass
class BizEvent:
    run_id: str
    t: float  # logical command tick
    seq: int  # kernel dispatch sequence (for total ordering)
    name: str  # stable event name


@dataclass
class PathStartedBiz(BizEvent):
    way_id: int
    node_index: int


@dataclass
class PathClearedBiz(BizEvent):
    pass


@dataclass
class PathPlannedBiz(BizEvent):
    start_node: int
    end_node: int
    points: int
    debug: bool


@dataclass
class DebugModeChangedBiz(BizEvent):
    enabled: bool


@dataclass
class HighlightsChangedBiz(BizEvent):
    patterns: list[str]


_BY_NAME: dict[str, type[BizEvent]] = {
    "PathStarted": PathStartedBiz,
    "PathCleared": PathClearedBiz,
    "PathPlanned": PathPlannedBiz,
    "DebugModeChanged": DebugModeChangedBiz,
    "HighlightsChanged": HighlightsChangedBiz,
}


def to_biz_event(run_id: str, name: str, seq: int, fields: dict) -> BizEvent:
    cls = _BY_NAME.get(name, BizEvent)
    payload = {k: v for k, v in fields.items() if k != "t"}
    if cls is HighlightsChangedBiz:
        payload["patterns"] = list(payload.get("patterns", ()))
    if cls is BizEvent:
        payload = {}
    return cls(run_id=run_id, t=fields.get("t"), seq=seq, name=name, **payload)
