# runtime/registries.py
from collections.abc import Callable
from typing import Any

from path_planner.app.protocols import PathPlanner, Rasterizer
from path_planner.config.models import (
    PlannerAStarModel,
    PlannerUnion,
    RasterizerBucketedModel,
    RasterizerScanModel,
    RasterizerUnion,
)
from path_planner.domain.mechanics.mechanics_planner import AStarPlanner
from path_planner.domain.mechanics.mechanics_rasterizers import (
    BucketedRasterizer,
    ScanRasterizer,
)

RasterizerFactory = Callable[[RasterizerUnion, dict[str, Any]], Rasterizer]
PlannerFactory = Callable[[PlannerUnion, dict[str, Any]], PathPlanner]

_rasterizer_registry: dict[str, RasterizerFactory] = {}
_planner_registry: dict[str, PlannerFactory] = {}


# ------------------- Rasterizer registries ---------------------------


def register_rasterizer(kind: str):
    def deco(fn: RasterizerFactory):
        _rasterizer_registry[kind] = fn
        return fn

    return deco


def make_rasterizer(cfg: RasterizerUnion, *, deps: dict[str, Any]) -> Rasterizer:
    try:
        factory = _rasterizer_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown rasterizer kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_rasterizer("bucketed")
def _bucketed(cfg: RasterizerBucketedModel, deps: dict[str, Any]) -> Rasterizer:
    return BucketedRasterizer(
        deps["graph"], resolution=deps["resolution"], cell_size_deg=cfg.cell_size_deg
    )


@register_rasterizer("scan")
def _scan(cfg: RasterizerScanModel, deps: dict[str, Any]) -> Rasterizer:
    return ScanRasterizer(deps["graph"], resolution=deps["resolution"])


# ------------------- Planner registries ---------------------------


def register_planner(kind: str):
    def deco(fn: PlannerFactory):
        _planner_registry[kind] = fn
        return fn

    return deco


def make_planner(cfg: PlannerUnion, *, deps: dict[str, Any]) -> PathPlanner:
    try:
        factory = _planner_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown planner kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_planner("astar")
def _astar(cfg: PlannerAStarModel, deps: dict[str, Any]) -> PathPlanner:
    return AStarPlanner(deps["graph"], max_iterations=cfg.max_iterations)
