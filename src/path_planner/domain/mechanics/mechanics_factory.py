# path_planner/domain/mechanics/mechanics_factory.py
import logging

from path_planner.config.models import MechanicsModel
from path_planner.domain.entities.geography import Data
from path_planner.domain.mechanics.mechanics_core import Mechanics
from path_planner.domain.mechanics.mechanics_graph import GeoGraph
from path_planner.domain.mechanics.mechanics_picker import SpatialPicker
from path_planner.runtime.registries import make_planner, make_rasterizer

log = logging.getLogger(__name__)


def build_mechanics(cfg: MechanicsModel, data: Data) -> Mechanics:
    graph = GeoGraph(data)
    rasterizer = make_rasterizer(
        cfg.rasterizer, deps={"graph": graph, "resolution": cfg.picker.resolution}
    )
    planner = make_planner(cfg.planner, deps={"graph": graph})
    picker = SpatialPicker(
        graph,
        rasterizer,
        scale_multiplier=cfg.picker.scale_multiplier,
        min_scale=cfg.picker.min_scale,
        samples_per_segment=cfg.picker.samples_per_segment,
    )
    log.info(
        "mechanics built: %d nodes, %d ways (%d routable), rasterizer=%s planner=%s",
        len(data.nodes),
        len(data.ways),
        len(graph.routable_way_ids()),
        cfg.rasterizer.kind,
        cfg.planner.kind,
    )
    return Mechanics(graph=graph, rasterizer=rasterizer, picker=picker, planner=planner)
