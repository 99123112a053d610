"""Load the ingested graph document (nodes + ways) produced by the ingest tooling.

The document is JSON shaped like::

    {"nodes": [{"lat": 492578280, "long": -1231539460}, ...],
     "ways":  [{"tags": ["highway/residential"], "nodes": [0, 1, 2]}, ...]}

Coordinates are decimicro degrees and way node references are already dense
indices into ``nodes``. Anything else is rejected up front; the rest of the
package never sees a partially valid graph.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from path_planner.domain.entities.geography import Data, Node, Way
from path_planner.errors import DataFormatError

log = logging.getLogger(__name__)

Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    lat: Int32
    long: Int32
    height: float | None = None


class WayModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    tags: list[str] = Field(default_factory=list)
    nodes: list[Annotated[int, Field(ge=0)]]


class DataModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: list[NodeModel]
    ways: list[WayModel]

    @model_validator(mode="after")
    def _check_node_refs(self):
        n = len(self.nodes)
        for way_id, way in enumerate(self.ways):
            for idx in way.nodes:
                if idx >= n:
                    raise ValueError(f"way {way_id} references node {idx}, only {n} nodes")
        return self


def parse_data(obj: Mapping[str, Any]) -> Data:
    try:
        model = DataModel.model_validate(obj)
    except ValidationError as exc:
        raise DataFormatError(f"invalid graph document: {exc}") from exc
    return Data(
        nodes=tuple(Node(lat=n.lat, long=n.long, height=n.height) for n in model.nodes),
        ways=tuple(Way(tags=tuple(w.tags), nodes=tuple(w.nodes)) for w in model.ways),
    )


def load_data(path: Path | str) -> Data:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            obj = json.load(fh)
    except json.JSONDecodeError as exc:
        raise DataFormatError(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(obj, dict):
        raise DataFormatError(f"{path}: top level must be an object")
    data = parse_data(obj)
    short = sum(1 for w in data.ways if not w.routable)
    log.info("loaded %s: %d nodes, %d ways", path, len(data.nodes), len(data.ways))
    if short:
        log.debug("%d ways have fewer than 2 nodes and are skipped for routing", short)
    return data
