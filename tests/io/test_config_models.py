# tests/io/test_config_models.py
import json

import pytest
from pydantic import ValidationError

from path_planner.config.models import (
    AppModel,
    MechanicsModel,
    RasterizerBucketedModel,
    RasterizerScanModel,
)
from path_planner.domain.mechanics.mechanics_factory import build_mechanics
from path_planner.domain.mechanics.mechanics_planner import AStarPlanner
from path_planner.domain.mechanics.mechanics_rasterizers import BucketedRasterizer, ScanRasterizer
from path_planner.errors import ConfigError
from path_planner.io.config import load_config
from path_planner.runtime.registries import make_planner


def test_defaults():
    cfg = AppModel()
    assert cfg.viewport.scale == 10.0
    assert (cfg.viewport.center_long, cfg.viewport.center_lat) == (-123.153946, 49.257828)
    assert cfg.mechanics.picker.resolution == 11
    assert cfg.mechanics.planner.max_iterations == 10_000_000
    assert isinstance(cfg.mechanics.rasterizer, RasterizerBucketedModel)
    assert cfg.highlights == []


def test_rasterizer_union_is_discriminated_by_kind():
    m = MechanicsModel.model_validate({"rasterizer": {"kind": "scan"}})
    assert isinstance(m.rasterizer, RasterizerScanModel)
    m = MechanicsModel.model_validate({"rasterizer": {"kind": "bucketed", "cell_size_deg": 0.05}})
    assert m.rasterizer.cell_size_deg == 0.05
    with pytest.raises(ValidationError):
        MechanicsModel.model_validate({"rasterizer": {"kind": "gpu"}})


@pytest.mark.parametrize(
    "bad",
    [
        {"mechanics": {"picker": {"resolution": 10}}},
        {"mechanics": {"planner": {"max_iterations": 0}}},
        {"viewport": {"scale": 0}},
        {"viewport": {"center_lat": 90.0}},
        {"highlights": [{"pattern": "x", "color": [1.5, 0, 0]}]},
        {"unknown": 1},
    ],
)
def test_invalid_values_are_rejected(bad):
    with pytest.raises(ValidationError):
        AppModel.model_validate(bad)


def test_build_mechanics_uses_registries(street_data):
    mech = build_mechanics(MechanicsModel.model_validate({"rasterizer": {"kind": "scan"}}), street_data)
    assert isinstance(mech.rasterizer, ScanRasterizer)
    assert isinstance(mech.planner, AStarPlanner)
    assert mech.rasterizer.resolution == 11

    mech = build_mechanics(MechanicsModel(), street_data)
    assert isinstance(mech.rasterizer, BucketedRasterizer)


def test_unknown_kind_in_registry():
    class _Fake:
        kind = "dijkstra"

    with pytest.raises(ValueError):
        make_planner(_Fake(), deps={})


def test_load_config_file(tmp_path):
    p = tmp_path / "app.json"
    p.write_text(json.dumps({"run_id": "r-7", "viewport": {"scale": 20.0}}), encoding="utf-8")
    cfg = load_config(p)
    assert cfg.run_id == "r-7" and cfg.viewport.scale == 20.0


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")
    p = tmp_path / "bad.json"
    p.write_text(json.dumps({"viewport": {"scale": -1}}), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)
