# path_planner/io/config.py
from pathlib import Path

from pydantic import ValidationError

from path_planner.config.models import AppModel
from path_planner.errors import ConfigError


def load_config(path: Path | str) -> AppModel:
    path = Path(path)
    try:
        return AppModel.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc
