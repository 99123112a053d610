# path_planner/runtime/resources.py
from functools import lru_cache

from path_planner.domain.entities.geography import Data
from path_planner.io.data_loader import load_data


@lru_cache(maxsize=8)
def load_data_from_path(file: str, fmt: str = "json") -> Data:
    # one parsed copy per (file, fmt), shared by every session
    if fmt == "json":
        return load_data(file)
    raise ValueError(f"Unsupported graph fmt {fmt!r}")
