from pathlib import Path

from shimekiri.storage.base import Persistence
from shimekiri.storage.json_store import StoreToJSON
from shimekiri.storage.yaml_store import StoreToYAML

__all__ = [
    "Persistence",
    "StoreToJSON",
    "StoreToYAML",
    "get_persistence",
]


def get_persistence(data_path: str) -> Persistence:
    suffix = Path(data_path).suffix.lower()
    if suffix == ".json":
        return StoreToJSON(data_path)
    if suffix in (".yaml", ".yml"):
        return StoreToYAML(data_path)
    _msg = f"Invalid data path (expected .json or .yaml): {data_path}"
    raise ValueError(_msg)
