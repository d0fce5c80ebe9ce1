from typing import IO, Any

import yaml  # type: ignore[import-untyped]

from shimekiri.storage.base import Persistence


class StoreToYAML(Persistence):
    def _decode(self, f: IO[str]) -> Any:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            _msg = f"Failed to load YAML file: {e}"
            raise ValueError(_msg) from e
        # 空ファイルは空のリストとして扱う
        return [] if raw is None else raw

    def _encode(self, records: list[dict[str, Any]], f: IO[str]) -> None:
        yaml.safe_dump(records, f, allow_unicode=True, sort_keys=False)
