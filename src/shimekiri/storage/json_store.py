import json
from typing import IO, Any

from shimekiri.storage.base import Persistence


class StoreToJSON(Persistence):
    def _decode(self, f: IO[str]) -> Any:
        # json.JSONDecodeError は ValueError のサブクラス
        return json.load(f)

    def _encode(self, records: list[dict[str, Any]], f: IO[str]) -> None:
        json.dump(records, f, ensure_ascii=False, indent=2)
        f.write("\n")
