import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any

from pyresults import Err, Ok, Result

from shimekiri.core.models import Task
from shimekiri.util.logger import setup_logger

logger = setup_logger("shimekiri", is_stream=False, is_file=True)


class Persistence(ABC):
    """タスク一覧を1ファイルに保存/復元する永続化アダプタの基底クラス。

    実装クラスは、以下のメソッドを提供する必要があります。

        - _decode(): ファイル内容をPythonオブジェクトに変換する
        - _encode(): レコードのリストをファイルに書き出す

    Public API:
        - load(): ファイルからタスクを読み込む。失敗時は空リスト
        - save(): 全タスクを書き出す。失敗しても例外は投げない

    注意: 壊れたファイルを読み込んだ場合は黙って空から始める (仕様上の方針)。
    """

    def __init__(self, data_path: str) -> None:
        self.data_path = data_path

    @abstractmethod
    def _decode(self, f: IO[str]) -> Any:
        raise NotImplementedError

    @abstractmethod
    def _encode(self, records: list[dict[str, Any]], f: IO[str]) -> None:
        raise NotImplementedError

    # ---- 基本IO ----

    def load(self) -> list[Task]:
        _path = Path(self.data_path)
        if not _path.exists():
            logger.info("Data file not found, starting empty: %s", _path)
            return []
        match self.read(_path):
            case Ok(tasks):
                return tasks  # type: ignore[no-any-return]
            case Err(e):
                logger.warning("Discarding unreadable data file %s: %s", _path, e)
                return []
            case _:
                return []

    def read(self, path: Path) -> Result[list[Task], str]:
        """ファイルを読み込み、タスクのリストに変換する。

        Returns:
            Ok(list[Task]): 成功時
            Err(str): 失敗時 (I/Oエラー、構文エラー、レコード不正、ID重複)
        """
        try:
            with path.open(encoding="utf-8") as f:
                raw = self._decode(f)
        except (OSError, UnicodeDecodeError) as e:
            return Err[list[Task], str](f"Failed to read {path}: {e}")
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError / yaml.YAMLError は各実装で ValueError に揃える
            # 深くネストした入力はどちらのパーサでも RecursionError になる
            return Err[list[Task], str](f"Failed to parse {path}: {e}")
        return records_to_tasks(raw)

    def save(self, tasks: list[Task]) -> None:
        """全タスクを一時ファイルに書いてから置き換える。

        失敗はログに残して握りつぶす。
        """
        _path = Path(self.data_path)
        records = [t.to_dict() for t in tasks]
        tmp_name: str | None = None
        try:
            _path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=_path.parent,
                prefix=f".{_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                self._encode(records, f)
            os.replace(tmp_name, _path)
            tmp_name = None
        except (OSError, ValueError) as e:
            _msg = f"Failed to save tasks to {_path}: {e}"
            logger.exception(_msg)
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)


def records_to_tasks(raw: Any) -> Result[list[Task], str]:
    if not isinstance(raw, list):
        return Err[list[Task], str](f"Expected a list of task records, got {type(raw).__name__}")
    tasks: list[Task] = []
    seen: set[int] = set()
    for i, record in enumerate(raw):
        try:
            t = Task.from_dict(record)
        except ValueError as e:
            return Err[list[Task], str](f"Invalid record #{i}: {e}")
        if t.id in seen:
            return Err[list[Task], str](f"Duplicate task id: {t.id}")
        seen.add(t.id)
        tasks.append(t)
    return Ok[list[Task], str](tasks)
