import os
import re
from pathlib import Path

DEFAULT_HOME = os.environ.get("SK_HOME_DIR", (Path.home() / ".shimekiri").as_posix())
DEFAULT_DATA_PATH = "todos.json"  # 作業ディレクトリからの相対パス
DEFAULT_ENV_PATH = (Path(DEFAULT_HOME) / "config.env").as_posix()
DEFAULT_LOG_LEVEL = "INFO"


def ensure_dirs() -> None:
    _path = Path(DEFAULT_HOME)
    _path.mkdir(parents=True, exist_ok=True)


def load_env(path: str = DEFAULT_ENV_PATH) -> dict[str, str]:
    env: dict[str, str] = {}
    _path = Path(path)
    if _path.exists():
        with _path.open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                m = re.match(r"([^=]+)=(.*)", line)
                if m:
                    key = m.group(1).strip()
                    val = m.group(2).strip()
                    env[key] = val

    # OS環境変数を上書き優先
    env.update(
        {
            "DATA_PATH": os.environ.get("SK_DATA_PATH", env.get("DATA_PATH", DEFAULT_DATA_PATH)),
            "LOG_LEVEL": os.environ.get("SK_LOG_LEVEL", env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper(),
        },
    )
    return env
