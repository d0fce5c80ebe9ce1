import os
import tempfile
import unittest
from pathlib import Path

from shimekiri.util import dirs

ENV_KEYS = ("SK_DATA_PATH", "SK_LOG_LEVEL")


class TestLoadEnv(unittest.TestCase):
    def setUp(self) -> None:
        self.original = {k: os.environ.get(k) for k in ENV_KEYS}
        for k in ENV_KEYS:
            os.environ.pop(k, None)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.env_path = Path(self.temp_dir.name) / "config.env"

    def tearDown(self) -> None:
        self.temp_dir.cleanup()
        for k, v in self.original.items():
            if v is not None:
                os.environ[k] = v
            elif k in os.environ:
                del os.environ[k]

    def test_defaults_without_config(self) -> None:
        env = dirs.load_env(self.env_path.as_posix())
        assert env["DATA_PATH"] == "todos.json"
        assert env["LOG_LEVEL"] == "INFO"

    def test_reads_config_file(self) -> None:
        self.env_path.write_text(
            "# comment\n\nDATA_PATH = /tmp/my-todos.yaml\nLOG_LEVEL=debug\nEXTRA=1\n",
            encoding="utf-8",
        )
        env = dirs.load_env(self.env_path.as_posix())
        assert env["DATA_PATH"] == "/tmp/my-todos.yaml"
        assert env["LOG_LEVEL"] == "DEBUG"
        assert env["EXTRA"] == "1"

    def test_environment_overrides_config(self) -> None:
        self.env_path.write_text("DATA_PATH=from-file.json\n", encoding="utf-8")
        os.environ["SK_DATA_PATH"] = "from-env.json"
        os.environ["SK_LOG_LEVEL"] = "warning"
        env = dirs.load_env(self.env_path.as_posix())
        assert env["DATA_PATH"] == "from-env.json"
        assert env["LOG_LEVEL"] == "WARNING"


class TestEnsureDirs(unittest.TestCase):
    def test_home_exists_after_call(self) -> None:
        dirs.ensure_dirs()
        assert Path(dirs.DEFAULT_HOME).is_dir()


if __name__ == "__main__":
    unittest.main()
