import json

import pytest

from entity.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Every test starts with an empty config unless it writes one."""
    monkeypatch.setenv("WETH_HELPER_CONFIG", str(tmp_path / "missing.json"))
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def write_config(tmp_path, monkeypatch):
    def _write(data: dict) -> Config:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        monkeypatch.setenv("WETH_HELPER_CONFIG", str(path))
        Config.reset()
        return Config.get_singleton()

    return _write
