# python
import pytest

from launch_config.config import CONFIG_PATH_ENV, _reset_instance


@pytest.fixture(autouse=True)
def fresh_singleton(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    _reset_instance()
    yield
    _reset_instance()


@pytest.fixture
def write_config(tmp_path):
    def _write(text, name="config.txt", encoding="utf-8"):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write
