from pathlib import Path
from types import MappingProxyType

import pytest

from launch_config.exceptions import ConfigPathError
from launch_config.utils import (
    _frozen_mapping,
    _path_from_env,
    _redact_for_log,
    _require_path,
    parse_flag,
)


@pytest.mark.parametrize("raw", ["1", "true", "True", "TRUE", "yes", "YES", "  yes  ", " 1\t"])
def test_parse_flag_true_tokens(raw):
    assert parse_flag(raw) is True


@pytest.mark.parametrize("raw", [None, "", "0", "false", "no", "on", "2", "y", "truthy", "1 1"])
def test_parse_flag_everything_else_is_false(raw):
    assert parse_flag(raw) is False


def test_require_path_accepts_str_and_pathlike(tmp_path):
    assert _require_path("config.txt") == "config.txt"
    assert _require_path(tmp_path / "c.txt") == str(tmp_path / "c.txt")
    assert _require_path(Path("rel/c.txt")) == str(Path("rel/c.txt"))


@pytest.mark.parametrize("bad", [None, "", "   ", 42, b"config.txt", ["config.txt"]])
def test_require_path_rejects_invalid(bad):
    with pytest.raises(ConfigPathError) as exc_info:
        _require_path(bad)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.path == bad


def test_frozen_mapping_is_read_only_and_detached():
    source = {"a": "1"}
    frozen = _frozen_mapping(source)
    assert isinstance(frozen, MappingProxyType)
    source["b"] = "2"
    assert "b" not in frozen
    with pytest.raises(TypeError):
        frozen["a"] = "x"  # type: ignore[index]


def test_path_from_env(monkeypatch):
    monkeypatch.delenv("SOME_CONFIG_VAR", raising=False)
    assert _path_from_env("SOME_CONFIG_VAR") is None
    monkeypatch.setenv("SOME_CONFIG_VAR", "   ")
    assert _path_from_env("SOME_CONFIG_VAR") is None
    monkeypatch.setenv("SOME_CONFIG_VAR", " /etc/app.txt ")
    assert _path_from_env("SOME_CONFIG_VAR") == "/etc/app.txt"


@pytest.mark.parametrize("name", ["Signature", "ApiToken", "APIKey", "api_key", "UserPassword"])
def test_redact_for_log_hides_secret_like_names(name):
    assert _redact_for_log(name, "abc") == "***"


@pytest.mark.parametrize("name", ["AppId", "Monkey", "KeyboardLayout", "Tokenizer", "LVWindowInfo"])
def test_redact_for_log_keeps_ordinary_names(name):
    assert _redact_for_log(name, "game") == "'game'"
