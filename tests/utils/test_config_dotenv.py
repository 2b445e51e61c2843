import importlib
import sys
import builtins
import types
import logging
import os
from pathlib import Path

import pytest


def _reload_config():
    sys.modules.pop("mapcrawl.config", None)
    return importlib.import_module("mapcrawl.config")


@pytest.fixture(autouse=True)
def _restore_config_module():
    original = sys.modules.get("mapcrawl.config")
    yield
    if original is not None:
        sys.modules["mapcrawl.config"] = original
        setattr(sys.modules["mapcrawl"], "config", original)
    else:
        sys.modules.pop("mapcrawl.config", None)


def test_missing_dotenv_logs_warning(monkeypatch, caplog, tmp_path):
    monkeypatch.chdir(tmp_path)
    orig_import = builtins.__import__

    def fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name == "dotenv" or name.startswith("dotenv."):
            raise ImportError
        return orig_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    caplog.set_level(logging.WARNING)
    cfg = _reload_config()
    assert "python-dotenv not available" in caplog.text

    # environment fallback works
    monkeypatch.setenv("USER_AGENT", "X-Agent")
    cfg = _reload_config()
    assert cfg.get_str_env("USER_AGENT", "MapCrawl/0.1") == "X-Agent"
    assert cfg.USER_AGENT == "X-Agent"


def test_dotenv_present_but_fails_to_load(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("USER_AGENT=FromFile")
    monkeypatch.chdir(tmp_path)

    fake = types.SimpleNamespace(load_dotenv=lambda: False)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    with pytest.raises(RuntimeError):
        _reload_config()


def test_dotenv_loads_sets_variables(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("MAPCRAWL_MAX_WORKERS=4")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MAPCRAWL_MAX_WORKERS", raising=False)

    def fake_load():
        # emulate dotenv behavior: read .env and set os.environ
        p = Path(".env")
        for line in p.read_text().splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                monkeypatch.setenv(k, v)
        return True

    fake = types.SimpleNamespace(load_dotenv=fake_load)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    cfg = _reload_config()
    assert cfg.MAX_WORKERS == 4


def test_typed_helpers_fall_back_on_invalid_values(monkeypatch, caplog):
    cfg = _reload_config()
    monkeypatch.setenv("MAPCRAWL_TEST_INT", "not-a-number")
    monkeypatch.setenv("MAPCRAWL_TEST_FLOAT", "nope")
    monkeypatch.setenv("MAPCRAWL_TEST_EMPTY", "")
    caplog.set_level(logging.ERROR)
    assert cfg.get_int_env("MAPCRAWL_TEST_INT", 7) == 7
    assert cfg.get_float_env("MAPCRAWL_TEST_FLOAT", 0.5) == 0.5
    assert cfg.get_str_env("MAPCRAWL_TEST_EMPTY", "default") == "default"
    assert "Invalid MAPCRAWL_TEST_INT" in caplog.text


def test_defaults_when_unset(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("MAPCRAWL_MAX_RETRIES", "MAPCRAWL_RETRY_DELAY", "MAPCRAWL_DEFAULT_DEPTH", "MAPCRAWL_OUTPUT_FILE"):
        monkeypatch.delenv(name, raising=False)
    cfg = _reload_config()
    assert cfg.MAX_RETRIES == 3
    assert cfg.RETRY_DELAY == 0.1
    assert cfg.DEFAULT_DEPTH == 5
    assert cfg.OUTPUT_FILE == "out.txt"
