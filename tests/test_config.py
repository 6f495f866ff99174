import importlib.util
from pathlib import Path

import pytest

from app.filing.config import load_config, load_settings


@pytest.fixture()
def start_module():
    path = Path(__file__).resolve().parents[1] / "scripts" / "start.py"
    spec = importlib.util.spec_from_file_location("filing_start", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_blank_env_values_fall_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SECRET_KEY", "   ")
    monkeypatch.setenv("STORAGE_BACKEND", " Memory ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("DB_FILE", raising=False)
    monkeypatch.delenv("ENV", raising=False)

    s = load_settings()
    assert s.secret_key == "change-me"
    assert s.storage_backend == "memory"
    assert s.log_level == "DEBUG"
    assert s.env == "development"
    assert s.db_file == str(tmp_path / "db.json")


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("yes", True), ("0", False), ("no", False)])
def test_seed_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("SEED_SAMPLE_DATA", raw)
    assert load_config()["SEED_SAMPLE_DATA"] is expected


def test_port_resolution(start_module):
    assert start_module._resolve_port(None) == start_module.DEFAULT_PORT
    assert start_module._resolve_port(" 9000 ") == 9000
    for bad in ("http", "0", "70000", "-1"):
        with pytest.raises(SystemExit):
            start_module._resolve_port(bad)
