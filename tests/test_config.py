import json
import logging

from passutils import config
from passutils.config import DEFAULTS, config_path, load_config


def test_missing_file_gives_defaults(isolated_config):
    assert load_config() == DEFAULTS
    assert not isolated_config.exists()


def test_file_is_merged_over_defaults(isolated_config):
    isolated_config.write_text(json.dumps({"length": 24, "options": {"similar": False}}))
    cfg = load_config()
    assert cfg["length"] == 24
    assert cfg["copies"] == 1
    assert cfg["options"] == {"similar": False}


def test_explicit_path_wins(tmp_path, isolated_config):
    other = tmp_path / "other.json"
    other.write_text(json.dumps({"copies": 3}))
    assert load_config(str(other))["copies"] == 3


def test_malformed_file_logs_and_falls_back(isolated_config, caplog):
    isolated_config.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="passutils.config"):
        cfg = load_config()
    assert cfg == DEFAULTS
    assert "Ignoring" in caplog.text


def test_non_object_file_falls_back(isolated_config):
    isolated_config.write_text("[1, 2, 3]")
    assert load_config() == DEFAULTS


def test_defaults_are_not_shared(isolated_config):
    cfg = load_config()
    cfg["options"]["exclude"] = "abc"
    assert DEFAULTS["options"] == {}


def test_default_location(monkeypatch, tmp_path):
    monkeypatch.delenv("PASSUTILS_CONFIG", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr(config.os.path, "expanduser", lambda p: str(tmp_path))
    assert config_path() == str(tmp_path / ".passutils" / "config.json")


def test_appdata_location(monkeypatch, tmp_path):
    monkeypatch.delenv("PASSUTILS_CONFIG", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert config_path() == str(tmp_path / "passutils" / "config.json")
