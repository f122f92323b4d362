"""Unit tests for contentsync.api.config."""

import json
from pathlib import Path

import pytest

from contentsync.api.config import ConfigError, ContentSyncConfig, SiteOptions
from contentsync.api.config.get_config_path import get_config_path
from contentsync.api.mapping.SyncMappingInput import SyncMappingInput


def test_site_options_defaults_from_root():
    site = SiteOptions(root_dir="/srv/site")
    assert site.src_dir == Path("/srv/site/src")
    assert site.public_dir == Path("/srv/site/public")
    assert site.content_dir == Path("/srv/site/src/content")


def test_site_options_explicit_dirs():
    site = SiteOptions(root_dir="/srv/site", src_dir="/srv/other/src", public_dir="/srv/static")
    assert site.content_dir == Path("/srv/other/src/content")
    assert site.public_dir == Path("/srv/static")


def test_site_options_requires_root():
    with pytest.raises(ValueError, match="root_dir is required"):
        SiteOptions(src_dir="/x")


def test_load_full_config(tmp_path):
    path = tmp_path / "contentsync.json"
    path.write_text(
        json.dumps(
            {
                "site": {"root_dir": str(tmp_path / "site")},
                "sync": ["/vault:/site/src/content", {"source": "/other", "ignored": ["*.tmp"]}],
                "watch": {"initial_sync": False, "polling": True},
                "log": {"level": "DEBUG"},
            }
        ),
        encoding="utf-8",
    )

    config = ContentSyncConfig.load(path)

    assert config.sync[0] == "/vault:/site/src/content"
    assert config.sync[1] == SyncMappingInput(source="/other", ignored=["*.tmp"])
    assert config.watch.initial_sync is False
    assert config.watch.polling is True
    assert config.watch.delete_on_unlink_dir is False
    assert config.log.level == "DEBUG"


def test_load_defaults(tmp_path):
    path = tmp_path / "contentsync.json"
    path.write_text(json.dumps({"site": {"root_dir": str(tmp_path)}}), encoding="utf-8")

    config = ContentSyncConfig.load(path)

    assert config.sync == []
    assert config.watch.initial_sync is True
    assert config.log.level == "INFO"


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Configuration file not found"):
        ContentSyncConfig.load(tmp_path / "nope.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "contentsync.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        ContentSyncConfig.load(path)


def test_load_validation_error_names_field(tmp_path):
    path = tmp_path / "contentsync.json"
    path.write_text(json.dumps({"site": {"root_dir": "/x"}, "log": {"level": "LOUD"}}), encoding="utf-8")
    with pytest.raises(ConfigError, match="log.level"):
        ContentSyncConfig.load(path)


def test_config_path_precedence(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_config_path() == tmp_path / "contentsync.json"

    monkeypatch.setenv("CONTENTSYNC_CONFIG", str(tmp_path / "env.json"))
    assert get_config_path() == tmp_path / "env.json"
    assert get_config_path(tmp_path / "explicit.json") == tmp_path / "explicit.json"
