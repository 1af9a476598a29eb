"""Tests for configuration loading and persistence."""

import json

from services.config_manager import DEFAULT_CONFIG, ConfigManager


def test_defaults_without_config_file(config_dir):
    manager = ConfigManager.get_instance()

    assert manager.config_file == config_dir / "config.json"
    assert manager.get_config() == DEFAULT_CONFIG
    assert manager.get_setting("diff", "maxTokens") == 50_000


def test_singleton(config_dir):
    assert ConfigManager.get_instance() is ConfigManager.get_instance()


def test_file_values_merge_over_defaults(config_dir):
    (config_dir / "config.json").write_text(json.dumps({"hash": {"maxUploadBytes": 42}}))

    manager = ConfigManager.get_instance()

    assert manager.get_setting("hash", "maxUploadBytes") == 42
    assert manager.get_setting("diff", "maxTokens") == 50_000


def test_invalid_json_falls_back_to_defaults(config_dir):
    (config_dir / "config.json").write_text("{not json")

    assert ConfigManager.get_instance().get_config() == DEFAULT_CONFIG


def test_non_object_config_is_ignored(config_dir):
    (config_dir / "config.json").write_text("[1, 2]")

    assert ConfigManager.get_instance().get_config() == DEFAULT_CONFIG


def test_save_config_writes_file(config_dir):
    manager = ConfigManager.get_instance()
    manager.save_config({"diff": {"maxTokens": 10}})

    stored = json.loads((config_dir / "config.json").read_text())
    assert stored["diff"] == {"maxTokens": 10}

    ConfigManager.reset_instance()
    assert ConfigManager.get_instance().get_setting("diff", "maxTokens") == 10


def test_get_setting_defaults():
    manager = ConfigManager.get_instance()

    assert manager.get_setting("missing", "key", "fallback") == "fallback"
    assert manager.get_setting("diff", "missing") is None
    assert manager.get("server")["port"] == 8000


def test_default_config_is_not_shared():
    manager = ConfigManager.get_instance()
    config = manager.get_config()
    config["diff"]["maxTokens"] = 1

    assert DEFAULT_CONFIG["diff"]["maxTokens"] == 50_000
    assert manager.get_setting("diff", "maxTokens") == 50_000


def test_int_setting_coerces_hand_edited_strings(config_dir):
    (config_dir / "config.json").write_text(json.dumps({"diff": {"maxTokens": "2000"}}))

    assert ConfigManager.get_instance().get_int_setting("diff", "maxTokens", 7) == 2000


def test_int_setting_falls_back_on_unusable_values(config_dir):
    (config_dir / "config.json").write_text(
        json.dumps({"diff": {"maxTokens": "lots"}, "hash": {"maxUploadBytes": -1}, "logging": {"n": True}})
    )
    manager = ConfigManager.get_instance()

    assert manager.get_int_setting("diff", "maxTokens", 7) == 7
    assert manager.get_int_setting("hash", "maxUploadBytes", 9) == 9
    assert manager.get_int_setting("logging", "n", 3) == 3
    assert manager.get_int_setting("missing", "key", 5) == 5
