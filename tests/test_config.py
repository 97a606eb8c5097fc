"""Unit tests for settings loading (defaults < YAML < environment)."""

import yaml

from careerpilot.config import DEFAULT_SETTINGS, get_env, load_settings


class TestLoadSettings:

    def test_defaults_when_file_missing(self, tmp_path):
        settings = load_settings(tmp_path / "missing.yaml")
        assert settings == DEFAULT_SETTINGS
        assert settings is not DEFAULT_SETTINGS

    def test_yaml_overrides_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"storage": {"backend": "file"}, "functions": {"url": "https://x.io"}}))

        settings = load_settings(path)

        assert settings["storage"]["backend"] == "file"
        assert settings["storage"]["dir"] == DEFAULT_SETTINGS["storage"]["dir"]
        assert settings["functions"]["url"] == "https://x.io"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"functions": {"url": "https://yaml.io"}}))
        monkeypatch.setenv("SUPABASE_URL", " https://env.io ")
        monkeypatch.setenv("FOLLOW_UP_PROBABILITY", "0.5")

        settings = load_settings(path)

        assert settings["functions"]["url"] == "https://env.io"
        assert settings["simulator"]["follow_up_probability"] == 0.5

    def test_invalid_env_value_is_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT", "soon")
        settings = load_settings(tmp_path / "missing.yaml")
        assert settings["functions"]["timeout"] == DEFAULT_SETTINGS["functions"]["timeout"]

    def test_unknown_section_ignored(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump({"mystery": {"a": 1}}))
        assert "mystery" not in load_settings(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_settings(path) == DEFAULT_SETTINGS

    def test_does_not_mutate_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CAREERPILOT_STORAGE", "file")
        load_settings(tmp_path / "missing.yaml")
        assert DEFAULT_SETTINGS["storage"]["backend"] == "memory"


def test_get_env_strips(monkeypatch):
    monkeypatch.setenv("SUPABASE_ANON_KEY", "  key \n")
    assert get_env("SUPABASE_ANON_KEY") == "key"
    assert get_env("NOT_SET_ANYWHERE", "fallback") == "fallback"


class TestLoggingSettings:

    def test_env_overrides_logging_section(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CAREERPILOT_LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setenv("CAREERPILOT_LOG_FILE", "0")

        settings = load_settings(tmp_path / "missing.yaml")

        assert settings["logging"] == {"level": "debug", "dir": str(tmp_path / "logs"), "file": False}

    def test_invalid_log_file_flag_is_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CAREERPILOT_LOG_FILE", "sometimes")
        assert load_settings(tmp_path / "missing.yaml")["logging"]["file"] is True
