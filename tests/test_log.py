"""Tests for settings-driven logging configuration."""

import logging

import pytest

from careerpilot.log import configure_logging, get_logger, log_file_path, parse_flag


def _log_files_under(directory) -> list[str]:
    return [
        h.baseFilename for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler) and h.baseFilename.startswith(str(directory))
    ]


@pytest.fixture
def restore_logging():
    yield
    configure_logging({"logging": {"level": "INFO", "file": False}})


class TestConfigureLogging:

    def test_file_handler_follows_settings(self, tmp_path, restore_logging):
        configure_logging({"logging": {"level": "DEBUG", "dir": str(tmp_path), "file": True}})
        get_logger("careerpilot.tests").debug("written to the daily file")

        assert logging.getLogger().level == logging.DEBUG
        assert "written to the daily file" in log_file_path(tmp_path).read_text(encoding="utf-8")

    def test_reconfigure_replaces_file_handler(self, tmp_path, restore_logging):
        first, second = tmp_path / "a", tmp_path / "b"
        configure_logging({"logging": {"dir": str(first), "file": True}})
        configure_logging({"logging": {"dir": str(second), "file": True}})

        assert _log_files_under(tmp_path) == [str(log_file_path(second))]

    def test_file_disabled(self, tmp_path, restore_logging):
        configure_logging({"logging": {"dir": str(tmp_path / "off"), "file": False}})

        assert not (tmp_path / "off").exists()
        assert _log_files_under(tmp_path) == []

    def test_unknown_level_defaults_to_info(self, restore_logging):
        configure_logging({"logging": {"level": "chatty", "file": False}})
        assert logging.getLogger().level == logging.INFO


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("true", True), ("On", True), (True, True),
    ("0", False), ("no", False), (False, False),
])
def test_parse_flag(value, expected):
    assert parse_flag(value) is expected


def test_parse_flag_rejects_garbage():
    with pytest.raises(ValueError):
        parse_flag("sometimes")
