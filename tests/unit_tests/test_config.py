"""
Settings and destination selection tests.
"""

from __future__ import annotations

import re
from datetime import datetime

import pytest
from pydantic import ValidationError

from logplus.config import LoggingSettings, LogLevel
from logplus.destinations import (
    Console,
    Rotating,
    SingleFile,
    default_file_path,
    destination_from_mode,
)
from logplus.exceptions import DestinationError, LogplusError

DEFAULT_PATH = re.compile(r"^\./logs/\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.log$")


class TestDestinationFromMode:
    """Mode string -> tagged destination"""

    def test_console(self) -> None:
        assert destination_from_mode("console", "ignored.log") == Console()

    def test_file_with_path(self) -> None:
        assert destination_from_mode("file", "out/app.log") == SingleFile(path="out/app.log")

    def test_rolling_uses_fixed_policy(self) -> None:
        dest = destination_from_mode("rolling", "out/app.log")
        assert dest == Rotating(path="out/app.log")
        policy = dest.policy()
        assert (policy.max_age_days, policy.max_backups, policy.max_size_mb) == (1, 30, 100)
        assert policy.compress is False
        assert policy.max_bytes == 100 * 1024 * 1024

    @pytest.mark.parametrize("mode", ["file", "rolling"])
    def test_empty_path_defaults_to_timestamped_file(self, mode: str) -> None:
        dest = destination_from_mode(mode, "", now=datetime(2024, 1, 15, 10, 30, 5))
        assert dest.path == "./logs/2024-01-15_10-30-05.log"

    def test_default_path_uses_current_time(self) -> None:
        assert DEFAULT_PATH.match(default_file_path())

    def test_unknown_mode(self) -> None:
        with pytest.raises(DestinationError) as exc_info:
            destination_from_mode("syslog")
        assert exc_info.value.mode == "syslog"
        assert isinstance(exc_info.value, LogplusError)
        assert isinstance(exc_info.value, ValueError)


class TestLoggingSettings:
    """pydantic-settings surface"""

    def test_defaults(self) -> None:
        settings = LoggingSettings()
        assert settings.service_name == "app"
        assert settings.mode == "console"
        assert settings.file_path == ""
        assert settings.level is LogLevel.INFO
        assert settings.destination() == Console()

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("LOGPLUS_SERVICE_NAME", "billing")
        monkeypatch.setenv("LOGPLUS_MODE", "file")
        monkeypatch.setenv("LOGPLUS_FILE_PATH", "var/billing.log")
        monkeypatch.setenv("LOGPLUS_LEVEL", "debug")
        settings = LoggingSettings()
        assert settings.service_name == "billing"
        assert settings.level is LogLevel.DEBUG
        assert settings.destination() == SingleFile(path="var/billing.log")

    @pytest.mark.parametrize("raw", ["DEBUG", "debug", " Debug "])
    def test_level_is_case_insensitive(self, monkeypatch, raw: str) -> None:
        monkeypatch.setenv("LOGPLUS_LEVEL", raw)
        assert LoggingSettings().level is LogLevel.DEBUG

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")

    def test_reads_dotenv(self, isolated_workdir) -> None:
        (isolated_workdir / ".env").write_text("LOGPLUS_SERVICE_NAME=from_dotenv\n", encoding="utf-8")
        assert LoggingSettings().service_name == "from_dotenv"

    def test_invalid_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(mode="syslog")

    def test_frozen(self) -> None:
        settings = LoggingSettings(service_name="svc")
        with pytest.raises(ValidationError):
            settings.service_name = "other"
