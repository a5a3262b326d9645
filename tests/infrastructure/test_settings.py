"""Tests for infrastructure settings."""

from datetime import timezone
from pathlib import Path
from unittest.mock import MagicMock

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


def _no_dotenv(monkeypatch) -> None:
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)


def test_from_env_defaults(monkeypatch, tmp_path: Path) -> None:
    """Without env vars the SQL backend, UTC and default tenant apply."""
    _no_dotenv(monkeypatch)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in (
        "LEDGER_BACKEND",
        "LEDGER_JSON_FILE",
        "LEDGER_TIMEZONE",
        "LEDGER_TENANT_ID",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = LedgerSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.json_file is None
    assert settings.tenant_id == "default"
    assert settings.tz is timezone.utc


def test_from_env_reads_json_backend(monkeypatch, tmp_path: Path) -> None:
    """File paths and file:// URIs resolve to Path instances."""
    _no_dotenv(monkeypatch)
    ledger_file = tmp_path / "ledger.json"
    ledger_file.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("LEDGER_BACKEND", " JSON ")
    monkeypatch.setenv("LEDGER_JSON_FILE", f"file://{ledger_file}")
    monkeypatch.setenv("LEDGER_TENANT_ID", "tenant-42")

    settings = LedgerSettings.from_env()

    assert settings.backend == "json"
    assert settings.json_file == ledger_file.resolve()
    assert settings.tenant_id == "tenant-42"


def test_default_json_file_requires_single_match(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """A lone export under data/ is picked; several are ambiguous."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "one.json").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    class _Logger:
        def __init__(self) -> None:
            self.messages: list[str] = []

        def warning(self, msg: str) -> None:
            self.messages.append(msg)

    logger = _Logger()
    assert LedgerSettings._default_json_file(logger) == (
        data_dir / "one.json"
    ).resolve()

    (data_dir / "two.json").write_text("{}", encoding="utf-8")
    assert LedgerSettings._default_json_file(logger) is None
    assert "LEDGER_JSON_FILE" in logger.messages[0]


def test_tz_falls_back_to_utc_for_unknown_zone(monkeypatch) -> None:
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)

    settings = LedgerSettings(timezone_name="Mars/Olympus_Mons")

    assert settings.tz is timezone.utc
    fake_logger.warning.assert_called_once()


def test_tz_resolves_iana_zone() -> None:
    settings = LedgerSettings(timezone_name="Asia/Colombo")

    assert str(settings.tz) == "Asia/Colombo"
