"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import timezone, tzinfo
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting the ledger backend and tenant context.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        json_file: Optional path to a JSON ledger export.
        timezone_name: IANA zone used for period boundaries.
        tenant_id: Tenant used by the CLIs and the dashboard.
    """

    backend: str = "sqlalchemy"
    json_file: Optional[Path] = None
    timezone_name: str = "UTC"
    tenant_id: str = "default"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("LEDGER_BACKEND", "sqlalchemy").strip().lower()
        raw_json = os.getenv("LEDGER_JSON_FILE")
        logger = get_app_logger()
        if raw_json:
            json_file = cls._normalize_path(raw_json, logger=logger)
        else:
            json_file = cls._default_json_file(logger=logger)
        timezone_name = os.getenv("LEDGER_TIMEZONE", "UTC").strip() or "UTC"
        tenant_id = (
            os.getenv("LEDGER_TENANT_ID", "default").strip() or "default"
        )
        return cls(
            backend=backend,
            json_file=json_file,
            timezone_name=timezone_name,
            tenant_id=tenant_id,
        )

    @property
    def tz(self) -> tzinfo:
        """Return the configured time zone, falling back to UTC."""
        if self.timezone_name.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(self.timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            get_app_logger().warning(
                f"Unknown time zone {self.timezone_name!r}; using UTC"
            )
            return timezone.utc

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the JSON ledger path.

        Args:
            raw_path: Raw file path string or ``file://`` URI.
            logger: Logger used for warnings.

        Returns:
            Path: Normalized filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger JSON file does not exist at {path}")
        return path

    @staticmethod
    def _default_json_file(logger) -> Path | None:
        """Return a default JSON ledger path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set LEDGER_JSON_FILE to choose one."
            )
        return None


__all__ = ["LedgerSettings"]
