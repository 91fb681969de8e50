"""Runtime settings loaded once from the process environment.

`DATABASE_URL` and `API_SECRET_KEY` are synced into the Pod by External
Secrets. Their absence is an expected state ("not configured"), so neither is
required here; handlers only ever report whether they are present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "index.html"

NOT_CONFIGURED = "NOT CONFIGURED"


def _env(name: str, default: str) -> str:
    # empty values fall back too, e.g. `VERSION=` in a ConfigMap
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Immutable service settings shared by every handler."""

    host: str = "0.0.0.0"
    port: int = 8080
    version: str = "1.0.0"
    environment: str = "unknown"
    database_url: str = field(default="", repr=False)
    api_secret_key: str = field(default="", repr=False)
    log_level: str = "INFO"
    metrics_enabled: bool = True
    landing_template_path: Optional[Path] = DEFAULT_TEMPLATE_PATH

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from process env with deterministic defaults."""
        port_raw = _env("PORT", str(cls.port))
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_raw!r}") from None

        return cls(
            host=_env("HOST", cls.host),
            port=port,
            version=_env("VERSION", cls.version),
            environment=_env("ENVIRONMENT", cls.environment),
            database_url=os.getenv("DATABASE_URL", ""),
            api_secret_key=os.getenv("API_SECRET_KEY", ""),
            log_level=_env("LOG_LEVEL", cls.log_level),
            metrics_enabled=_env_bool("METRICS_ENABLED", cls.metrics_enabled),
            landing_template_path=Path(
                _env("LANDING_TEMPLATE_PATH", str(DEFAULT_TEMPLATE_PATH))
            ),
        )

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def api_key_configured(self) -> bool:
        return bool(self.api_secret_key)

    def secrets_summary(self) -> Dict[str, str]:
        """Report which secrets are present without exposing their values."""
        return {
            "database": "connected" if self.database_configured else NOT_CONFIGURED,
            "apiKey": "configured" if self.api_key_configured else NOT_CONFIGURED,
        }
