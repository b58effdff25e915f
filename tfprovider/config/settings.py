"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_REQUEST_TIMEOUT = 60
DEFAULT_LOG_LEVEL = "WARNING"


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                print(f"[settings] ✓ Loaded {secret_name} from /run/secrets")
                return secret_value
        except OSError as e:
            print(f"[settings] ✗ Failed to read /run/secrets/{secret_name}: {e}")

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value

    return None


@dataclass
class ProviderConfig:
    """Provider configuration container."""
    host: str
    token: str = ""
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def token_resolved(self) -> str:
        """Get the API token, falling back to Docker secrets then environment.

        Raises:
            ValueError: If no token is available
        """
        if self.token:
            return self.token

        secret = _load_secret_from_file("databricks_token", "DATABRICKS_TOKEN")
        if secret:
            return secret

        raise ValueError(
            "DATABRICKS_TOKEN not found. "
            "Provide it via Docker secrets (/run/secrets/databricks_token) or environment variable."
        )


def _int_from_env(var_name: str, default: int) -> int:
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable {var_name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"Environment variable {var_name} must be positive, got {value}")
    return value


def load_settings() -> ProviderConfig:
    """Load provider settings from environment and /run/secrets."""
    host = os.environ.get("DATABRICKS_HOST", "").strip().rstrip("/")
    if not host:
        raise RuntimeError("Environment variable DATABRICKS_HOST is required.")

    token = _load_secret_from_file("databricks_token", "DATABRICKS_TOKEN") or ""
    request_timeout = _int_from_env("DATABRICKS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
    log_level = os.environ.get("TF_PROVIDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL

    print(f"[settings] host={host}; timeout={request_timeout}s; token={'set' if token else 'missing'}")

    return ProviderConfig(
        host=host,
        token=token,
        request_timeout=request_timeout,
        log_level=log_level,
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Send provider logs to stderr at the given level."""
    resolved = (level or DEFAULT_LOG_LEVEL).upper()
    if resolved not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
