from __future__ import annotations

import logging
import os

from lens_ocr.domain.errors import ConfigurationError


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}.") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {raw!r}.")
    return value


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper() or default
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"{name} must be a logging level name, got {level!r}.")
    return level


LENS_UPLOAD_URL = os.getenv("LENS_UPLOAD_URL", "https://lens.google.com/v3/upload")
LENS_HANDSHAKE_URL = os.getenv("LENS_HANDSHAKE_URL", "https://lens.google.com/")
LENS_HANDSHAKE = os.getenv("LENS_HANDSHAKE", "0").strip().lower() in {"1", "true", "yes"}
LENS_TIMEOUT_SECONDS = _env_float("LENS_TIMEOUT_SECONDS", 20.0)
LENS_USER_AGENT = os.getenv(
    "LENS_USER_AGENT",
    "Mozilla/5.0 (Linux; Android 13; RMX3771) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.6167.144 Mobile Safari/537.36",
)
LENS_CONSENT_COOKIE = os.getenv(
    "LENS_CONSENT_COOKIE", "SOCS=CAESEwgDEgk0ODE3Nzk3MjQaAmVuIAEaBgiA_LyaBg"
)
LENS_LOG_LEVEL = _env_log_level("LENS_LOG_LEVEL", "WARNING")
