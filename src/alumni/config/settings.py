"""Environment overrides for tunable knobs."""

from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

DEFENSE_CONTRIBUTORS_ENV = "ALUMNI_DEFENSE_CONTRIBUTORS"
HTTP_TIMEOUT_ENV = "ALUMNI_HTTP_TIMEOUT"
ASSET_BASE_URL_ENV = "ALUMNI_ASSET_BASE_URL"

DEFAULT_ASSET_BASE_URL = "https://github.com/nflverse/nflverse-data/releases/download"
_HTTP_TIMEOUT_DEFAULT = 30.0


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def defense_contributor_cap(default: int) -> int:
    return _env_int(DEFENSE_CONTRIBUTORS_ENV, default, min_value=1)


def http_timeout() -> float:
    return _env_float(HTTP_TIMEOUT_ENV, _HTTP_TIMEOUT_DEFAULT, clamp_min=1.0, clamp_max=300.0)


def asset_base_url() -> str:
    return os.getenv(ASSET_BASE_URL_ENV, DEFAULT_ASSET_BASE_URL).rstrip("/")
