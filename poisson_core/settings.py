from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# Entropy: exact series below the threshold, asymptotic expansion at or above it.
ENTROPY_ASYMPTOTIC_MIN_LAMBDA = _env_float("POISSON_ENTROPY_ASYMPTOTIC_MIN_LAMBDA", 100.0)
# Upper edge of the exact series window, in standard deviations above the mean.
ENTROPY_TAIL_SDS = _env_float("POISSON_ENTROPY_TAIL_SDS", 40.0)

LOG_LEVEL = _env_str("POISSON_LOG_LEVEL", "INFO")
TABLE_MAX_ROWS = _env_int("POISSON_TABLE_MAX_ROWS", 200)
