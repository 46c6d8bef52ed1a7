from __future__ import annotations
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


RESULT_VERSION: str = "v1"

LIKERT_MIN: int = 1
LIKERT_MAX: int = 5

MAX_SAME_TRAIT_IN_ROW: int = 2
ORDER_MAX_ATTEMPTS: int = 8

MIDPOINT: float = 50.0
NEUTRAL_SCORE: float = 50.0

LEVEL_LOW_MAX: int = 33
LEVEL_MEDIUM_MAX: int = 66

AUDIT_SAMPLE_SEEDS: int = 500

DEBUG_TRACE: bool = False

ALLOWED_ORIGINS: list[str] = [
    "http://localhost:3000",
]

# // env overrides for staging/ops; scoring constants are fixed.
MAX_SAME_TRAIT_IN_ROW = max(0, _env_int("MAX_SAME_TRAIT_IN_ROW", MAX_SAME_TRAIT_IN_ROW))
ORDER_MAX_ATTEMPTS = max(1, _env_int("ORDER_MAX_ATTEMPTS", ORDER_MAX_ATTEMPTS))
NEUTRAL_SCORE = _env_float("NEUTRAL_SCORE", NEUTRAL_SCORE)
AUDIT_SAMPLE_SEEDS = max(1, _env_int("AUDIT_SAMPLE_SEEDS", AUDIT_SAMPLE_SEEDS))
DEBUG_TRACE = _env_bool("DEBUG_TRACE", DEBUG_TRACE)
ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS", ALLOWED_ORIGINS)
