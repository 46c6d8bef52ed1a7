# persona_core/levels.py
import math
from . import config

def pct(value: float) -> int:
    v = float(value)
    return max(0, min(100, int(math.floor(v + 0.5))))  # half-up, not banker's

def level_key(value: float) -> str:
    x = pct(value)
    if x <= config.LEVEL_LOW_MAX: return "low"
    if x <= config.LEVEL_MEDIUM_MAX: return "medium"
    return "high"
