from __future__ import annotations
import re
from typing import Dict, List, Mapping, Tuple

from . import config
from .levels import level_key, pct
from .question_bank import TRAIT_LABELS
from .types import ProfileId

AXES: tuple[str, ...] = ("SE", "ST", "OR", "SB")

# bits in AXES order, SE most significant; 1 = strictly above the midpoint.
PROFILE_TABLE: Dict[Tuple[int, int, int, int], ProfileId] = {
    (0, 0, 0, 0): "P01",
    (0, 0, 0, 1): "P02",
    (0, 0, 1, 0): "P03",
    (0, 0, 1, 1): "P04",
    (0, 1, 0, 0): "P05",
    (0, 1, 0, 1): "P06",
    (0, 1, 1, 0): "P07",
    (0, 1, 1, 1): "P08",
    (1, 0, 0, 0): "P09",
    (1, 0, 0, 1): "P10",
    (1, 0, 1, 0): "P11",
    (1, 0, 1, 1): "P12",
    (1, 1, 0, 0): "P13",
    (1, 1, 0, 1): "P14",
    (1, 1, 1, 0): "P15",
    (1, 1, 1, 1): "P16",
}
TYPE_CODES: List[str] = [f"P{i:02d}" for i in range(1, 17)]

_TYPE_CODE_RX = re.compile(r"^P(\d{2})$")

DISPLAY_ORDER: tuple[str, ...] = ("S", "E", "O", "C", "A", "N")
DISPLAY_LABELS: Dict[str, str] = {"S": "Emotional stability", **TRAIT_LABELS}
DISPLAY_NOTES: Dict[str, str] = {
    "S": "Shown as 100 minus Neuroticism.",
    "N": "Higher means more reactive to stress.",
}


def axis_bit(value: float) -> int:
    return 1 if value > config.MIDPOINT else 0


def profile_code(axes: Mapping[str, float]) -> ProfileId:
    bits = tuple(axis_bit(axes[name]) for name in AXES)
    return PROFILE_TABLE[bits]  # type: ignore[index]


def is_valid_type_code(code: object) -> bool:
    if not isinstance(code, str):
        return False
    m = _TYPE_CODE_RX.match(code)
    return bool(m) and 1 <= int(m.group(1)) <= 16


def avatar_index(code: str) -> int:
    """P01 -> 0 ... P16 -> 15; anything unparsable maps to 0."""
    try:
        n = int(str(code).replace("P", ""))
    except ValueError:
        return 0
    return max(0, min(15, n - 1))


def emotional_stability(scores: Mapping[str, float]) -> float:
    """Display value ``100 - N``. Not the stored ``stability`` (decisiveness)."""
    return 100.0 - float(scores["N"])


def display_rows(scores: Mapping[str, float]) -> List[Dict[str, object]]:
    """Rows in S, E, O, C, A, N order for the result page and the report."""
    values = dict(scores)
    values["S"] = emotional_stability(scores)
    rows: List[Dict[str, object]] = []
    for key in DISPLAY_ORDER:
        value = float(values[key])
        row: Dict[str, object] = {
            "key": key,
            "label": DISPLAY_LABELS[key],
            "value": value,
            "percent": pct(value),
            "level": level_key(value),
        }
        if key in DISPLAY_NOTES:
            row["note"] = DISPLAY_NOTES[key]
        rows.append(row)
    return rows
