from __future__ import annotations
import math
from typing import Any, List, Optional
from . import config
from .profiles import is_valid_type_code
from .question_bank import QUESTIONS, QUESTION_BY_ID, TRAITS
def _is_likert(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and config.LIKERT_MIN <= v <= config.LIKERT_MAX
def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
def is_complete_answers(answers: Any) -> bool:
    """Gate before scoring: exactly one valid answer per question."""
    return (isinstance(answers, list) and len(answers) == len(QUESTIONS)
            and all(_is_likert(v) for v in answers))
def normalize_answers(raw: Any, total: int = len(QUESTIONS)) -> Optional[List[int]]:
    """Restore an in-progress vector; invalid slots become 0 (unanswered)."""
    if not isinstance(raw, list) or len(raw) != total:
        return None
    return [v if _is_likert(v) else 0 for v in raw]
def first_unanswered(answers: List[int]) -> int:
    for idx, v in enumerate(answers):
        if not _is_likert(v): return idx
    return len(answers)
def is_valid_order(order: Any) -> bool:
    return (isinstance(order, list) and len(order) == len(QUESTIONS)
            and all(isinstance(qid, str) and qid in QUESTION_BY_ID for qid in order)
            and len(set(order)) == len(order))
def is_result_shape(payload: Any) -> bool:
    if not isinstance(payload, dict): return False
    scores = payload.get("scores")
    return (is_valid_type_code(payload.get("typeCode"))
            and isinstance(scores, dict)
            and all(_is_number(scores.get(t)) for t in TRAITS)
            and _is_number(payload.get("stability"))
            and isinstance(payload.get("addOns", {}), dict))
