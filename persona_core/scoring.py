from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Dict, Optional, Sequence, Tuple

from . import config
from .profiles import profile_code
from .question_bank import TRAITS
from .shuffle import questions_from_order
from .types import AddOns, ModeKey, Question, StoredResult, SubtypeKey

log = logging.getLogger(__name__)


def _clamp100(x: float) -> float:
    try:
        xf = float(x)
    except (TypeError, ValueError):
        return 0.0
    if xf < 0.0: return 0.0
    if xf > 100.0: return 100.0
    return xf


def _likert(value: object) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if config.LIKERT_MIN <= value <= config.LIKERT_MAX else None


def score_answer(question: Question, value: int) -> float:
    """Map a 1..5 answer onto 0..100, inverted for reverse-keyed questions."""
    span = config.LIKERT_MAX - config.LIKERT_MIN
    base = (value - config.LIKERT_MIN) / span * 100.0
    return _clamp100(100.0 - base if question.reverse else base)


def trait_scores(answers: Sequence[object], questions: Sequence[Question]) -> Dict[str, float]:
    sums = {t: 0.0 for t in TRAITS}
    counts = {t: 0 for t in TRAITS}
    skipped = 0
    for question, raw in zip(questions, answers):
        v = _likert(raw)
        if v is None:
            skipped += 1
            continue
        sums[question.trait] += score_answer(question, v)
        counts[question.trait] += 1
    if skipped:
        log.debug("skipped %d answers outside %d..%d", skipped, config.LIKERT_MIN, config.LIKERT_MAX)

    out: Dict[str, float] = {}
    for t in TRAITS:
        out[t] = _clamp100(sums[t] / counts[t]) if counts[t] else config.NEUTRAL_SCORE
    return out


def axes_from_scores(scores: Dict[str, float]) -> Dict[str, float]:
    return {
        "SE": scores["E"],
        "ST": scores["C"],
        "OR": (scores["A"] + (100.0 - scores["O"])) / 2.0,
        "SB": 100.0 - scores["N"],
    }


def stability_from_axes(axes: Dict[str, float]) -> float:
    """Mean distance of the axes from the midpoint.

    This measures how decisive the profile is, not how calm the person is;
    the calmness figure shown to users is ``profiles.emotional_stability``.
    """
    vals = [abs(v - config.MIDPOINT) for v in axes.values()]
    return _clamp100(sum(vals) / len(vals)) if vals else 0.0


def _cross(first: bool, second: bool, labels: Tuple[str, str, str, str]) -> str:
    if first:
        return labels[0] if second else labels[1]
    return labels[2] if second else labels[3]


def derive_add_ons(scores: Dict[str, float]) -> AddOns:
    stress = "sensitive" if scores["N"] >= config.MIDPOINT else "steady"
    subtype: SubtypeKey = _cross(  # type: ignore[assignment]
        scores["O"] >= config.MIDPOINT,
        scores["A"] >= config.MIDPOINT,
        ("open_warm", "open_direct", "grounded_warm", "grounded_direct"),
    )
    mode: ModeKey = _cross(  # type: ignore[assignment]
        scores["C"] >= config.MIDPOINT,
        scores["E"] >= config.MIDPOINT,
        ("structured_outgoing", "structured_reserved", "flexible_outgoing", "flexible_reserved"),
    )
    return AddOns(stress_key=stress, subtype_key=subtype, mode_key=mode)


def compute_result(
    answers: Sequence[object],
    question_order: Optional[Sequence[str]] = None,
    *,
    created_at: Optional[str] = None,
) -> StoredResult:
    """
    Score answers collected under ``question_order``.
    The order is resolved with ``questions_from_order`` so slot i is scored
    against the question that was actually shown at position i.
    """
    questions = questions_from_order(question_order)
    scores = trait_scores(answers, questions)
    axes = axes_from_scores(scores)
    return StoredResult(
        version=config.RESULT_VERSION,
        created_at=created_at or datetime.now(timezone.utc).isoformat(),
        answers=list(answers),  # type: ignore[arg-type]
        question_order=[q.id for q in questions],
        scores=scores,
        stability=stability_from_axes(axes),
        type_code=profile_code(axes),
        add_ons=derive_add_ons(scores),
    )
