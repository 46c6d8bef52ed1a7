"""Seeded question ordering.

The hash/PRNG pair (xmur3 + mulberry32) follows the 32-bit browser arithmetic
bit for bit, and the bag shuffle and pick rule follow the client's steps, so
the id sequence for a seed is the one the web client produces whenever its
first constrained pass succeeds. Neither is cryptographic; the seed only
fixes the sequence.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, List, Optional, Sequence

from . import config
from .question_bank import QUESTIONS, QUESTION_BY_ID
from .types import Question

log = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def _utf16_units(text: str) -> List[int]:
    raw = text.encode("utf-16-le", errors="surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def xmur3(text: str) -> Callable[[], int]:
    units = _utf16_units(text)
    h = (1779033703 ^ len(units)) & _MASK32
    for code in units:
        h = _imul(h ^ code, 3432918353)
        h = ((h << 13) | (h >> 19)) & _MASK32

    def _next() -> int:
        nonlocal h
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h ^= h >> 16
        return h

    return _next


def mulberry32(seed: int) -> Callable[[], float]:
    state = seed & _MASK32

    def _next() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & _MASK32
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296

    return _next


def shuffle_in_place(items: list, rand: Callable[[], float]) -> list:
    for i in range(len(items) - 1, 0, -1):
        j = int(rand() * (i + 1))
        items[i], items[j] = items[j], items[i]
    return items


def max_trait_run(questions: Sequence[Question]) -> int:
    best = run = 0
    prev = None
    for q in questions:
        run = run + 1 if q.trait == prev else 1
        prev = q.trait
        best = max(best, run)
    return best


def violates_max_run(questions: Sequence[Question], max_same_trait_in_row: int) -> bool:
    if max_same_trait_in_row <= 0:
        return False
    return max_trait_run(questions) > max_same_trait_in_row


def _pick_index(bag: List[Question], out: List[Question]) -> int:
    if not out:
        return 0
    last = out[-1]
    last2 = out[-2] if len(out) > 1 else None
    # first entry that differs from the last trait or can still form a pair
    for idx, q in enumerate(bag):
        if q.trait != last.trait or last2 is None or last2.trait != q.trait:
            return idx
    return 0


def _greedy_order(rand: Callable[[], float]) -> List[Question]:
    bag = shuffle_in_place(list(QUESTIONS), rand)
    out: List[Question] = []
    while bag:
        out.append(bag.pop(_pick_index(bag, out)))
    return out


def make_question_order(seed: str, max_same_trait_in_row: int = config.MAX_SAME_TRAIT_IN_ROW) -> List[str]:
    """Return a reproducible permutation of the question ids for ``seed``.

    Runs of one trait never exceed ``max_same_trait_in_row`` unless every
    constrained attempt fails, in which case a plain shuffle from the same
    generator state is returned. ``0`` disables the check.
    """
    rand = mulberry32(xmur3(seed)())

    for attempt in range(config.ORDER_MAX_ATTEMPTS):
        out = _greedy_order(rand)
        if not violates_max_run(out, max_same_trait_in_row):
            if config.DEBUG_TRACE:
                log.info("trace seed=%r attempt=%d max_run=%d", seed, attempt, max_trait_run(out))
            return [q.id for q in out]
        log.debug("order attempt %d for seed %r exceeds run limit %d", attempt, seed, max_same_trait_in_row)

    log.debug("falling back to unconstrained shuffle for seed %r", seed)
    return [q.id for q in shuffle_in_place(list(QUESTIONS), rand)]


def questions_from_order(order: Optional[Iterable[str]] = None) -> List[Question]:
    """Resolve stored ids to questions; anything malformed yields declaration order."""
    if not isinstance(order, (list, tuple)) or len(order) != len(QUESTIONS):
        return list(QUESTIONS)

    mapped: List[Question] = []
    seen: set[str] = set()
    for qid in order:
        q = QUESTION_BY_ID.get(qid) if isinstance(qid, str) else None
        if q is None or qid in seen:
            log.debug("stored order rejected at id %r; using canonical order", qid)
            return list(QUESTIONS)
        seen.add(qid)
        mapped.append(q)
    return mapped


def new_seed() -> str:
    return str(uuid.uuid4())
