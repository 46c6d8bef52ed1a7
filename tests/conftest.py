from __future__ import annotations

import random

import pytest

from persona_core.question_bank import DEFAULT_QUESTION_ORDER


def build_answers(
    order: list[str] | tuple[str, ...] | None = None,
    *,
    values: dict[str, int] | None = None,
    default: int = 3,
) -> list[int]:
    """Answer vector aligned to ``order``; ``values`` maps question id -> answer."""

    target = list(order) if order is not None else list(DEFAULT_QUESTION_ORDER)
    picked = values or {}
    return [picked.get(qid, default) for qid in target]


def random_answers(seed: int, count: int = len(DEFAULT_QUESTION_ORDER)) -> list[int]:
    rng = random.Random(seed)
    return [rng.randint(1, 5) for _ in range(count)]


@pytest.fixture
def canonical_order() -> list[str]:
    return list(DEFAULT_QUESTION_ORDER)


@pytest.fixture
def fixed_created_at() -> str:
    return "2024-01-01T00:00:00+00:00"
