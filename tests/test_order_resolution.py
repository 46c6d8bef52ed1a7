from __future__ import annotations

import pytest

from persona_core.question_bank import DEFAULT_QUESTION_ORDER, QUESTIONS
from persona_core.shuffle import make_question_order, questions_from_order


def test_missing_or_empty_order_resolves_to_canonical():
    assert questions_from_order(None) == list(QUESTIONS)
    assert questions_from_order([]) == list(QUESTIONS)
    assert questions_from_order() == list(QUESTIONS)


@pytest.mark.parametrize(
    "order",
    [
        list(DEFAULT_QUESTION_ORDER)[:24],
        list(DEFAULT_QUESTION_ORDER) + ["E1"],
        ["X9"] + list(DEFAULT_QUESTION_ORDER)[1:],
        ["E1"] * 25,
        [1] * 25,
        "E1" * 25,
        {"order": list(DEFAULT_QUESTION_ORDER)},
        42,
    ],
    ids=["short", "long", "unknown_id", "duplicates", "not_strings", "string", "dict", "int"],
)
def test_corrupted_order_falls_back_to_canonical(order):
    assert questions_from_order(order) == list(QUESTIONS)


def test_valid_order_resolves_in_given_sequence():
    order = make_question_order("abc", 2)
    resolved = questions_from_order(order)
    assert [q.id for q in resolved] == order

    reversed_ids = list(reversed(DEFAULT_QUESTION_ORDER))
    assert [q.id for q in questions_from_order(reversed_ids)] == reversed_ids


def test_tuple_orders_are_accepted():
    order = tuple(reversed(DEFAULT_QUESTION_ORDER))
    assert [q.id for q in questions_from_order(order)] == list(order)


def test_resolution_does_not_mutate_input():
    order = make_question_order("keep", 2)
    snapshot = list(order)
    questions_from_order(order)
    assert order == snapshot
