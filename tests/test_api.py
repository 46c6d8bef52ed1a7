from __future__ import annotations

from fastapi.testclient import TestClient

from api.app import app
from persona_core.question_bank import DEFAULT_QUESTION_ORDER
from tests.conftest import build_answers


client = TestClient(app)


def test_root_and_health():
    assert client.get("/").json()["status"] == "ok"
    health = client.get("/health").json()
    assert health["questions"] == 25
    assert health["result_version"] == "v1"


def test_questions_listing():
    body = client.get("/questions").json()
    assert [q["id"] for q in body["questions"]] == list(DEFAULT_QUESTION_ORDER)
    assert sum(1 for q in body["questions"] if q["reverse"]) == 5
    assert body["scale"] == [1, 2, 3, 4, 5]
    assert set(body["traits"]) == {"E", "O", "C", "A", "N"}


def test_order_is_reproducible_for_a_seed():
    first = client.post("/order", json={"seed": "abc", "max_same_trait_in_row": 2})
    second = client.post("/order", json={"seed": "abc"})
    assert first.status_code == 200
    assert first.json()["order"] == second.json()["order"]
    assert sorted(first.json()["order"]) == sorted(DEFAULT_QUESTION_ORDER)


def test_order_generates_seed_when_missing():
    resp = client.post("/order")
    assert resp.status_code == 200
    body = resp.json()
    assert body["seed"]
    assert len(body["order"]) == 25

    again = client.post("/order", json={"seed": body["seed"]})
    assert again.json()["order"] == body["order"]


def test_order_rejects_negative_limit():
    resp = client.post("/order", json={"seed": "abc", "max_same_trait_in_row": -1})
    assert resp.status_code == 422


def test_resolve_falls_back_for_bad_order():
    resp = client.post("/order/resolve", json={"order": ["E1", "E2"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] is False
    assert [q["id"] for q in body["questions"]] == list(DEFAULT_QUESTION_ORDER)

    order = client.post("/order", json={"seed": "abc"}).json()["order"]
    ok = client.post("/order/resolve", json={"order": order}).json()
    assert ok["valid"] is True
    assert [q["id"] for q in ok["questions"]] == order


def test_result_requires_complete_answers():
    resp = client.post("/result", json={"answers": [3] * 24})
    assert resp.status_code == 422
    resp = client.post("/result", json={"answers": [3] * 24 + [9]})
    assert resp.status_code == 422


def test_result_uses_question_order():
    order = client.post("/order", json={"seed": "abc"}).json()["order"]
    answers = build_answers(order, values={"E1": 5, "E2": 5, "E3": 5, "E4": 5, "E5": 1})
    resp = client.post("/result", json={"answers": answers, "question_order": order})
    assert resp.status_code == 200
    body = resp.json()
    assert body["scores"]["E"] == 100.0
    assert body["typeCode"] == "P09"
    assert body["questionOrder"] == order
    assert [row["key"] for row in body["display"]] == ["S", "E", "O", "C", "A", "N"]


def test_report_html_roundtrip():
    result = client.post("/result", json={"answers": [1] * 25}).json()
    resp = client.post("/report/html", json={"result": result})
    assert resp.status_code == 200
    assert "P02" in resp.json()["html"]

    bad = client.post("/report/html", json={"result": {"typeCode": "P99"}})
    assert bad.status_code == 422


def test_report_html_rejects_damaged_add_ons():
    result = {
        "typeCode": "P01",
        "scores": {"E": 50, "O": 50, "C": 50, "A": 50, "N": 50},
        "stability": 0,
        "addOns": "x",
    }
    resp = client.post("/report/html", json={"result": result})
    assert resp.status_code == 422


def test_report_html_rejects_non_finite_scores():
    body = (
        '{"result": {"typeCode": "P01", "stability": 0, '
        '"scores": {"E": NaN, "O": 50, "C": 50, "A": 50, "N": Infinity}}}'
    )
    resp = client.post("/report/html", content=body, headers={"content-type": "application/json"})
    assert resp.status_code == 422


def test_result_rejects_bool_and_float_answers():
    resp = client.post("/result", json={"answers": [3] * 24 + [True]})
    assert resp.status_code == 422
    resp = client.post("/result", json={"answers": [3] * 24 + [3.0]})
    assert resp.status_code == 422
