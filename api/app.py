from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, StrictInt
import logging, typing as t

# ---- Core imports ----
from persona_core.config import ALLOWED_ORIGINS, MAX_SAME_TRAIT_IN_ROW, RESULT_VERSION
from persona_core.question_bank import QUESTIONS, TRAIT_LABELS, SCALE
from persona_core.shuffle import make_question_order, new_seed, questions_from_order
from persona_core.scoring import compute_result
from persona_core.report_html import render_report_html
from persona_core.profiles import display_rows
from persona_core.validators import is_complete_answers, is_result_shape, is_valid_order

log = logging.getLogger(__name__)

app = FastAPI(title="Personality Test API")

@app.get("/")
def root():
    return {"status": "ok", "service": "personality-test-api"}

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class OrderReq(BaseModel):
    seed: str | None = None
    max_same_trait_in_row: int = MAX_SAME_TRAIT_IN_ROW

class ResolveReq(BaseModel):
    order: list[str] | None = None

class ResultReq(BaseModel):
    answers: list[StrictInt]
    question_order: list[str] | None = None

class ReportReq(BaseModel):
    result: dict[str, t.Any]

# ---- Helpers ----
def _serialize_question(q) -> dict[str, t.Any]:
    return {
        "id": q.id,
        "trait": q.trait,
        "reverse": q.reverse,
        "text": q.text,
    }

# ---- Health ----
@app.get("/health")
def health():
    return {
        "result_version": RESULT_VERSION,
        "questions": len(QUESTIONS),
        "max_same_trait_in_row": MAX_SAME_TRAIT_IN_ROW,
    }

# ---- Questions & ordering ----
@app.get("/questions")
def questions():
    return {
        "questions": [_serialize_question(q) for q in QUESTIONS],
        "traits": TRAIT_LABELS,
        "scale": SCALE,
    }

@app.post("/order")
def order(req: OrderReq | None = None):
    req = req or OrderReq()
    if req.max_same_trait_in_row < 0:
        raise HTTPException(422, "max_same_trait_in_row must be >= 0")
    seed = req.seed if req.seed is not None else new_seed()
    return {"seed": seed, "order": make_question_order(seed, req.max_same_trait_in_row)}

@app.post("/order/resolve")
def resolve(req: ResolveReq):
    valid = is_valid_order(req.order)
    if not valid:
        log.info("resolve: stored order invalid, returning canonical order")
    return {"valid": valid, "questions": [_serialize_question(q) for q in questions_from_order(req.order)]}

# ---- Scoring ----
@app.post("/result")
def result(req: ResultReq):
    if not is_complete_answers(req.answers):
        raise HTTPException(422, f"answers must hold {len(QUESTIONS)} values in 1..5")
    res = compute_result(req.answers, req.question_order).to_dict()
    return {**res, "display": display_rows(res["scores"])}

@app.post("/report/html")
def report_html(req: ReportReq):
    if not is_result_shape(req.result):
        raise HTTPException(422, "result payload has an unexpected shape")
    return {"html": render_report_html(req.result)}
