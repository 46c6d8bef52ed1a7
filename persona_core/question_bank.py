from __future__ import annotations
import json, importlib.resources as ir
from typing import Dict, List
from .types import Question
TRAITS = ["E","O","C","A","N"]
TRAIT_LABELS: Dict[str, str] = {
    "E": "Extraversion",
    "O": "Openness",
    "C": "Conscientiousness",
    "A": "Agreeableness",
    "N": "Neuroticism",
}
SCALE = [1, 2, 3, 4, 5]
def load_bank() -> List[Question]:
    data = ir.files(__package__).joinpath("data/questions.json").read_text(encoding="utf-8")
    raw = json.loads(data)
    return [Question(**r) for r in raw]
QUESTIONS: tuple[Question, ...] = tuple(load_bank())
DEFAULT_QUESTION_ORDER: tuple[str, ...] = tuple(q.id for q in QUESTIONS)
QUESTION_BY_ID: Dict[str, Question] = {q.id: q for q in QUESTIONS}
