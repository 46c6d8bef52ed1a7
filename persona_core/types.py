from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Optional, Literal
Trait = Literal["E","O","C","A","N"]
ProfileId = Literal[
    "P01","P02","P03","P04","P05","P06","P07","P08",
    "P09","P10","P11","P12","P13","P14","P15","P16",
]
StressKey = Literal["sensitive","steady"]
SubtypeKey = Literal["open_warm","open_direct","grounded_warm","grounded_direct"]
ModeKey = Literal["structured_outgoing","structured_reserved","flexible_outgoing","flexible_reserved"]
@dataclass(frozen=True)
class Question:
    id: str; trait: Trait
    reverse: bool = False
    text: str = ""
@dataclass
class AddOns:
    stress_key: StressKey
    subtype_key: SubtypeKey
    mode_key: ModeKey
    def to_dict(self) -> Dict[str, str]:
        return {"stressKey": self.stress_key, "subtypeKey": self.subtype_key, "modeKey": self.mode_key}
@dataclass
class StoredResult:
    version: str
    created_at: str
    answers: List[int]
    question_order: List[str]
    scores: Dict[str, float]
    stability: float
    type_code: ProfileId
    add_ons: AddOns
    type_name: Optional[str] = None
    type_description: Optional[str] = None
    def to_dict(self) -> Dict[str, object]:
        """camelCase payload persisted by the storage layer."""
        out: Dict[str, object] = {
            "version": self.version,
            "createdAt": self.created_at,
            "answers": list(self.answers),
            "questionOrder": list(self.question_order),
            "scores": dict(self.scores),
            "stability": self.stability,
            "typeCode": self.type_code,
            "addOns": self.add_ons.to_dict(),
        }
        if self.type_name is not None:
            out["typeName"] = self.type_name
        if self.type_description is not None:
            out["typeDescription"] = self.type_description
        return out
