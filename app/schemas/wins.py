from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Wire format is camelCase only; snake_case keys are ignored like any unknown field."""
    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")

class CheckInInput(CamelModel):
    went_well: str | None = None
    was_hard: str | None = None
    visible_win: str | None = None
    recognize_who: str | None = None
    outcome: str | None = None

class AnalyzeResult(BaseModel):
    summary: str
    # passed through exactly as the model produced them
    wins: list[Any]

class DraftWin(CamelModel):
    id: str | None = None
    title: str | None = None
    story: str | None = None
    evidence: str | None = None

class DraftRequest(CamelModel):
    win: DraftWin | None = None
    channel: str | None = None
    tone: str | None = None
    outcome: str | None = None
    recognize_who: str | None = None

class DraftResult(BaseModel):
    draft: str
