from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol, Union

from app.core.errors import WinValidationError
from app.schemas.wins import AnalyzeResult, CheckInInput, DraftRequest, DraftResult
from app.services.prompts import analyze_messages, draft_messages
from app.services.upstream import first_choice_content

log = logging.getLogger(__name__)

SUMMARY_PLACEHOLDER = "Summary unavailable."
ANALYZE_TEMPERATURE = 0.3
DRAFT_TEMPERATURE = 0.5
JSON_OBJECT = {"type": "json_object"}


class Upstream(Protocol):
    async def complete(
        self,
        model: str,
        messages: list[dict[str, str]],
        temperature: float = 0.4,
        response_format: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...


@dataclass(slots=True, frozen=True)
class JsonContent:
    value: Any

    def fields(self) -> dict[str, Any]:
        """Top-level keys when the model answered with an object; arrays and scalars carry none."""
        return self.value if isinstance(self.value, dict) else {}


@dataclass(slots=True, frozen=True)
class MalformedContent:
    """The model's reply could not be read as a JSON object; raw is kept for diagnostics."""
    raw: Any

    def diagnostic(self) -> str:
        text = "" if self.raw is None else str(self.raw)
        return f"Model did not return valid JSON:\n{text}"


ParsedContent = Union[JsonContent, MalformedContent]


def parse_json_content(raw: Any) -> ParsedContent:
    if not isinstance(raw, str):
        return MalformedContent(raw)
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return MalformedContent(raw)
    if value is None:
        # a literal null has nothing to default from
        return MalformedContent(raw)
    return JsonContent(value)


async def analyze_checkin(upstream: Upstream, model: str, payload: CheckInInput) -> AnalyzeResult | MalformedContent:
    """
    Summarize a weekly check-in and extract 1-3 wins.
    - Missing summary/wins in the model output are defaulted, not rejected.
    - Individual wins are passed through without shape checks.
    - Unparseable output comes back as MalformedContent carrying the raw text.
    """
    completion = await upstream.complete(
        model,
        analyze_messages(payload),
        temperature=ANALYZE_TEMPERATURE,
        response_format=JSON_OBJECT,
    )
    parsed = parse_json_content(first_choice_content(completion))
    if isinstance(parsed, MalformedContent):
        log.error("Analyze: model did not return a JSON object")
        return parsed

    data = parsed.fields()
    return AnalyzeResult(
        summary=data.get("summary") or SUMMARY_PLACEHOLDER,
        wins=data.get("wins") or [],
    )


def validate_draft_request(payload: DraftRequest) -> None:
    win = payload.win
    if win is None or not win.title or not win.story:
        raise WinValidationError()


async def draft_celebration(upstream: Upstream, model: str, payload: DraftRequest) -> DraftResult:
    """Write a ready-to-send celebration message for one win. Validates before any upstream call."""
    validate_draft_request(payload)
    completion = await upstream.complete(
        model,
        draft_messages(payload),
        temperature=DRAFT_TEMPERATURE,
    )
    content = first_choice_content(completion)
    draft = content.strip() if isinstance(content, str) else ""
    return DraftResult(draft=draft)
