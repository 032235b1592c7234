import json

from app.schemas.wins import CheckInInput, DraftRequest

NOT_PROVIDED = "(not provided)"

ANALYZE_SYSTEM = (
  "You are a coaching assistant for an internal L&D leader (\"Josh\") at a large organization.\n"
  "Your job: detect concrete wins, capture evidence, and suggest simple celebration actions.\n"
  "Be practical, concise, and human. Do NOT invent facts. Use only the user's input.\n"
  "Return STRICT JSON only that matches the schema requested."
)

DRAFT_SYSTEM = (
  "You write celebration drafts for an L&D leader.\n"
  "Rules:\n"
  "- Use the details provided; do not add names, metrics, or claims not present.\n"
  "- Keep it ready-to-send.\n"
  "- Match the requested channel and tone.\n"
  "Return ONLY the draft text (no markdown fences)."
)

def render_checkin(payload: CheckInInput) -> str:
    """Indented JSON of the check-in; fields the user left out are omitted, not nulled."""
    return json.dumps(payload.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False)

def analyze_messages(payload: CheckInInput) -> list[dict[str, str]]:
    user = (
      "Weekly check-in input (JSON):\n"
      f"{render_checkin(payload)}\n"
      "\n"
      "TASK:\n"
      "1) Write a 1-2 sentence summary.\n"
      "2) Extract 1 to 3 wins. Each win must have:\n"
      "- id (short string)\n"
      "- title (max 10 words)\n"
      "- story (1-2 sentences)\n"
      "- evidence (1 sentence, based on input)\n"
      "- celebrationIdeas (2-4 bullet items as strings; specific actions)"
    )
    return [
      {"role": "system", "content": ANALYZE_SYSTEM},
      {"role": "user", "content": user},
    ]

def draft_messages(payload: DraftRequest) -> list[dict[str, str]]:
    """Callers must have checked that payload.win carries a title and story."""
    win = payload.win
    user = (
      f"CHANNEL: {payload.channel or NOT_PROVIDED}\n"
      f"TONE: {payload.tone or NOT_PROVIDED}\n"
      f"OUTCOME: {payload.outcome or NOT_PROVIDED}\n"
      f"RECOGNIZE: {payload.recognize_who or NOT_PROVIDED}\n"
      "\n"
      "WIN:\n"
      f"Title: {win.title}\n"
      f"Story: {win.story}\n"
      f"Evidence: {win.evidence or ''}\n"
      "\n"
      "Write the draft now."
    )
    return [
      {"role": "system", "content": DRAFT_SYSTEM},
      {"role": "user", "content": user},
    ]
