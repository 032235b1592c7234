from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from app.api.deps import Coach
from app.schemas.wins import AnalyzeResult, CheckInInput, DraftRequest, DraftResult
from app.services.coach import MalformedContent, analyze_checkin, draft_celebration

router = APIRouter(prefix="/api", tags=["wins"])

@router.post("/analyze", response_model=AnalyzeResult)
async def analyze(payload: CheckInInput | None = None, ctx=Depends(Coach)):
    # a missing or null body is an empty check-in
    result = await analyze_checkin(ctx["upstream"], ctx["model"], payload or CheckInInput())
    if isinstance(result, MalformedContent):
        return PlainTextResponse(result.diagnostic(), status_code=500)
    return result

@router.post("/draft", response_model=DraftResult)
async def draft(payload: DraftRequest | None = None, ctx=Depends(Coach)):
    return await draft_celebration(ctx["upstream"], ctx["model"], payload or DraftRequest())
