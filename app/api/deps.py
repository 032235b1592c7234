from fastapi import Depends, Request
from app.core.config import Settings
from app.services.upstream import RouteLLMClient

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_upstream(request: Request) -> RouteLLMClient:
    return request.app.state.upstream

def Coach(settings: Settings = Depends(get_settings), upstream=Depends(get_upstream)):
    return {"upstream": upstream, "model": settings.ROUTELLM_MODEL}
