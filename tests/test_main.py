"""
Unit tests for app.main module and error handlers.
"""
import pytest
from unittest.mock import Mock
import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.core.errors import ConfigurationError, UpstreamError, WinValidationError
from app.main import create_app
from app.services.upstream import RouteLLMClient


class TestCreateApp:
    """Test create_app function."""

    def test_create_app_returns_fastapi_instance(self, settings):
        app = create_app(settings)

        assert isinstance(app, FastAPI)
        assert app.title == "Wins Coach API"

    def test_create_app_builds_upstream_from_settings(self, settings):
        app = create_app(settings)

        assert app.state.settings is settings
        assert isinstance(app.state.upstream, RouteLLMClient)
        assert app.state.upstream.url == "https://routellm.abacus.ai/v1/chat/completions"

    def test_create_app_without_key_fails_fast(self, monkeypatch):
        monkeypatch.delenv("ROUTELLM_API_KEY", raising=False)
        monkeypatch.chdir("/")

        with pytest.raises(ConfigurationError):
            create_app()

    def test_app_includes_all_routers(self, settings):
        app = create_app(settings)
        paths = app.openapi()["paths"]

        assert "/health" in paths
        assert "post" in paths["/api/analyze"]
        assert "post" in paths["/api/draft"]

    def test_cors_is_the_outermost_user_middleware(self, settings):
        app = create_app(settings)

        assert app.user_middleware[0].cls is CORSMiddleware


class TestExceptionHandlers:
    """Test exception handlers."""

    def test_exception_handlers_registered(self, settings):
        app = create_app(settings)

        assert WinValidationError in app.exception_handlers
        assert UpstreamError in app.exception_handlers
        assert httpx.HTTPError in app.exception_handlers
        # unclassified errors are answered inside the CORS layer, not by ServerErrorMiddleware
        assert Exception not in app.exception_handlers

    @pytest.mark.asyncio
    async def test_win_validation_handler(self, settings):
        handler = create_app(settings).exception_handlers[WinValidationError]

        response = await handler(Mock(spec=Request), WinValidationError())

        assert response.status_code == 400
        assert response.body.decode() == "Missing win.title or win.story"

    @pytest.mark.asyncio
    async def test_upstream_error_handler(self, settings):
        handler = create_app(settings).exception_handlers[UpstreamError]

        response = await handler(Mock(spec=Request), UpstreamError(502, "bad gateway"))

        assert response.status_code == 500
        assert response.body.decode() == "RouteLLM error 502: bad gateway"
