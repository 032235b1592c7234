"""
Pytest configuration and shared fixtures for all tests.
"""
import json
import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("ROUTELLM_API_KEY", "test-routellm-key")

from app.core.config import Settings
from app.main import create_app
from tests.stubs import StubUpstream, completion_with


@pytest.fixture
def settings() -> Settings:
    return Settings(ROUTELLM_API_KEY="test-routellm-key", _env_file=None)


@pytest.fixture
def sample_wins() -> list[dict]:
    return [
        {
            "id": "w1",
            "title": "Onboarding pilot shipped",
            "story": "The team launched the new onboarding pilot for 40 hires.",
            "evidence": "Pilot went live on Monday with 40 participants.",
            "celebrationIdeas": ["Shout-out in all-hands", "Thank-you note to Priya"]
        }
    ]


@pytest.fixture
def analyze_completion(sample_wins) -> dict:
    return completion_with(json.dumps({
        "summary": "A strong week: the onboarding pilot launched.",
        "wins": sample_wins,
    }))


@pytest.fixture
def draft_completion() -> dict:
    return completion_with("  Huge thanks to the team for launching the pilot!  \n")


@pytest.fixture
def stub_upstream() -> StubUpstream:
    return StubUpstream(completion=completion_with("{}"))


@pytest.fixture
def sync_client(settings, stub_upstream) -> Generator[TestClient, None, None]:
    """Test client wired to the stub upstream; server errors come back as responses."""
    app = create_app(settings, upstream=stub_upstream)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def valid_draft_payload() -> dict:
    return {
        "win": {
            "id": "w1",
            "title": "Onboarding pilot shipped",
            "story": "The team launched the new onboarding pilot for 40 hires.",
            "evidence": "Pilot went live on Monday."
        },
        "channel": "email",
        "tone": "warm",
        "outcome": "Recognize the team's effort"
    }
