"""
Pytest fixtures: an in-memory app wired to fake providers.
"""

import os
import sys

import pytest

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from app import create_app
from config import Settings
from fakes import FakeCaptions, FakeGenerator, FakeVideoInfo
from models import TranscriptStore, db
from orchestrator import TranscriptOrchestrator
from providers import Providers


@pytest.fixture
def settings():
    return Settings(
        openai_api_key="test-key",
        database_url="sqlite:///:memory:",
        log_level="DEBUG",
    )


@pytest.fixture
def video_info():
    return FakeVideoInfo()


@pytest.fixture
def captions():
    return FakeCaptions(segments=["hello there", "general kenobi"])


@pytest.fixture
def generator():
    return FakeGenerator("A short summary.")


@pytest.fixture
def app(settings, video_info, captions, generator):
    app = create_app(settings, providers=Providers(video_info, captions, generator))
    app.config["TESTING"] = True
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield TranscriptStore(db.session)


@pytest.fixture
def orchestrator(settings, video_info, captions, generator, store):
    return TranscriptOrchestrator(settings, video_info, captions, generator, store)

