"""Test configuration and fixtures for API tests."""

import os
from collections.abc import AsyncGenerator

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# Override settings before importing app modules
os.environ["HTML_PARSER"] = "lxml"
os.environ["FRONTEND_URL"] = "http://localhost:3000"
os.environ["MAX_PAGE_SOURCE_LENGTH"] = "100000"

from formmapper.main import app
from formmapper.routes.mappings import get_session_store
from formmapper.services.sessions import SessionStore


@pytest.fixture
def session_store() -> SessionStore:
    """A fresh session store per test."""
    return SessionStore(max_sessions=10)


@pytest.fixture
def override_store(session_store: SessionStore):
    """Override the session store dependency."""
    app.dependency_overrides[get_session_store] = lambda: session_store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_store) -> TestClient:
    """Create a test client that keeps the session cookie between requests."""
    return TestClient(app)


@pytest.fixture
async def async_client(override_store) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def form_html() -> str:
    """A saved form page with one question of each answer shape."""
    return """
    <html>
        <body>
            <div role="list">
                <div role="listitem">
                    <div class="M7eMe">Name *</div>
                    <div role="textbox">Ada</div>
                </div>
                <div role="listitem">
                    <div class="M7eMe">Size</div>
                    <div role="radio" aria-checked="true" data-value="Medium"></div>
                    <div role="radio" aria-checked="false" data-value="Large"></div>
                </div>
                <div role="listitem">
                    <div class="M7eMe">Colours</div>
                    <div role="checkbox" aria-checked="true" data-value="Red"></div>
                    <div role="checkbox" aria-checked="true" data-value="Blue"></div>
                </div>
                <div role="listitem">
                    <div class="M7eMe">Email</div>
                    <div class="Mh5jwe JqSWld">ada@example.com</div>
                </div>
                <div role="listitem">
                    <div class="M7eMe"></div>
                    <div role="textbox">ignored</div>
                </div>
            </div>
        </body>
    </html>
    """
