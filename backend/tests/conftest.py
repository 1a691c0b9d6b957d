"""Shared test fixtures.

Loads .env.test (if present) so tests run against the dev profile, and
provides a pinned clock plus an HTTP client bound to the FastAPI app.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@dataclass
class FixedClock:
    """IClock that always returns the same instant."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant


FIXED_INSTANT = datetime(2024, 5, 17, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to FIXED_INSTANT."""
    return FixedClock(FIXED_INSTANT)


@pytest.fixture(autouse=True)
def _reset_speaker_repository(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop the repository singleton and speaker env vars around each test.

    Tests that need a specific value set it with monkeypatch.setenv.
    """
    from infrastructure.speaker.repository_factory import reset_speaker_repository

    monkeypatch.delenv("SPEAKER_PROFILE", raising=False)
    monkeypatch.delenv("SPEAKER_SEED_NUMBER", raising=False)
    reset_speaker_repository()
    yield
    reset_speaker_repository()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport.
    """
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
