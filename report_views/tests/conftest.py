"""
Shared fixtures: a visit log seeded with the sample visits and an API client.
"""

from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config.settings import Settings
from reports.sample_data import SAMPLE_BASE_URL, seed_sample_visits
from reports.visit_log import VisitLog
from web_app.api.server import create_app


SAMPLE_DAY = date(2013, 5, 10)

USERS = {
    'superUserLogin': 'superuser@example.org',
    'viewer': 'viewer@example.org',
}


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Cheapest bcrypt cost, the hashes are only checked in-process."""
    monkeypatch.setattr(Settings, 'BCRYPT_ROUNDS', 4)


@pytest.fixture
def visit_log() -> VisitLog:
    """Visit log holding the sample sites and the 15 sample visits."""
    log = VisitLog()
    seed_sample_visits(log, day=SAMPLE_DAY)
    return log


@pytest.fixture
def sample_site(visit_log) -> int:
    """Id of the site that received the sample visits."""
    return 3


@pytest.fixture
def sample_day() -> date:
    return SAMPLE_DAY


@pytest.fixture
def base_url() -> str:
    return SAMPLE_BASE_URL


@pytest.fixture
def app(visit_log):
    return create_app(visit_log=visit_log, users=USERS)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac
