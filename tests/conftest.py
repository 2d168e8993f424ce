"""Shared fixtures: an app wired to a fake onboarding procedure."""
from typing import Any, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from gardenswap.config.settings import Settings
from gardenswap.deps import get_onboarding_service
from gardenswap.main import create_app
from gardenswap.schemas_pkg.onboarding import OnboardingRequest


class FakeOnboardingService:
    """Stands in for the procedure call; records every request it gets."""

    def __init__(self, result: Any = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[OnboardingRequest] = []

    def onboard(self, request: OnboardingRequest) -> Any:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENVIRONMENT="test",
        APP_NAME="garden-swap-test",
        SUPABASE_URL=None,
        SUPABASE_SERVICE_ROLE_KEY=None,
        ALLOWED_ORIGINS=["http://localhost:3000"],
    )


@pytest.fixture
def fake_service() -> FakeOnboardingService:
    return FakeOnboardingService(result={"accountId": "a1"})


@pytest.fixture
def app(settings, fake_service):
    application = create_app(settings)
    application.dependency_overrides[get_onboarding_service] = lambda: (lambda: fake_service)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def valid_payload() -> dict:
    return {
        "userId": "u1",
        "accountName": "Nelson's Garden",
        "fullName": "Nelson Chen",
        "locationLabel": "Backyard",
        "city": "Irvine",
        "region": "CA",
        "lat": 33.6846,
        "lng": -117.8265,
    }

