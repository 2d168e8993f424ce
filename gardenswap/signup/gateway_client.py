# gardenswap/signup/gateway_client.py

from typing import Any

import httpx

from gardenswap.config.settings import PublicSettings
from gardenswap.errors import GatewayError
from gardenswap.schemas_pkg.onboarding import OnboardingRequest


class OnboardingGatewayClient:
    """Browser-side caller of POST /api/onboard."""

    def __init__(self, api_url: str, http: httpx.AsyncClient):
        self.api_url = api_url
        self.http = http

    @classmethod
    def from_settings(cls, settings: PublicSettings, http: httpx.AsyncClient) -> "OnboardingGatewayClient":
        return cls(settings.ONBOARD_API_URL, http)

    async def onboard(self, request: OnboardingRequest) -> Any:
        """
        Send the request and return the procedure result.
        Raises GatewayError for any non-success response.
        """
        res = await self.http.post(
            self.api_url,
            json=request.model_dump(by_alias=True),
            headers={"Content-Type": "application/json"},
        )

        try:
            payload = res.json()
        except ValueError:
            raise GatewayError(status_code=res.status_code) from None

        if not isinstance(payload, dict):
            payload = {}

        if not res.is_success:
            raise GatewayError(payload.get("error"), status_code=res.status_code)

        return payload.get("result")
