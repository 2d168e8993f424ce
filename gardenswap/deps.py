from typing import Callable

from fastapi import Depends, Request
from supabase import Client

from gardenswap.config.settings import Settings, get_settings
from gardenswap.services.onboarding_service import OnboardingService
from gardenswap.supabase import create_service_supabase


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_service_supabase(request: Request, settings: Settings) -> Client:
    """
    Service role client built once per process by the app lifespan.
    Built on first use if the lifespan did not run.
    """
    client = getattr(request.app.state, "service_supabase", None)
    if client is None:
        client = create_service_supabase(settings)
        request.app.state.service_supabase = client
    return client


def get_onboarding_service(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Callable[[], OnboardingService]:
    """
    Returns a provider: client construction happens inside the route,
    after payload validation.
    """
    def provide() -> OnboardingService:
        client = get_service_supabase(request, settings)
        return OnboardingService(client, rpc_name=settings.ONBOARD_RPC_NAME)

    return provide
