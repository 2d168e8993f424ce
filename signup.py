"""
Terminal signup front end.

Prompts for the signup form, then runs the same flow the web form does:
create the auth identity, then call POST /api/onboard.

    python signup.py --api-url http://localhost:8000/api/onboard
"""
import argparse
import asyncio
import getpass
import sys

import httpx
from dotenv import load_dotenv

from gardenswap.config.settings import get_public_settings
from gardenswap.signup import OnboardingGatewayClient, SignupController, SignupForm, Step
from gardenswap.signup.controller import DEFAULT_LOCATION_LABEL
from gardenswap.supabase_http import SupabaseIdentityClient


def prompt(label: str, default: str = "", secret: bool = False) -> str:
    suffix = f" [{default}]" if default else ""
    reader = getpass.getpass if secret else input
    value = reader(f"{label}{suffix}: ")
    return value or default


def read_form() -> SignupForm:
    return SignupForm(
        email=prompt("Email *"),
        password=prompt("Password *", secret=True),
        full_name=prompt("Full name *"),
        account_name=prompt("Account name *"),
        location_label=prompt("Location label *", DEFAULT_LOCATION_LABEL),
        city=prompt("City"),
        region=prompt("Region / State"),
        lat=prompt("Latitude"),
        lng=prompt("Longitude"),
    )


def render(controller: SignupController):
    print(f"  -> {controller.button_label}")
    if controller.error:
        print(f"  ! {controller.error}", file=sys.stderr)


async def run(api_url: str) -> int:
    settings = get_public_settings()
    if api_url:
        settings = settings.model_copy(update={"ONBOARD_API_URL": api_url})

    async with httpx.AsyncClient() as http:
        controller = SignupController(
            identity=SupabaseIdentityClient.from_settings(settings, http),
            gateway=OnboardingGatewayClient.from_settings(settings, http),
        )
        controller.add_listener(render)

        print("Create your garden swap account")
        step = await controller.submit(read_form())

    if step is Step.DONE:
        print(controller.success_message)
        return 0
    return 1


def main() -> None:
    parser = argparse.ArgumentParser(description="Garden Swap account signup")
    parser.add_argument(
        "--api-url",
        default="",
        help="Onboarding endpoint (defaults to ONBOARD_API_URL)",
    )
    args = parser.parse_args()

    load_dotenv()
    sys.exit(asyncio.run(run(args.api_url)))


if __name__ == "__main__":
    main()
