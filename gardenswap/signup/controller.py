# gardenswap/signup/controller.py

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol

from gardenswap.errors import IdentityCreationError, SignupValidationError
from gardenswap.logging_config import get_logger
from gardenswap.schemas_pkg.onboarding import OnboardingRequest
from gardenswap.signup.state import BUTTON_LABELS, Event, Step, is_in_flight, transition

logger = get_logger(__name__)

DEFAULT_LOCATION_LABEL = "Home Garden"
MIN_PASSWORD_LENGTH = 6
SUCCESS_MESSAGE = "Account created! Check your email for a verification link."


class IdentityClient(Protocol):
    async def create_user(
        self, email: str, password: str, profile_data: Optional[Dict[str, Any]] = None
    ) -> str: ...


class GatewayClient(Protocol):
    async def onboard(self, request: OnboardingRequest) -> Any: ...


def parse_coordinate(text: str) -> Optional[float]:
    """Empty text means absent, never zero."""
    text = (text or "").strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        raise SignupValidationError("Latitude and longitude must be numbers.") from None
    if not math.isfinite(value):
        raise SignupValidationError("Latitude and longitude must be numbers.")
    return value


@dataclass
class SignupForm:
    """Raw text of the signup form, as typed."""

    email: str = ""
    password: str = ""
    full_name: str = ""
    account_name: str = ""
    location_label: str = DEFAULT_LOCATION_LABEL
    city: str = ""
    region: str = ""
    lat: str = ""
    lng: str = ""

    def validate(self):
        required = (self.email, self.password, self.full_name, self.account_name, self.location_label)
        if not all(required):
            raise SignupValidationError("Please fill all required fields.")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise SignupValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        parse_coordinate(self.lat)
        parse_coordinate(self.lng)

    def to_onboarding_request(self, user_id: str) -> OnboardingRequest:
        return OnboardingRequest(
            user_id=user_id,
            account_name=self.account_name,
            full_name=self.full_name,
            location_label=self.location_label,
            city=self.city or None,
            region=self.region or None,
            lat=parse_coordinate(self.lat),
            lng=parse_coordinate(self.lng),
        )


class SignupController:
    """
    Drives one signup form: identity creation first, then the onboarding
    gateway. A submit while either call is in flight is ignored.
    """

    def __init__(self, identity: IdentityClient, gateway: GatewayClient):
        self.identity = identity
        self.gateway = gateway
        self.step = Step.IDLE
        self.error: Optional[str] = None
        self.result: Any = None
        self._listeners: List[Callable[["SignupController"], None]] = []

    # -------------------------
    # UI surface
    # -------------------------
    @property
    def submit_disabled(self) -> bool:
        return is_in_flight(self.step)

    @property
    def button_label(self) -> str:
        return BUTTON_LABELS[self.step]

    @property
    def success_message(self) -> Optional[str]:
        return SUCCESS_MESSAGE if self.step is Step.DONE else None

    def add_listener(self, listener: Callable[["SignupController"], None]):
        """`listener(controller)` runs after every step change and error update."""
        self._listeners.append(listener)

    def _notify(self):
        for listener in self._listeners:
            listener(self)

    def _advance(self, event: Event):
        previous = self.step
        self.step = transition(self.step, event)
        logger.info("signup_step_changed", previous=previous.value, step=self.step.value)
        self._notify()

    # -------------------------
    # Submit
    # -------------------------
    async def submit(self, form: SignupForm) -> Step:
        if self.submit_disabled:
            return self.step

        self.error = None
        self.result = None

        try:
            form.validate()
        except SignupValidationError as e:
            self.error = e.message
            self._notify()
            return self.step

        try:
            self._advance(Event.SUBMIT)
            user_id = await self.identity.create_user(
                form.email,
                form.password,
                {"full_name": form.full_name},
            )
            if not user_id:
                raise IdentityCreationError("User not created.")

            self._advance(Event.USER_CREATED)
            self.result = await self.gateway.onboard(form.to_onboarding_request(user_id))
            self._advance(Event.ONBOARDED)

        except Exception as e:
            logger.error("signup_failed", step=self.step.value, exc_info=e)
            # A listener failing on `done` does not undo the signup
            if is_in_flight(self.step):
                self.error = getattr(e, "message", None) or str(e) or "Something went wrong"
                self._advance(Event.FAILED)

        return self.step
