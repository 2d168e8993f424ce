"""
Client-side signup flow: the form, the step machine and the two
remote calls it sequences.
"""
from .controller import SignupController, SignupForm
from .gateway_client import OnboardingGatewayClient
from .state import Event, InvalidTransition, Step, transition

__all__ = [
    "Event",
    "InvalidTransition",
    "OnboardingGatewayClient",
    "SignupController",
    "SignupForm",
    "Step",
    "transition",
]
