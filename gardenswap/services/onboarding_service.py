# gardenswap/services/onboarding_service.py

from typing import Any

from supabase import Client, PostgrestAPIError

from gardenswap.errors import ProcedureError
from gardenswap.schemas_pkg.onboarding import OnboardingRequest


class OnboardingService:
    """
    Hands an onboarding request to the transactional procedure.
    Account, location and membership rows are all created there.
    """

    def __init__(self, client: Client, rpc_name: str = "onboard_user_tx"):
        self.client = client
        self.rpc_name = rpc_name

    def onboard(self, request: OnboardingRequest) -> Any:
        try:
            response = self.client.rpc(self.rpc_name, request.to_rpc_params()).execute()
        except PostgrestAPIError as e:
            raise ProcedureError(e.message) from e

        return response.data
