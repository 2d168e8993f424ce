# gardenswap/supabase_http.py

from typing import Any, Dict, Optional

import httpx

from gardenswap.config.settings import PublicSettings
from gardenswap.errors import IdentityCreationError
from gardenswap.logging_config import get_logger

logger = get_logger(__name__)


def _error_message(res: httpx.Response) -> Optional[str]:
    try:
        data = res.json()
    except ValueError:
        return res.text or None

    if not isinstance(data, dict):
        return None

    # GoTrue has used all of these keys across versions
    for key in ("msg", "error_description", "message", "error"):
        if data.get(key):
            return str(data[key])
    return None


class SupabaseIdentityClient:
    """
    Creates auth identities through the Supabase Auth REST API,
    using only the public anon key.
    """

    def __init__(self, supabase_url: str, anon_key: str, http: httpx.AsyncClient):
        self.auth_url = f"{supabase_url.rstrip('/')}/auth/v1"
        self.headers = {
            "apikey": anon_key,
            "Authorization": f"Bearer {anon_key}",
            "Content-Type": "application/json",
        }
        self.http = http

    @classmethod
    def from_settings(cls, settings: PublicSettings, http: httpx.AsyncClient) -> "SupabaseIdentityClient":
        if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
            raise ValueError("Supabase URL and ANON key must be configured in settings")
        return cls(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY, http)

    async def create_user(
        self,
        email: str,
        password: str,
        profile_data: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Sign up a new user and return its id.
        Raises IdentityCreationError on any failure.
        """
        payload = {
            "email": email,
            "password": password,
            "data": profile_data or {},
        }

        try:
            res = await self.http.post(f"{self.auth_url}/signup", json=payload, headers=self.headers)
        except httpx.HTTPError as e:
            raise IdentityCreationError(str(e) or None) from e

        if res.status_code >= 400:
            raise IdentityCreationError(_error_message(res) or f"Sign up failed ({res.status_code})")

        try:
            data = res.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            raise IdentityCreationError("User not created.")

        # Session issued: {"access_token": ..., "user": {...}}
        # Confirmation pending: the user object itself
        user = data.get("user") if isinstance(data.get("user"), dict) else data
        user_id = user.get("id") if isinstance(user, dict) else None

        if not user_id:
            raise IdentityCreationError("User not created.")

        logger.info("identity_created", user_id=user_id)
        return user_id
