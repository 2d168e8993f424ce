from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional


REQUIRED_WIRE_FIELDS = ("userId", "accountName", "fullName", "locationLabel")


# -------------------------
# POST /api/onboard request
# -------------------------
class OnboardingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: str = Field(..., alias="userId", min_length=1)
    account_name: str = Field(..., alias="accountName", min_length=1)
    full_name: str = Field(..., alias="fullName", min_length=1)
    location_label: str = Field(..., alias="locationLabel", min_length=1)
    city: Optional[str] = None
    region: Optional[str] = None
    lat: Optional[float] = Field(None, allow_inf_nan=False)
    lng: Optional[float] = Field(None, allow_inf_nan=False)

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def blank_coordinate_is_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_rpc_params(self) -> dict:
        """Parameter names expected by the onboard procedure."""
        return {
            "p_user_id": self.user_id,
            "p_account_name": self.account_name,
            "p_full_name": self.full_name,
            "p_location_label": self.location_label,
            "p_city": self.city,
            "p_region": self.region,
            "p_lat": self.lat,
            "p_lng": self.lng,
        }


# -------------------------
# Responses
# -------------------------
class OnboardingResponse(BaseModel):
    ok: bool = True
    result: Any = None


class ErrorResponse(BaseModel):
    error: str
