# gardenswap/routers/health.py
from fastapi import APIRouter, Depends

from gardenswap.config.settings import Settings
from gardenswap.deps import get_app_settings

router = APIRouter(tags=["Health"])


@router.get("")
def health(settings: Settings = Depends(get_app_settings)):
    return {"status": "ok", "service": settings.APP_NAME}
