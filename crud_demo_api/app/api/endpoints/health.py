"""
Health check endpoint.

``GET /api/`` returns a short status document useful for monitoring
and deployment verification.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...core.config import Settings
from ..deps import get_settings


router = APIRouter()


@router.get("/")
async def health_check(app_settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "success": True,
        "message": "App is running!",
        "environment": app_settings.environment,
        "appName": app_settings.app_name,
        "version": app_settings.api_version,
        "time": datetime.now(timezone.utc).isoformat(),
    }
