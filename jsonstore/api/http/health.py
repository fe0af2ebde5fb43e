from datetime import datetime, timezone

from fastapi import APIRouter, Request

from jsonstore.api.responses import success

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    """Проверка работоспособности сервиса"""
    settings = request.app.state.settings
    return success(
        {
            "version": settings.app_version,
            "storage": settings.storage_name,
            "auth": "email",
            "timestamp": datetime.now(timezone.utc),
        },
        message="JSON API Server is running"
    )
