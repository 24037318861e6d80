# File: onboard/api/routes_health.py

from datetime import datetime, timezone

from fastapi import APIRouter

from onboard.schemas.responses import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
def health():
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))
