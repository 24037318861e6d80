# File: onboard/api/api.py

from fastapi import APIRouter

from onboard.api.routes_auth import router as auth_router
from onboard.api.routes_health import router as health_router
from onboard.api.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(health_router)
