"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from clipgrad.api import gradient, health, offset

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(offset.router)
api_router.include_router(gradient.router)
