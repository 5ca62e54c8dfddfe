"""API v1 router registration."""

from fastapi import APIRouter

from reuniao_mensal.api.routes import occurrences

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(occurrences.router)
v1_router.include_router(occurrences.monthly_router)
