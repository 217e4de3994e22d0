from fastapi import APIRouter

from app.api.v1 import health, news

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(news.router, prefix="/news", tags=["news"])
v1_router.include_router(health.router, prefix="/health", tags=["health"])
