from fastapi import APIRouter

from docshelf.api.routes import auth, health, tags

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(tags.router, prefix="/tag", tags=["tags"])
