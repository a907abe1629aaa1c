"""API routes: open auth routes, the open and closed catalog, health."""

from fastapi import APIRouter, Depends

from app.api import auth, health, library

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(library.router, prefix="/library", tags=["library"])
router.include_router(
    library.router,
    prefix="/c/library",
    tags=["library (authenticated)"],
    dependencies=[Depends(auth.check_token)],
)
