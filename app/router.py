from fastapi import APIRouter
from app.analytics.router import router as analytics_router
from app.dashboard.router import router as dashboard_router

router = APIRouter(prefix="/api")
router.include_router(analytics_router, tags=["analytics"])
router.include_router(dashboard_router, tags=["dashboard"])
