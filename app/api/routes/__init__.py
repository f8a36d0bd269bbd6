from fastapi import APIRouter

from app.api.routes import auth, career

# Main router
router = APIRouter()

# Register sub-routers
router.include_router(auth.router, prefix="/auth", tags=["authentication"])
router.include_router(career.router, tags=["career"])
