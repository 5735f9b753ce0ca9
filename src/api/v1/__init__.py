"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.labels import router as labels_router
from api.v1.routes.todos import router as todos_router

router = APIRouter()
router.include_router(todos_router)
router.include_router(labels_router)
