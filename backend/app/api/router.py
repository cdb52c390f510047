from fastapi import APIRouter

from backend.app.api.endpoints.auth import router as auth_router
from backend.app.api.endpoints.items import router as items_router
from backend.app.api.endpoints.suppliers import router as suppliers_router
from backend.app.api.endpoints.purchases import router as purchases_router

router = APIRouter()
router.include_router(auth_router, tags=["auth"])
router.include_router(items_router, tags=["items"])
router.include_router(suppliers_router, tags=["suppliers"])
router.include_router(purchases_router, tags=["purchases"])
