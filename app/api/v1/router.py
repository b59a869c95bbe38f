from fastapi import APIRouter
from api.v1.routes.autotranslate import router as autotranslate_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(autotranslate_router)
