from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.configuration import settings
from server.lifespan import lifespan

handler = FastAPI(
    title="autotranslate-bot", version=settings.GIT_SHA, lifespan=lifespan
)
setup_rate_limiter(handler)


# Local development serves the API docs from localhost only.
allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "PUT", "POST"],
    allow_headers=["*"],
)


handler.include_router(api_router)
