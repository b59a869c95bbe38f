from fastapi import APIRouter, Request
from infrastructure.configuration import settings
from api.dependencies.rate_limits import HEALTHCHECK_LIMIT, get_limiter

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer health checks poll these every few seconds.
@router.get("/version")
@limiter.limit(HEALTHCHECK_LIMIT)
def get_version(request: Request):  # pylint: disable=unused-argument
    """Deployed git revision."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(HEALTHCHECK_LIMIT)
def get_health(request: Request):  # pylint: disable=unused-argument
    return {"status": "ok"}
