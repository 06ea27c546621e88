# hangul_corrector\adapters\api\routers\health.py
from fastapi import APIRouter, Depends, status, Response
from typing import Dict
import structlog

from hangul_corrector.adapters.api.dependencies import get_sentence_smoother
from hangul_corrector.core.ports.sentence_smoother import ISentenceSmoother
from hangul_corrector.shared.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    K8s Liveness Probe.
    Reports the rule-set version so downstream caches can key on it.
    """
    return {
        "status": "ok",
        "service": settings.APP_NAME,
        "ruleset": settings.RULESET_VERSION,
    }

@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    smoother: ISentenceSmoother = Depends(get_sentence_smoother),
) -> Dict[str, str]:
    """
    K8s Readiness Probe.
    Checks the smoothing collaborator. Returns 503 if it is down.
    """
    health_status = {"smoother": "down"}

    try:
        if await smoother.health_check():
            health_status["smoother"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="smoother", error=str(e))

    if health_status["smoother"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
