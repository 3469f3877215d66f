from __future__ import annotations

from fastapi import APIRouter, Depends

from packages.shared.schemas.common import GenericResponse

from apps.feedback_api.deps import get_feedback_store
from apps.feedback_api.services.ports import FeedbackStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/healthchecker", response_model=GenericResponse)
async def health_checker() -> GenericResponse:
    return GenericResponse(status="success", message="Feedback API with FastAPI and MongoDB")


@router.get("/readyz")
async def readyz(store: FeedbackStore = Depends(get_feedback_store)) -> dict[str, str]:
    """Readiness check mínima: el store responde a un ping."""
    if not await store.ping():
        return {"status": "not_ready", "reason": "database_unreachable"}

    return {"status": "ready"}
