from __future__ import annotations

from typing import Protocol

from packages.shared.schemas.feedback import (
    CreateFeedbackSchema,
    FeedbackListResponse,
    SingleFeedbackResponse,
    UpdateFeedbackSchema,
)


class FeedbackStore(Protocol):
    async def fetch_feedbacks(self, *, limit: int, page: int) -> FeedbackListResponse:
        """Página `page` (1-based) de hasta `limit` feedbacks, en orden natural."""
        ...

    async def create_feedback(self, body: CreateFeedbackSchema) -> SingleFeedbackResponse:
        ...

    async def get_feedback(self, feedback_id: str) -> SingleFeedbackResponse:
        ...

    async def edit_feedback(self, feedback_id: str, body: UpdateFeedbackSchema) -> SingleFeedbackResponse:
        """Aplica solo los campos presentes en `body`. Devuelve el documento ya actualizado."""
        ...

    async def delete_feedback(self, feedback_id: str) -> None:
        ...

    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        ...
