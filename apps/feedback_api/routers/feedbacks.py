from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from packages.shared.schemas.feedback import (
    CreateFeedbackSchema,
    FeedbackListResponse,
    FilterOptions,
    SingleFeedbackResponse,
    UpdateFeedbackSchema,
)

from apps.feedback_api.deps import get_feedback_store
from apps.feedback_api.services.ports import FeedbackStore

router = APIRouter(prefix="/api/feedbacks", tags=["feedbacks"])


@router.get("", response_model=FeedbackListResponse)
async def list_feedbacks(
    opts: FilterOptions = Depends(),
    store: FeedbackStore = Depends(get_feedback_store),
) -> FeedbackListResponse:
    return await store.fetch_feedbacks(limit=opts.limit, page=opts.page)


@router.post("", response_model=SingleFeedbackResponse, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    body: CreateFeedbackSchema,
    store: FeedbackStore = Depends(get_feedback_store),
) -> SingleFeedbackResponse:
    return await store.create_feedback(body)


@router.get("/{feedback_id}", response_model=SingleFeedbackResponse)
async def get_feedback(
    feedback_id: str,
    store: FeedbackStore = Depends(get_feedback_store),
) -> SingleFeedbackResponse:
    return await store.get_feedback(feedback_id)


@router.patch("/{feedback_id}", response_model=SingleFeedbackResponse)
async def edit_feedback(
    feedback_id: str,
    body: UpdateFeedbackSchema,
    store: FeedbackStore = Depends(get_feedback_store),
) -> SingleFeedbackResponse:
    return await store.edit_feedback(feedback_id, body)


@router.delete("/{feedback_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feedback(
    feedback_id: str,
    store: FeedbackStore = Depends(get_feedback_store),
) -> Response:
    await store.delete_feedback(feedback_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
