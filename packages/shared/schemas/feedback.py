from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_STATUS = "pending"
MAX_PAGE = 1_000_000
MAX_LIMIT = 1_000


class FilterOptions(BaseModel):
    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int = Field(default=10, ge=0, le=MAX_LIMIT)


class CreateFeedbackSchema(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    feedback: str = Field(min_length=1)
    rating: float


class UpdateFeedbackSchema(BaseModel):
    """Actualización parcial: solo se aplican los campos presentes (no nulos)."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = Field(default=None, min_length=1)
    feedback: str | None = Field(default=None, min_length=1)
    rating: float | None = None
    status: str | None = Field(default=None, min_length=1)


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    feedback: str
    rating: float
    status: str
    createdAt: datetime
    updatedAt: datetime


class FeedbackData(BaseModel):
    feedback: FeedbackResponse


class SingleFeedbackResponse(BaseModel):
    status: Literal["success"] = "success"
    data: FeedbackData

    @classmethod
    def of(cls, feedback: FeedbackResponse) -> "SingleFeedbackResponse":
        return cls(data=FeedbackData(feedback=feedback))


class FeedbackListResponse(BaseModel):
    status: Literal["success"] = "success"
    results: int
    feedbacks: list[FeedbackResponse] = Field(default_factory=list)

    @classmethod
    def of(cls, feedbacks: list[FeedbackResponse]) -> "FeedbackListResponse":
        # Sin total: results es el nº de elementos de esta página.
        return cls(results=len(feedbacks), feedbacks=feedbacks)
