from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenericResponse(BaseModel):
    status: Literal["success", "fail", "error"]
    message: str

    @classmethod
    def fail(cls, message: str) -> "GenericResponse":
        return cls(status="fail", message=message)

    @classmethod
    def error(cls, message: str) -> "GenericResponse":
        return cls(status="error", message=message)
