from __future__ import annotations

from typing import Sequence


class FeedbackStoreError(Exception):
    """Base de los errores que cruzan la frontera de la capa de datos.

    Cada subclase lleva el contexto necesario para su mensaje y el status HTTP
    con el que se expone.
    """

    status_code: int = 500
    kind: str = "store_error"

    @property
    def message(self) -> str:
        return str(self)


class ConfigurationError(FeedbackStoreError):
    kind = "configuration"

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


class DatabaseConnectionError(FeedbackStoreError):
    kind = "connection"

    def __init__(self, target: str, cause: Exception | None = None) -> None:
        self.target = target
        self.cause = cause
        super().__init__(f"Could not connect to the database at {target}: {cause}")


class InvalidIdError(FeedbackStoreError):
    status_code = 400
    kind = "invalid_id"

    def __init__(self, feedback_id: str) -> None:
        self.feedback_id = feedback_id
        super().__init__(f"invalid ID: {feedback_id}")


class NotFoundError(FeedbackStoreError):
    status_code = 404
    kind = "not_found"

    def __init__(self, feedback_id: str) -> None:
        self.feedback_id = feedback_id
        super().__init__(f"Feedback with ID: {feedback_id} not found")


class DuplicateError(FeedbackStoreError):
    status_code = 409
    kind = "duplicate"

    def __init__(self, feedback: str | None = None) -> None:
        self.feedback = feedback
        super().__init__("Feedback with that content already exists")


class QueryError(FeedbackStoreError):
    kind = "query"

    def __init__(self, cause: Exception | str) -> None:
        self.cause = cause
        super().__init__(f"Database query failed: {cause}")


class SerializationError(FeedbackStoreError):
    kind = "serialization"

    def __init__(self, cause: Exception | str) -> None:
        self.cause = cause
        super().__init__(f"Could not serialize update document: {cause}")
