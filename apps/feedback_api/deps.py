from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from apps.feedback_api.adapters.mongo_feedback_store import MongoFeedbackStore
from apps.feedback_api.config import StoreConfig
from apps.feedback_api.services.observability import setup_observability
from apps.feedback_api.services.ports import FeedbackStore

logger = logging.getLogger("apps.feedback_api")


def setup_app(app: FastAPI) -> None:
    # Observabilidad (OTLP si está configurado por env)
    setup_observability()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Crea el store una vez por proceso y lo cierra al apagar.

    Si la configuración falta o Mongo no responde, el arranque falla
    (ConfigurationError / DatabaseConnectionError).
    Los tests pueden dejar un store ya preparado en app.state.feedback_store.
    """
    store: FeedbackStore | None = getattr(app.state, "feedback_store", None)
    owned = store is None
    if owned:
        store = await MongoFeedbackStore.connect(StoreConfig.from_env())
        app.state.feedback_store = store

    try:
        yield
    finally:
        if owned and store is not None:
            await store.close()
            app.state.feedback_store = None


def get_feedback_store(request: Request) -> FeedbackStore:
    store = getattr(request.app.state, "feedback_store", None)
    if store is None:
        raise RuntimeError("Feedback store is not initialized (app lifespan not started)")
    return store
