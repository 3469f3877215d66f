from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from packages.shared.schemas.common import GenericResponse

from apps.feedback_api.config import cors_origins
from apps.feedback_api.deps import lifespan, setup_app
from apps.feedback_api.routers import feedbacks, health
from apps.feedback_api.services.errors import FeedbackStoreError


def create_app() -> FastAPI:
    app = FastAPI(title="Feedback API", version="0.1.0", lifespan=lifespan)

    setup_app(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    @app.exception_handler(FeedbackStoreError)
    async def _store_error_handler(request: Request, exc: FeedbackStoreError) -> JSONResponse:
        body = GenericResponse.fail(exc.message) if exc.status_code < 500 else GenericResponse.error(exc.message)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    # Logueo de errores no controlados (DEV): imprime traceback para diagnosticar 500.
    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request, exc: Exception):  # type: ignore[no-redef]
        import traceback

        traceback.print_exc()
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

    app.include_router(health.router)
    app.include_router(feedbacks.router)

    return app
