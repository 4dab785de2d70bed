"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Iterator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
    configure_logging,
    engine,
    get_session,
)
from .errors import StorageError, ValidationError

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def invalid_score(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "detail": "Invalid score submission",
                "fields": exc.fields,
                "errors": exc.errors,
            },
        )

    @app.exception_handler(StorageError)
    async def storage_unavailable(request: Request, exc: StorageError) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": "Score storage unavailable"})


def create_app(db_engine: Optional[Engine] = None) -> FastAPI:
    configure_logging(LOG_LEVEL)
    bound_engine = db_engine if db_engine is not None else engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if DB_RESET:
            logger.warning("DB_RESET set, dropping all tables")
            SQLModel.metadata.drop_all(bound_engine)
        SQLModel.metadata.create_all(bound_engine)
        yield

    app = FastAPI(title="Flowfield Scores API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    if db_engine is not None:

        def override_session() -> Iterator[Session]:
            with Session(db_engine) as session:
                yield session

        app.dependency_overrides[get_session] = override_session

    _register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("flowfield_scores.app:app", host=HOST, port=PORT, reload=True)
