"""
FastAPI application.

Build it with `create_app()`; run it with e.g. `uvicorn src.main:app`.
Which repository stores the games is decided by the settings (see src/core/config.py).
"""

import logging
import threading
from typing import Generator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import Settings, configure_logging
from src.core.exceptions import GameError, RepositoryError
from src.db.database import build_session_factory
from src.db.memory_repository import InMemoryGameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.chess_service import ChessService

_log = logging.getLogger(__name__)


def game_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unknown games are a 404, every other game error is the client's fault (400)."""
    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, RepositoryError)
        else status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Chess rules engine", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(GameError, game_error_handler)
    app.include_router(router)

    # one lock for all requests: moves on the same game must not interleave
    lock = threading.Lock()
    if settings.repository == "sql":
        session_factory = build_session_factory(settings)

        def service_provider() -> Generator[ChessService, None, None]:
            with session_factory() as session:
                yield ChessService(SQLGameRepository(session), lock)

    else:
        service = ChessService(InMemoryGameRepository(), lock)

        def service_provider() -> Generator[ChessService, None, None]:
            yield service

    app.state.service_provider = service_provider

    _log.info("Chess backend ready (repository: %s)", settings.repository)
    return app


app = create_app()
