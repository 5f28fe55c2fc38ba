# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""The cafeapi FastAPI application factory."""

import contextlib
import logging
import time
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from cafeapi import __about__
from cafeapi.backend import crud, db, models

from .api_v1.cafe_models import router as cafe_models_router

logger = logging.getLogger(__name__)


def create_app(database_url: str, *, create_tables: bool = True) -> FastAPI:
    """Build the cafeapi application bound to the database at database_url.

    Args:
        database_url: a SQLAlchemy async database URL
            (e.g. 'sqlite+aiosqlite:///cafe.db').
        create_tables: create the missing tables on startup.

    Returns:
        The FastAPI application.
    """

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = db.configure_engine(database_url)
        try:
            if create_tables:
                await db.init_database(engine)
            table_name = models.CafeItem.__tablename__
            app.state.cafe_items_available = await db.has_table(engine, table_name)
            if not app.state.cafe_items_available:
                logger.warning("CafeItems unavailable: no table %s", table_name)
            app.state.session_factory = db.configure_session(engine)
            logger.info("%s is started", __about__.__title__)
            yield
        finally:
            await engine.dispose()
            logger.info("%s is stopped", __about__.__title__)

    app = FastAPI(
        title=__about__.__title__,
        summary=__about__.__summary__,
        version=__about__.__version__,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):  # type: ignore[no-untyped-def]
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time
        logger.info(
            "%s %s - %s (%.3fs)",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )
        return response

    @app.exception_handler(crud.CrudError)
    async def crud_error_handler(request: Request, exc: crud.CrudError) -> JSONResponse:
        logger.error(
            "%s %s - %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"SQL or database error: {exc}"},
        )

    app.include_router(cafe_models_router)

    return app
