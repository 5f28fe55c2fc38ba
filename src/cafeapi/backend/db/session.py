# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import logging

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)

from cafeapi.backend import models

logger = logging.getLogger(__name__)


async def _create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(models.BaseModel.metadata.create_all)


async def has_table(engine: AsyncEngine, table_name: str) -> bool:
    async with engine.connect() as conn:
        return await conn.run_sync(
            lambda sync_conn: sa.inspect(sync_conn).has_table(table_name)
        )


async def init_database(engine: AsyncEngine) -> None:
    url = engine.url.render_as_string(hide_password=True)
    logger.info("Creating tables in %s", url)
    await _create_tables(engine)


def configure_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url)


def configure_session(engine: AsyncEngine) -> async_sessionmaker:
    # Objects stay usable once committed: responses are built after the commit.
    return async_sessionmaker(bind=engine, expire_on_commit=False)
