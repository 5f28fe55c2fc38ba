# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import asyncio
import logging

from cafeapi.backend import db
from cafeapi.settings import cafeapi_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def init(database_url: str) -> None:
    engine = db.configure_engine(database_url)
    try:
        await db.init_database(engine)
    finally:
        await engine.dispose()


def main() -> None:
    logger.info("Creating tables")
    asyncio.run(init(cafeapi_settings.database_url))
    logger.info("Tables created")


if __name__ == "__main__":
    main()
