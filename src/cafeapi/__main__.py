# Copyright (c) 2023 Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import logging
import sys

import uvicorn

from cafeapi import DEV_MODE
from cafeapi.util.logutil import LogConfig
from cafeapi.util.settings import SettingsError

logger = logging.getLogger(__name__)

log_config: LogConfig


def except_hook(exc_type, exc_value, _exc_traceback):  # type: ignore[no-untyped-def]
    from cafeapi import __about__  # pylint: disable=import-outside-toplevel

    error_msg = f"{exc_type.__name__}: {exc_value}"
    logger.fatal("%s", error_msg, exc_info=False)
    sys.stderr.write(f"\ncafeapi - {str(error_msg)}\n\n")
    logger.info("%s is closing...", __about__.__title__)
    log_config.stop_logging()
    sys.exit(1)


def run_main() -> None:
    """Program entry point."""

    # Handles exceptions not trapped earlier.
    sys.excepthook = except_hook

    # Load settings and initialize the cafeapi_settings singleton instance.
    from cafeapi.settings import (  # pylint: disable=import-outside-toplevel
        cafeapi_settings,
    )

    # Initialize and start the log server.
    global log_config  # pylint: disable=global-statement
    log_config = LogConfig(
        cafeapi_settings.app_dirs.user_log_dir / "cafeapi.log",
        cafeapi_settings.log_level,
        log_on_console=True,
    )
    log_config.init_logging()

    # Persist the settings so that the user finds them to edit.
    try:
        cafeapi_settings.save()
    except SettingsError as e:
        logger.warning("Cannot save the settings file - Reason is: %s", e)

    from cafeapi import __about__  # pylint: disable=import-outside-toplevel
    from cafeapi.backend.api import (  # pylint: disable=import-outside-toplevel
        create_app,
    )

    app_name = __about__.__title__
    logger.info("%s is starting...", app_name)
    logger.info("Using settings: %s", cafeapi_settings)
    if DEV_MODE:
        logger.info("Running in Development mode")
    else:
        logger.info("Running in Production mode")

    app = create_app(
        cafeapi_settings.database_url,
        create_tables=cafeapi_settings.create_tables,
    )
    # log_config=None: uvicorn records propagate to the root logger.
    uvicorn.run(
        app,
        host=cafeapi_settings.host,
        port=cafeapi_settings.port,
        log_config=None,
    )

    logger.info("%s is closing...", app_name)
    # Stop the log server.
    log_config.stop_logging()


if __name__ == "__main__":
    run_main()
