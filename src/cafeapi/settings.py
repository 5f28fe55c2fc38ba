# Copyright (c) 2023 Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""The CafeApiSettings model.

The CafeApiSettings model defines the cafeapi application settings and make
them accessible throughout the application by exposing a cafeapi_settings
instance.
"""

import logging
from typing import TYPE_CHECKING

from cafeapi import DEV_MODE, TEST_MODE
from cafeapi.util.settings import Setting, Settings, get_app_dirs

if TYPE_CHECKING:
    from cafeapi.util.settings import AppDirs

__all__ = ["cafeapi_settings"]

logger = logging.getLogger(__name__)


class CafeApiSettings(Settings):
    """The CafeApiSettings model definition.

    The CafeApiSettings model is a specialization of the Settings singleton base
    class. It declares a set of Setting descriptors corresponding to the
    cafeapi application settings.

    Class attributes:
        database_url: SQLAlchemy async URL of the database holding the cafe
            items. Defaults to a SQLite database in the user data directory.
        create_tables: whether to create the missing tables on startup.
        host: the interface the HTTP server listens on.
        port: the port the HTTP server listens on.
        log_level: the global cafeapi application log level.

    Attributes:
        app_dirs: An AppDirs NamedTuple containing the user app directories paths.
    """

    app_dirs: "AppDirs"

    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 8000
    DEFAULT_LOG_LEVEL = "INFO"

    database_url: Setting = Setting(default_value=None)
    create_tables: Setting = Setting(default_value=True)
    host: Setting = Setting(default_value=DEFAULT_HOST)
    port: Setting = Setting(default_value=DEFAULT_PORT)
    log_level: Setting = Setting(default_value=DEFAULT_LOG_LEVEL)

    def __init__(self, app_name: str) -> None:
        # Retrieve or create the user directories for the application.
        app_dirs = get_app_dirs(app_name)

        super().__init__(app_dirs.user_data_dir / "settings")

        self.app_dirs = app_dirs
        if self.database_url is None:
            db_path = app_dirs.user_data_dir / "cafeapi.db"
            self.database_url = f"sqlite+aiosqlite:///{db_path.as_posix()}"

    def __repr__(self) -> str:
        return (
            f"CafeApiSettings({self.database_url}, {self.host}:{self.port}, "
            f"{self.log_level})"
        )


if TEST_MODE:
    cafeapi_settings = CafeApiSettings("cafeapi_test")
elif DEV_MODE:
    cafeapi_settings = CafeApiSettings("cafeapi_dev")
else:
    cafeapi_settings = CafeApiSettings("cafeapi")
