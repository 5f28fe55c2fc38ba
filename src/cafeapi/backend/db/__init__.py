# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from .context import RestContext
from .session import configure_engine, configure_session, has_table, init_database

__all__ = [
    "RestContext",
    "configure_engine",
    "configure_session",
    "has_table",
    "init_database",
]
