# Copyright (c) 2023 Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""CafeApi is a REST API to manage the items of a cafe.

Requires Python >= 3.9

Usage:
    ''python -m cafeapi''
"""

__all__ = ["DEV_MODE", "TEST_MODE"]

import os
from typing import Final

DEV_MODE: Final[bool] = os.environ.get("CAFEAPI_DEV", "0") != "0"
TEST_MODE: Final[bool] = os.environ.get("CAFEAPI_TEST", "0") != "0"
