# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from .base import BaseSchema
from .cafe_item import MAX_ID, MIN_ID, CafeItem

__all__ = [
    "BaseSchema",
    "CafeItem",
    "MIN_ID",
    "MAX_ID",
]
