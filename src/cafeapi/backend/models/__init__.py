# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from .base_model import BaseModel, ModelType
from .cafe_item import CafeItem

__all__ = [
    "ModelType",
    "BaseModel",
    "CafeItem",
]
