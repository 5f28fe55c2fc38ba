# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from .base import (
    CRUDBase,
    CrudConcurrencyError,
    CrudError,
    CrudIntegrityError,
    ModelType,
    SchemaType,
)
from .cafe_item import CRUDCafeItem, cafe_item

__all__ = [
    "CRUDBase",
    "CrudError",
    "CrudIntegrityError",
    "CrudConcurrencyError",
    "ModelType",
    "SchemaType",
    "CRUDCafeItem",
    "cafe_item",
]
