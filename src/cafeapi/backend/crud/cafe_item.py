# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from cafeapi.backend import models, schemas

from .base import CRUDBase


class CRUDCafeItem(CRUDBase[models.CafeItem, schemas.CafeItem]):
    pass


cafe_item = CRUDCafeItem(models.CafeItem)
