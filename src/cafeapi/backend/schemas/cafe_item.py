# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from dataclasses import dataclass
from typing import Annotated, Optional

from pydantic import Field

from cafeapi.backend import models

from .base import BaseSchema

# Bounds of the 64-bit primary key.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

CafeItemId = Annotated[int, Field(ge=MIN_ID, le=MAX_ID)]


# Used both as request body and as response: an id of 0 on create lets the
# database assign a new one.
@dataclass
class CafeItem(BaseSchema):
    id: CafeItemId = 0
    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_orm(cls, orm_obj: models.CafeItem) -> "CafeItem":
        return cls(
            id=orm_obj.id,
            name=orm_obj.name,
            description=orm_obj.description,
        )
