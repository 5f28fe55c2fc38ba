# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from typing import Optional

from sqlalchemy.orm import Mapped, mapped_column

from .base_model import BaseModel, bigintpk


class CafeItem(BaseModel):
    __tablename__ = "cafe_items"

    # Left to None, the id is assigned by the database on insert.
    id: Mapped[bigintpk] = mapped_column(default=None)
    name: Mapped[Optional[str]] = mapped_column(default=None)
    description: Mapped[Optional[str]] = mapped_column(default=None)
