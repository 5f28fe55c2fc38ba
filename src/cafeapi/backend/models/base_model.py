# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from typing import Annotated, TypeVar

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass, mapped_column


class BaseModel(MappedAsDataclass, DeclarativeBase):
    pass


ModelType = TypeVar("ModelType", bound=BaseModel)


# SQLite only autoincrements an INTEGER PRIMARY KEY column (rowid alias).
BigInt = BigInteger().with_variant(Integer(), "sqlite")

bigintpk = Annotated[int, mapped_column(BigInt, primary_key=True)]
