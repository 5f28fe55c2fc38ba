# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cafeapi.backend import crud, models, schemas


class RestContext:
    """A unit of work over the CafeItems collection.

    A RestContext lives for one request and wraps the session of that request.
    Reads go straight to the database; add, remove and mark_modified are only
    staged until save_changes commits them in one transaction.

    Attributes:
        session: the request session.
        cafe_items: the CafeItems collection, None if the database does not
            hold it.
    """

    def __init__(
        self, session: AsyncSession, cafe_items: Optional[crud.CRUDCafeItem]
    ) -> None:
        self.session = session
        self.cafe_items = cafe_items

    def _collection(self) -> crud.CRUDCafeItem:
        if self.cafe_items is None:
            raise crud.CrudError("CafeItems collection is not available")
        return self.cafe_items

    async def find(self, obj_id: int) -> Optional[models.CafeItem]:
        return await self._collection().get(self.session, obj_id)

    async def all(self) -> list[models.CafeItem]:
        return await self._collection().get_all(self.session)

    async def exists(self, obj_id: int) -> bool:
        return await self._collection().exists(self.session, obj_id)

    def add(self, obj_in: schemas.CafeItem) -> models.CafeItem:
        return self._collection().add(self.session, obj_in=obj_in)

    async def remove(self, db_obj: models.CafeItem) -> None:
        await self._collection().remove(self.session, db_obj=db_obj)

    def mark_modified(self, obj_in: schemas.CafeItem) -> models.CafeItem:
        return self._collection().mark_modified(self.session, obj_in=obj_in)

    async def save_changes(self) -> None:
        await self._collection().save_changes(self.session)
