# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from typing import Any, Generic, Optional, Type, TypeVar, cast

import sqlalchemy as sa
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import make_transient_to_detached
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.orm.exc import StaleDataError

from cafeapi.backend import schemas
from cafeapi.backend.models import ModelType

SchemaType = TypeVar("SchemaType", bound=schemas.BaseSchema)


class CrudError(Exception):
    pass


class CrudIntegrityError(CrudError):
    pass


class CrudConcurrencyError(CrudError):
    """The row to update or delete was changed or removed since it was read."""


class CRUDBase(Generic[ModelType, SchemaType]):
    def __init__(self, model: Type[ModelType]):
        """CRUD object over one table, with staging and save methods.

        Read methods hit the database immediately. add, remove and mark_modified
        only stage a change in the session: nothing reaches the database before
        save_changes.
        """
        self.model = model

    async def get(self, dbsession: AsyncSession, obj_id: Any) -> Optional[ModelType]:
        try:
            obj = await dbsession.get(self.model, obj_id)
        except SQLAlchemyError as exc:
            raise CrudError from exc
        else:
            return obj

    async def get_all(self, dbsession: AsyncSession) -> list[ModelType]:
        try:
            obj_list = cast(
                list[ModelType], (await dbsession.scalars(select(self.model))).all()
            )
        except SQLAlchemyError as exc:
            raise CrudError from exc
        else:
            return obj_list

    async def exists(self, dbsession: AsyncSession, obj_id: Any) -> bool:
        pk = sa.inspect(self.model).primary_key[0]
        try:
            found = await dbsession.scalar(select(sa.exists().where(pk == obj_id)))
        except SQLAlchemyError as exc:
            raise CrudError from exc
        else:
            return bool(found)

    def add(self, dbsession: AsyncSession, *, obj_in: SchemaType) -> ModelType:
        obj_in_data = obj_in.flatten()
        pk_name = sa.inspect(self.model).primary_key[0].key
        if not obj_in_data.get(pk_name):
            # Let the database assign the primary key.
            obj_in_data.pop(pk_name, None)
        db_obj = self.model(**obj_in_data)
        dbsession.add(db_obj)
        return db_obj

    async def remove(self, dbsession: AsyncSession, *, db_obj: ModelType) -> None:
        await dbsession.delete(db_obj)

    def mark_modified(
        self, dbsession: AsyncSession, *, obj_in: SchemaType
    ) -> ModelType:
        """Stage a full replacement of the row identified by obj_in.

        The row is not read first: obj_in is attached to the session as if it
        were loaded from the database, then all its non key columns are flagged
        as modified so that the flush emits an UPDATE matching on the primary
        key only. If no row matches, save_changes raises CrudConcurrencyError.
        """
        db_obj = self.model(**obj_in.flatten())
        make_transient_to_detached(db_obj)
        dbsession.add(db_obj)
        for attr in sa.inspect(self.model).column_attrs:
            if not any(col.primary_key for col in attr.columns):
                flag_modified(db_obj, attr.key)
        return db_obj

    async def save_changes(self, dbsession: AsyncSession) -> None:
        try:
            await dbsession.commit()
        except StaleDataError as exc:
            await dbsession.rollback()
            raise CrudConcurrencyError(str(exc)) from exc
        except IntegrityError as exc:
            await dbsession.rollback()
            raise CrudIntegrityError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            await dbsession.rollback()
            raise CrudError(str(exc)) from exc
