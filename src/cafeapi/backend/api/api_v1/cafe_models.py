# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""REST endpoints of the CafeItems collection.

    GET    /api/cafemodels         all cafe items
    GET    /api/cafemodels/{id}    one cafe item
    POST   /api/cafemodels         create a cafe item
    PUT    /api/cafemodels/{id}    replace a cafe item
    DELETE /api/cafemodels/{id}    delete a cafe item
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, HTTPException, Path, Request, Response, status

from cafeapi.backend import crud, schemas
from cafeapi.backend.api.deps import Context

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/cafemodels",
    tags=["cafemodels"],
)

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Cafe item not found"}}

ItemId = Annotated[int, Path(ge=schemas.MIN_ID, le=schemas.MAX_ID)]

CafeItemBody = Annotated[
    schemas.CafeItem,
    Body(
        openapi_examples={
            "cafe_item": {
                "summary": "A cafe item",
                "value": {"id": 1, "name": "string", "description": "string"},
            },
        },
    ),
]


@router.get("", responses=_NOT_FOUND)
async def get_cafe_items(context: Context) -> list[schemas.CafeItem]:
    """Returns all the created cafe items."""
    if context.cafe_items is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "CafeItems not available")
    db_objs = await context.all()
    return [schemas.CafeItem.from_orm(db_obj) for db_obj in db_objs]


@router.get("/{item_id}", responses=_NOT_FOUND)
async def get_cafe_model(item_id: ItemId, context: Context) -> schemas.CafeItem:
    """Returns the cafe item with the given id."""
    if context.cafe_items is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "CafeItems not available")
    db_obj = await context.find(item_id)
    if db_obj is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, f"Cafe item {item_id} not found"
        )
    return schemas.CafeItem.from_orm(db_obj)


@router.put(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Path and body ids differ"},
        **_NOT_FOUND,
    },
)
async def put_cafe_model(
    item_id: ItemId, cafe_item: CafeItemBody, context: Context
) -> Response:
    """Replaces the cafe item with the given id by the body.

    The body id shall be the path id. All fields are overwritten.
    """
    if item_id != cafe_item.id:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            f"Body id {cafe_item.id} does not match path id {item_id}",
        )
    if context.cafe_items is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "CafeItems not available")

    context.mark_modified(cafe_item)

    try:
        await context.save_changes()
    except crud.CrudConcurrencyError:
        if not await context.exists(item_id):
            raise HTTPException(
                status.HTTP_404_NOT_FOUND, f"Cafe item {item_id} not found"
            )
        raise

    logger.debug("Cafe item %s updated", item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "CafeItems not available"}},
)
async def post_cafe_model(
    cafe_item: CafeItemBody, request: Request, response: Response, context: Context
) -> schemas.CafeItem:
    """Creates a cafe item.

    Leave the id to 0 to let the database assign it.
    """
    if context.cafe_items is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "CafeItems not available")

    db_obj = context.add(cafe_item)
    await context.save_changes()

    logger.debug("Cafe item %s created", db_obj.id)
    response.headers["Location"] = str(
        request.url_for("get_cafe_model", item_id=db_obj.id)
    )
    return schemas.CafeItem.from_orm(db_obj)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
async def delete_cafe_model(item_id: ItemId, context: Context) -> Response:
    """Deletes the cafe item with the given id."""
    if context.cafe_items is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "CafeItems not available")
    db_obj = await context.find(item_id)
    if db_obj is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, f"Cafe item {item_id} not found"
        )

    await context.remove(db_obj)
    await context.save_changes()

    logger.debug("Cafe item %s deleted", item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
