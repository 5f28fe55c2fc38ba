# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request

from cafeapi.backend import crud
from cafeapi.backend.db import RestContext


async def get_context(request: Request) -> AsyncIterator[RestContext]:
    """Open a session for the request and wrap it in a RestContext.

    The CafeItems collection is only exposed when the lifespan found its table
    in the database.
    """
    state = request.app.state
    cafe_items = crud.cafe_item if state.cafe_items_available else None
    async with state.session_factory() as session:
        yield RestContext(session, cafe_items)


Context = Annotated[RestContext, Depends(get_context)]
