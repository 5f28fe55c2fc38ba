# Copyright (c) 2022, Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from cafeapi.backend import models
from cafeapi.backend.api import create_app
from cafeapi.backend.models.base_model import BaseModel


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{(tmp_path / 'cafeapi_test.db').as_posix()}"


@pytest.fixture
async def engine(database_url):
    engine = create_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
async def dbsession(session_factory):
    """Returns a sqlalchemy async session on a fresh database."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def init_cafe_items(dbsession: AsyncSession) -> list[models.CafeItem]:
    cafe_items = [
        models.CafeItem(name="Espresso", description="short"),
        models.CafeItem(name="Latte", description="hot"),
        models.CafeItem(name="Cappuccino", description=None),
    ]
    dbsession.add_all(cafe_items)
    await dbsession.commit()
    # Start each test with an empty identity map, as a new request would.
    dbsession.expunge_all()
    return cafe_items


#
# Mock some methods of the sqlalchemy 'AsyncSession'
#
@pytest.fixture()
def mock_commit(monkeypatch):
    state = {"failed": False}
    called = []

    async def _commit(_):
        called.append(True)
        if state["failed"]:
            raise SQLAlchemyError("Commit failed")

    monkeypatch.setattr("cafeapi.backend.crud.base.AsyncSession.commit", _commit)

    return state, called


@pytest.fixture()
def mock_get(monkeypatch):
    state = {"failed": False}
    called = []

    async def _get(_1, _2, _3, **kwargs):
        called.append(True)
        if state["failed"]:
            raise SQLAlchemyError("Get failed")

    monkeypatch.setattr("cafeapi.backend.crud.base.AsyncSession.get", _get)

    return state, called


@pytest.fixture()
def mock_select(monkeypatch):
    state = {"failed": False}
    called = []

    def _select(_):
        called.append(True)
        if state["failed"]:
            raise SQLAlchemyError("Select failed")

    monkeypatch.setattr("cafeapi.backend.crud.base.select", _select)

    return state, called


#
# REST API
#
@pytest.fixture
def client(database_url):
    app = create_app(database_url)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client_without_table(database_url):
    app = create_app(database_url, create_tables=False)
    with TestClient(app) as client:
        yield client
