# Copyright (c) 2023 Eric Lemoine
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import pytest

from cafeapi.backend import crud

pytestmark = pytest.mark.api

URL = "/api/cafemodels"


@pytest.fixture()
def init_cafe_models(client) -> list[dict]:
    cafe_models = []
    for name, description in (
        ("Espresso", "short"),
        ("Latte", "hot"),
        ("Cappuccino", None),
    ):
        response = client.post(URL, json={"name": name, "description": description})
        assert response.status_code == 201
        cafe_models.append(response.json())
    return cafe_models


@pytest.fixture()
def mock_exists(monkeypatch):
    state = {"exists": True}
    called = []

    async def _exists(_db, _id):
        called.append(_id)
        return state["exists"]

    monkeypatch.setattr(crud.cafe_item, "exists", _exists)

    return state, called


def test_get_all(client, init_cafe_models):
    response = client.get(URL)

    assert response.status_code == 200
    assert response.json() == init_cafe_models


def test_get_all_empty(client):
    response = client.get(URL)

    assert response.status_code == 200
    assert response.json() == []


def test_get(client, init_cafe_models):
    cafe_model = init_cafe_models[1]

    response = client.get(f"{URL}/{cafe_model['id']}")

    assert response.status_code == 200
    assert response.json() == {
        "id": cafe_model["id"],
        "name": "Latte",
        "description": "hot",
    }


def test_get_unknown(client, init_cafe_models):
    response = client.get(f"{URL}/100")

    assert response.status_code == 404
    assert response.json() == {"detail": "Cafe item 100 not found"}


def test_post(client):
    body = {"id": 1, "name": "Latte", "description": "hot"}

    response = client.post(URL, json=body)

    assert response.status_code == 201
    assert response.json() == body
    assert response.headers["location"] == f"http://testserver{URL}/1"
    assert client.get(f"{URL}/1").json() == body


def test_post_assigns_id(client, init_cafe_models):
    response = client.post(URL, json={"name": "Mocha"})

    assert response.status_code == 201
    cafe_model = response.json()
    assert cafe_model["id"] not in [cm["id"] for cm in init_cafe_models]
    assert cafe_model["name"] == "Mocha"
    assert cafe_model["description"] is None
    assert response.headers["location"].endswith(f"{URL}/{cafe_model['id']}")


def test_post_duplicate_id(client, init_cafe_models):
    cafe_model = init_cafe_models[0]

    response = client.post(URL, json={"id": cafe_model["id"], "name": "Mocha"})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("SQL or database error")
    assert client.get(f"{URL}/{cafe_model['id']}").json() == cafe_model


def test_put(client, init_cafe_models):
    cafe_model = init_cafe_models[1]
    body = {"id": cafe_model["id"], "name": "Latte", "description": "iced"}

    response = client.put(f"{URL}/{cafe_model['id']}", json=body)

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"{URL}/{cafe_model['id']}").json() == body


def test_put_id_mismatch(client, init_cafe_models):
    cafe_model = init_cafe_models[1]
    other_id = init_cafe_models[2]["id"]

    response = client.put(
        f"{URL}/{cafe_model['id']}",
        json={"id": other_id, "name": "Latte", "description": "iced"},
    )

    assert response.status_code == 400
    assert client.get(URL).json() == init_cafe_models


def test_put_unknown(client, init_cafe_models):
    response = client.put(
        f"{URL}/100", json={"id": 100, "name": "Ghost", "description": None}
    )

    assert response.status_code == 404
    assert client.get(f"{URL}/100").status_code == 404
    assert len(client.get(URL).json()) == 3


def test_put_unresolved_conflict(client, mock_exists):
    state, called = mock_exists
    state["exists"] = True

    response = client.put(
        f"{URL}/100", json={"id": 100, "name": "Ghost", "description": None}
    )

    assert called == [100]
    assert response.status_code == 500
    assert response.json()["detail"].startswith("SQL or database error")


def test_delete(client, init_cafe_models):
    cafe_model = init_cafe_models[0]

    response = client.delete(f"{URL}/{cafe_model['id']}")

    assert response.status_code == 204
    assert client.get(f"{URL}/{cafe_model['id']}").status_code == 404


def test_delete_unknown(client, init_cafe_models):
    response = client.delete(f"{URL}/100")

    assert response.status_code == 404
    assert len(client.get(URL).json()) == 3


@pytest.mark.parametrize("created, deleted", ((0, 0), (3, 0), (3, 3), (5, 2)))
def test_get_all_after_deletes(client, created, deleted):
    ids = [
        client.post(URL, json={"name": f"Item {i}"}).json()["id"]
        for i in range(created)
    ]
    for obj_id in ids[:deleted]:
        assert client.delete(f"{URL}/{obj_id}").status_code == 204

    response = client.get(URL)

    assert response.status_code == 200
    assert [cm["id"] for cm in response.json()] == ids[deleted:]


def test_cafe_model_lifecycle(client):
    response = client.post(URL, json={"id": 1, "name": "Latte", "description": "hot"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "name": "Latte", "description": "hot"}

    response = client.put(
        f"{URL}/1", json={"id": 1, "name": "Latte", "description": "iced"}
    )
    assert response.status_code == 204

    response = client.get(f"{URL}/1")
    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Latte", "description": "iced"}

    response = client.delete(f"{URL}/1")
    assert response.status_code == 204

    response = client.get(f"{URL}/1")
    assert response.status_code == 404


class TestWithoutTable:
    def test_get_all(self, client_without_table):
        response = client_without_table.get(URL)

        assert response.status_code == 404

    def test_get(self, client_without_table):
        response = client_without_table.get(f"{URL}/1")

        assert response.status_code == 404

    def test_post(self, client_without_table):
        response = client_without_table.post(URL, json={"id": 1, "name": "Latte"})

        assert response.status_code == 400

    def test_put(self, client_without_table):
        response = client_without_table.put(
            f"{URL}/1", json={"id": 1, "name": "Latte"}
        )

        assert response.status_code == 404

    def test_put_id_mismatch(self, client_without_table):
        response = client_without_table.put(
            f"{URL}/1", json={"id": 2, "name": "Latte"}
        )

        assert response.status_code == 400

    def test_delete(self, client_without_table):
        response = client_without_table.delete(f"{URL}/1")

        assert response.status_code == 404


def test_openapi_documents_cafe_models(client):
    response = client.get("/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    assert set(paths[URL]) == {"get", "post"}
    assert set(paths[f"{URL}/{{item_id}}"]) == {"get", "put", "delete"}
    assert "404" in paths[f"{URL}/{{item_id}}"]["delete"]["responses"]
    sample = {"id": 1, "name": "string", "description": "string"}
    for path, method in ((URL, "post"), (f"{URL}/{{item_id}}", "put")):
        content = paths[path][method]["requestBody"]["content"]["application/json"]
        assert content["examples"]["cafe_item"]["value"] == sample


@pytest.mark.parametrize("obj_id", (2**63, -(2**63) - 1))
def test_id_out_of_range(client, init_cafe_models, obj_id):
    body = {"id": obj_id, "name": "Latte", "description": "hot"}

    assert client.get(f"{URL}/{obj_id}").status_code == 422
    assert client.delete(f"{URL}/{obj_id}").status_code == 422
    assert client.put(f"{URL}/{obj_id}", json=body).status_code == 422
    assert client.post(URL, json=body).status_code == 422
    assert client.get(URL).json() == init_cafe_models


def test_id_bounds(client):
    for obj_id in (2**63 - 1, -(2**63)):
        body = {"id": obj_id, "name": "Latte", "description": "hot"}

        response = client.post(URL, json=body)

        assert response.status_code == 201
        assert client.get(f"{URL}/{obj_id}").json() == body
