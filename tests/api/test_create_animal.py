"""Create Animal - POST /api/animals inserts one document and returns its id.

Invariants:
    - 201 with message and the store-assigned id
    - Empty or missing animal_name -> 400, no store write
    - _id / __v in the body never reach the store
    - Malformed body or non-finite coordinate -> 400, store failure -> structured 500
    - Timezone offset on birthdate survives the round trip
"""

from bson import ObjectId
from pymongo.errors import AutoReconnect


async def test_create_returns_201_with_assigned_id(client, fake_collection):
    res = await client.post(
        "/api/animals", json={"animal_name": "Rex", "species": "dog"},
    )

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Animal added successfully"
    assert ObjectId(body["id"]) in fake_collection.documents


async def test_create_stores_all_mutable_fields(client, fake_collection):
    res = await client.post("/api/animals", json={
        "animal_name": "Misu",
        "species": "cat",
        "birthdate": "2019-03-01T00:00:00Z",
        "location": {"type": "Point", "coordinates": [25.0, 60.2]},
        "owner": "Bob",
    })

    stored = fake_collection.documents[ObjectId(res.json()["id"])]
    assert stored["animal_name"] == "Misu"
    assert stored["species"] == "cat"
    assert stored["birthdate"].year == 2019
    assert stored["location"] == {"type": "Point", "coordinates": [25.0, 60.2]}
    assert stored["owner"] == "Bob"


async def test_create_accepts_camel_case_name(client, fake_collection):
    res = await client.post("/api/animals", json={"animalName": "Rex"})

    assert res.status_code == 201
    stored = fake_collection.documents[ObjectId(res.json()["id"])]
    assert stored["animal_name"] == "Rex"


async def test_create_empty_name_returns_400_without_write(client, fake_collection):
    res = await client.post("/api/animals", json={"animal_name": "", "species": "dog"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Animal name cannot be empty"
    assert fake_collection.calls == []
    assert fake_collection.documents == {}


async def test_create_missing_name_returns_400(client, fake_collection):
    res = await client.post("/api/animals", json={"species": "dog"})

    assert res.status_code == 400
    assert fake_collection.calls == []


async def test_create_ignores_client_supplied_id_and_version(client, fake_collection):
    supplied = str(ObjectId())
    res = await client.post(
        "/api/animals", json={"_id": supplied, "animal_name": "Rex", "__v": 9},
    )

    assert res.status_code == 201
    assigned = res.json()["id"]
    assert assigned != supplied
    stored = fake_collection.documents[ObjectId(assigned)]
    assert "__v" not in stored


async def test_create_malformed_json_returns_400(client, fake_collection):
    res = await client.post(
        "/api/animals", content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert res.status_code == 400
    assert fake_collection.calls == []


async def test_create_wrong_coordinate_shape_returns_400(client, fake_collection):
    res = await client.post("/api/animals", json={
        "animal_name": "Rex", "location": {"type": "Point", "coordinates": [1.0]},
    })

    assert res.status_code == 400
    assert fake_collection.calls == []


async def test_create_overflowing_coordinate_returns_400(client, fake_collection):
    res = await client.post(
        "/api/animals",
        content=b'{"animal_name":"Rex","location":{"type":"Point","coordinates":[1e400,0]}}',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"].startswith("body.location.coordinates")
    assert fake_collection.calls == []


async def test_create_birthdate_keeps_utc_offset(client):
    await client.post("/api/animals", json={
        "animal_name": "Rex", "birthdate": "2020-05-01T12:00:00Z",
    })

    listed = (await client.get("/api/animals")).json()

    assert listed[0]["birthdate"] == "2020-05-01T12:00:00Z"


async def test_create_store_failure_returns_500(client, fake_collection):
    fake_collection.fail_with = AutoReconnect("connection reset")

    res = await client.post("/api/animals", json={"animal_name": "Rex"})

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DATABASE_ERROR"
    assert res.json()["error"]["context"]["operation"] == "insert"
