import pytest

from app.services.store import get_dish_store


def create_dish(client, payload):
    resp = client.post("/dishes", json={"data": payload})
    assert resp.status_code == 201
    return resp.json()["data"]


def test_list_empty(client):
    resp = client.get("/dishes")
    assert resp.status_code == 200
    assert resp.json() == {"data": []}


def test_create_dish_appears_in_list(client, dish_payload):
    resp = client.post("/dishes", json={"data": dish_payload})
    assert resp.status_code == 201
    dish = resp.json()["data"]
    assert dish["id"]
    assert {k: dish[k] for k in dish_payload} == dish_payload

    listed = client.get("/dishes").json()["data"]
    assert [d["id"] for d in listed] == [dish["id"]]


def test_create_ignores_extra_fields_and_body_id(client, dish_payload):
    dish = create_dish(client, {**dish_payload, "id": "mine", "spicy": True})
    assert dish["id"] != "mine"
    assert "spicy" not in dish


@pytest.mark.parametrize("missing", ["name", "description", "price", "image_url"])
def test_create_requires_every_field(client, dish_payload, missing):
    payload = {k: v for k, v in dish_payload.items() if k != missing}
    resp = client.post("/dishes", json={"data": payload})
    assert resp.status_code == 400
    assert resp.json() == {"status": 400, "message": f"Dish must include a {missing}"}
    assert len(get_dish_store()) == 0


def test_create_blank_field(client, dish_payload):
    resp = client.post("/dishes", json={"data": {**dish_payload, "name": ""}})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Dish must include a name"


def test_create_without_body(client):
    resp = client.post("/dishes")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Dish must include a name"


@pytest.mark.parametrize("price", [-1, 4.5, "12"])
def test_create_invalid_price(client, dish_payload, price):
    resp = client.post("/dishes", json={"data": {**dish_payload, "price": price}})
    assert resp.status_code == 400
    assert "price" in resp.json()["message"]
    assert len(get_dish_store()) == 0


def test_create_zero_price_is_missing(client, dish_payload):
    resp = client.post("/dishes", json={"data": {**dish_payload, "price": 0}})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Dish must include a price"


def test_read_dish(client, dish_payload):
    dish = create_dish(client, dish_payload)
    resp = client.get(f"/dishes/{dish['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"data": dish}


def test_read_missing_dish(client):
    resp = client.get("/dishes/abc123")
    assert resp.status_code == 404
    assert resp.json() == {"status": 404, "message": "Dish id not found: abc123"}


def test_update_dish(client, dish_payload):
    dish = create_dish(client, dish_payload)
    changes = {"name": "Ravioli", "description": "y", "price": 15, "image_url": "v"}
    resp = client.put(f"/dishes/{dish['id']}", json={"data": changes})
    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": dish["id"], **changes}
    assert client.get(f"/dishes/{dish['id']}").json()["data"]["name"] == "Ravioli"


def test_update_with_matching_body_id(client, dish_payload):
    dish = create_dish(client, dish_payload)
    resp = client.put(f"/dishes/{dish['id']}", json={"data": {**dish_payload, "id": dish["id"]}})
    assert resp.status_code == 200


def test_update_with_mismatched_body_id(client, dish_payload):
    dish = create_dish(client, dish_payload)
    resp = client.put(
        f"/dishes/{dish['id']}",
        json={"data": {**dish_payload, "id": "other", "name": "Changed"}},
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == f"Data id other does not match dish id {dish['id']}"
    assert get_dish_store().find_by_id(dish["id"]).name == "Pasta"


def test_update_missing_dish_checked_before_body(client):
    resp = client.put("/dishes/nope", json={"data": {}})
    assert resp.status_code == 404


@pytest.mark.parametrize("price", [0, -5, 4.5])
def test_update_invalid_price_leaves_dish_unchanged(client, dish_payload, price):
    dish = create_dish(client, dish_payload)
    resp = client.put(f"/dishes/{dish['id']}", json={"data": {**dish_payload, "price": price}})
    assert resp.status_code == 400
    assert get_dish_store().find_by_id(dish["id"]).price == 12


def test_dishes_cannot_be_deleted(client, dish_payload):
    dish = create_dish(client, dish_payload)
    resp = client.delete(f"/dishes/{dish['id']}")
    assert resp.status_code == 405
    assert resp.json()["message"] == f"DELETE not allowed for /dishes/{dish['id']}"
    assert len(get_dish_store()) == 1


def test_whole_number_float_price_is_accepted(client, dish_payload):
    dish = create_dish(client, {**dish_payload, "price": 12.0})
    assert dish["price"] == 12
    stored = get_dish_store().find_by_id(dish["id"])
    assert isinstance(stored.price, int)


@pytest.mark.parametrize("missing", ["name", "description", "price", "image_url"])
def test_update_requires_every_field(client, dish_payload, missing):
    dish = create_dish(client, dish_payload)
    payload = {k: v for k, v in dish_payload.items() if k != missing}
    resp = client.put(f"/dishes/{dish['id']}", json={"data": payload})
    assert resp.status_code == 400
    assert resp.json() == {"status": 400, "message": f"Dish must include a {missing}"}
    assert get_dish_store().find_by_id(dish["id"]).model_dump() == dish


def test_update_checks_id_before_fields(client, dish_payload):
    dish = create_dish(client, dish_payload)
    resp = client.put(f"/dishes/{dish['id']}", json={"data": {"id": "x"}})
    assert resp.status_code == 400
    assert resp.json()["message"] == f"Data id x does not match dish id {dish['id']}"
