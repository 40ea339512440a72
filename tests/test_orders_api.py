import pytest

from app.models import OrderStatus
from app.services.store import get_order_store


def create_order(client, payload):
    resp = client.post("/orders", json={"data": payload})
    assert resp.status_code == 201
    return resp.json()["data"]


def update_payload(order, **changes):
    data = {
        "deliverTo": order["deliverTo"],
        "mobileNumber": order["mobileNumber"],
        "dishes": order["dishes"],
        "status": order["status"],
    }
    data.update(changes)
    return {"data": data}


def test_create_order_starts_pending(client, order_payload):
    order = create_order(client, order_payload)
    assert order["id"]
    assert order["status"] == "pending"
    assert order["deliverTo"] == "A"
    assert order["mobileNumber"] == "555"
    assert order["dishes"] == order_payload["dishes"]


def test_create_ignores_requested_status(client, order_payload):
    order = create_order(client, {**order_payload, "status": "delivered"})
    assert order["status"] == "pending"


@pytest.mark.parametrize("missing", ["deliverTo", "mobileNumber", "dishes"])
def test_create_requires_fields(client, order_payload, missing):
    payload = {k: v for k, v in order_payload.items() if k != missing}
    resp = client.post("/orders", json={"data": payload})
    assert resp.status_code == 400
    assert resp.json()["message"] == f"Order must include a {missing}"
    assert len(get_order_store()) == 0


@pytest.mark.parametrize("dishes", [[], "not a list"])
def test_create_requires_at_least_one_dish(client, order_payload, dishes):
    resp = client.post("/orders", json={"data": {**order_payload, "dishes": dishes}})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Order must include at least one dish"


@pytest.mark.parametrize("quantity", [0, -1, 2.5, "2"])
def test_create_invalid_quantity(client, order_payload, quantity):
    dishes = [{"id": "a", "quantity": 1}, {"id": "b", "quantity": quantity}]
    resp = client.post("/orders", json={"data": {**order_payload, "dishes": dishes}})
    assert resp.status_code == 400
    assert resp.json()["message"] == (
        "Dish 1 must have a quantity that is an integer greater than 0"
    )
    assert len(get_order_store()) == 0


def test_list_and_read_orders(client, order_payload):
    order = create_order(client, order_payload)
    assert client.get("/orders").json() == {"data": [order]}
    resp = client.get(f"/orders/{order['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"data": order}


def test_read_missing_order(client):
    resp = client.get("/orders/missing-id")
    assert resp.status_code == 404
    assert "missing-id" in resp.json()["message"]


def test_update_status_then_delete_is_rejected(client, order_payload):
    order = create_order(client, order_payload)
    resp = client.put(f"/orders/{order['id']}", json=update_payload(order, status="preparing"))
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "preparing"
    assert get_order_store().find_by_id(order["id"]).status is OrderStatus.PREPARING

    resp = client.delete(f"/orders/{order['id']}")
    assert resp.status_code == 400
    assert resp.json()["message"] == "An order cannot be deleted unless it is pending"
    assert get_order_store().find_by_id(order["id"]) is not None


def test_update_replaces_fields(client, order_payload):
    order = create_order(client, order_payload)
    dishes = [{"id": "x", "name": "Soup", "quantity": 5}]
    resp = client.put(
        f"/orders/{order['id']}",
        json=update_payload(order, deliverTo="B", mobileNumber="777", dishes=dishes),
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["id"] == order["id"]
    assert data["deliverTo"] == "B"
    assert data["mobileNumber"] == "777"
    assert data["dishes"] == dishes


@pytest.mark.parametrize("status", ["pending", "preparing", "out-for-delivery"])
def test_open_statuses_are_accepted(client, order_payload, status):
    order = create_order(client, order_payload)
    resp = client.put(f"/orders/{order['id']}", json=update_payload(order, status=status))
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == status


def test_update_to_delivered_is_rejected(client, order_payload):
    order = create_order(client, order_payload)
    resp = client.put(f"/orders/{order['id']}", json=update_payload(order, status="delivered"))
    assert resp.status_code == 400
    assert resp.json()["message"] == "A delivered order cannot be changed"
    assert get_order_store().find_by_id(order["id"]).status is OrderStatus.PENDING


def test_update_invalid_status(client, order_payload):
    order = create_order(client, order_payload)
    resp = client.put(f"/orders/{order['id']}", json=update_payload(order, status="lost"))
    assert resp.status_code == 400
    assert resp.json()["message"] == (
        "Order must have a status of pending, preparing, out-for-delivery"
    )


def test_update_requires_status(client, order_payload):
    order = create_order(client, order_payload)
    body = update_payload(order)
    del body["data"]["status"]
    resp = client.put(f"/orders/{order['id']}", json=body)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Order must include a status"


def test_update_id_mismatch(client, order_payload):
    order = create_order(client, order_payload)
    resp = client.put(f"/orders/{order['id']}", json=update_payload(order, id="nope"))
    assert resp.status_code == 400
    assert resp.json()["message"] == f"Data id nope does not match order id {order['id']}"


def test_update_without_body_id(client, order_payload):
    order = create_order(client, order_payload)
    resp = client.put(f"/orders/{order['id']}", json=update_payload(order, status="preparing"))
    assert resp.status_code == 200


def test_update_invalid_dishes_checked_before_id(client, order_payload):
    order = create_order(client, order_payload)
    body = update_payload(order, id="nope", dishes=[{"quantity": 0}])
    resp = client.put(f"/orders/{order['id']}", json=body)
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Dish 0 ")


def test_update_missing_order(client, order_payload):
    resp = client.put("/orders/none", json={"data": {**order_payload, "status": "pending"}})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Order id not found: none"


def test_delete_pending_order(client, order_payload):
    order = create_order(client, order_payload)
    resp = client.delete(f"/orders/{order['id']}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/orders/{order['id']}").status_code == 404
    assert client.get("/orders").json() == {"data": []}


def test_delete_missing_order(client):
    resp = client.delete("/orders/none")
    assert resp.status_code == 404


def test_delivered_order_is_frozen(client, seeded):
    delivered = next(
        o for o in client.get("/orders").json()["data"] if o["status"] == "delivered"
    )
    for status in ("pending", "preparing", "out-for-delivery"):
        resp = client.put(
            f"/orders/{delivered['id']}", json=update_payload(delivered, status=status)
        )
        assert resp.status_code == 400
        assert resp.json()["message"] == "A delivered order cannot be changed"

    resp = client.delete(f"/orders/{delivered['id']}")
    assert resp.status_code == 400


def test_whole_number_float_quantity_is_accepted(client, order_payload):
    dishes = [{**order_payload["dishes"][0], "quantity": 3.0}]
    order = create_order(client, {**order_payload, "dishes": dishes})
    assert order["dishes"][0]["quantity"] == 3
    stored = get_order_store().find_by_id(order["id"])
    assert isinstance(stored.dishes[0].quantity, int)
