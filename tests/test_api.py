"""HTTP-level tests: status codes, envelope shape and outcome mapping."""

from fastapi.testclient import TestClient

from customer_location_api.app.core import messages
from customer_location_api.app.core.store import get_store

API = "/api/v1"


def _post_customer(client, first="A", last="B", addresses=()):
    body = {"firstName": first, "lastName": last, "locations": [{"address": a} for a in addresses]}
    return client.post(f"{API}/customers/", json=body)


# ───────────────────────── customers ───────────────────────── #

def test_list_customers_empty(client):
    response = client.get(f"{API}/customers/")

    assert response.status_code == 200
    assert response.json() == {"statusCode": 200, "message": messages.NO_CUSTOMERS, "result": []}


def test_create_customer_scenario(client):
    first = _post_customer(client, "A", "B", ["Main St"])
    second = _post_customer(client, "C", "D", ["main st"])

    assert first.status_code == 201
    body = first.json()
    assert body["statusCode"] == 201
    assert body["message"] == messages.CUSTOMER_ADD
    assert body["result"] == {
        "id": 1,
        "firstName": "A",
        "lastName": "B",
        "locations": [{"id": 1, "address": "Main St"}],
    }

    result = second.json()["result"]
    assert result["id"] == 2
    assert result["locations"] == [{"id": 1, "address": "main st"}]
    assert len(client.get(f"{API}/locations/").json()["result"]) == 1


def test_create_customer_ignores_client_ids(client):
    body = {"id": 99, "firstName": "A", "lastName": "B", "locations": [{"id": 50, "address": "Main St"}]}
    result = client.post(f"{API}/customers/", json=body).json()["result"]

    assert result["id"] == 1
    assert result["locations"][0]["id"] == 1


def test_create_customer_null_locations(client):
    response = client.post(f"{API}/customers/", json={"firstName": "A", "lastName": "B", "locations": None})

    assert response.status_code == 201
    assert response.json()["result"]["locations"] == []


def test_create_customer_validation(client):
    for body in (
        {"lastName": "B"},
        {"firstName": "", "lastName": "B"},
        {"firstName": "A", "lastName": "   "},
        {"firstName": "A", "lastName": "B", "locations": [{"address": ""}]},
    ):
        response = client.post(f"{API}/customers/", json=body)
        assert response.status_code == 400
        assert response.json() == {"statusCode": 400, "message": messages.DATA_FORMAT, "result": None}

    assert client.get(f"{API}/customers/").json()["result"] == []


def test_get_customer(client):
    _post_customer(client)

    found = client.get(f"{API}/customers/1")
    missing = client.get(f"{API}/customers/2")

    assert found.status_code == 200
    assert found.json()["message"] == messages.CUSTOMER_DETAILS
    assert missing.status_code == 404
    assert missing.json() == {"statusCode": 404, "message": messages.CUSTOMER_NOT_FOUND, "result": None}


def test_list_customers(client):
    _post_customer(client, "A", "B")
    _post_customer(client, "C", "D")

    body = client.get(f"{API}/customers/").json()

    assert body["message"] == messages.CUSTOMER_LIST
    assert [c["firstName"] for c in body["result"]] == ["A", "C"]


def test_update_customer(client):
    _post_customer(client, "A", "B", ["Main St"])

    response = client.put(
        f"{API}/customers/1",
        json={"firstName": "Anna", "lastName": "Bell", "locations": [{"address": "MAIN ST"}, {"address": "Oak Ave"}]},
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["firstName"] == "Anna"
    assert [loc["id"] for loc in result["locations"]] == [1, 2]


def test_update_customer_not_found(client):
    response = client.put(f"{API}/customers/5", json={"firstName": "A", "lastName": "B"})

    assert response.status_code == 404
    assert response.json()["message"] == messages.CUSTOMER_NOT_FOUND


def test_delete_customer_flow(client):
    _post_customer(client, "A", "B", ["Main St"])

    blocked = client.delete(f"{API}/customers/1")
    assert blocked.status_code == 200
    assert blocked.json()["message"] == messages.CUSTOMER_WITH_LOCATIONS
    assert client.get(f"{API}/customers/1").status_code == 200

    detached = client.delete(f"{API}/customers/1/locations/1")
    assert detached.status_code == 200
    assert detached.json()["message"] == messages.CUSTOMER_LOCATION_DELETE

    deleted = client.delete(f"{API}/customers/1")
    assert deleted.status_code == 200
    assert deleted.json() == {"statusCode": 200, "message": messages.CUSTOMER_DELETE, "result": None}
    assert client.get(f"{API}/customers/1").status_code == 404


def test_delete_customer_not_found(client):
    response = client.delete(f"{API}/customers/3")

    assert response.status_code == 404
    assert response.json()["message"] == messages.CUSTOMER_NOT_FOUND


def test_delete_customer_location_not_found(client):
    _post_customer(client, "A", "B", ["Main St"])

    no_location = client.delete(f"{API}/customers/1/locations/7")
    no_customer = client.delete(f"{API}/customers/7/locations/1")

    assert no_location.status_code == 404
    assert no_location.json()["message"] == messages.CUSTOMER_LOCATION_NOT_FOUND
    assert no_customer.status_code == 404
    assert no_customer.json()["message"] == messages.CUSTOMER_NOT_FOUND


# ───────────────────────── locations ───────────────────────── #

def test_create_location_and_duplicate(client):
    created = client.post(f"{API}/locations/", json={"address": "Main St"})
    duplicate = client.post(f"{API}/locations/", json={"address": "MAIN st"})

    assert created.status_code == 201
    assert created.json()["result"] == {"id": 1, "address": "Main St"}
    assert duplicate.status_code == 200
    assert duplicate.json()["message"] == messages.LOCATION_EXIST
    assert len(client.get(f"{API}/locations/").json()["result"]) == 1


def test_create_location_validation(client):
    response = client.post(f"{API}/locations/", json={})

    assert response.status_code == 400
    assert response.json()["message"] == messages.DATA_FORMAT


def test_list_and_get_locations(client):
    assert client.get(f"{API}/locations/").json()["message"] == messages.NO_LOCATIONS
    client.post(f"{API}/locations/", json={"address": "Main St"})

    listed = client.get(f"{API}/locations/").json()
    assert listed["message"] == messages.LOCATION_LIST
    assert listed["result"] == [{"id": 1, "address": "Main St"}]
    assert client.get(f"{API}/locations/1").json()["message"] == messages.LOCATION_DETAILS
    assert client.get(f"{API}/locations/2").status_code == 404


def test_update_location_propagates(client):
    _post_customer(client, "A", "B", ["Main St"])
    _post_customer(client, "C", "D", ["Main St", "Oak Ave"])

    response = client.put(f"{API}/locations/1", json={"address": "High St"})

    assert response.status_code == 200
    assert response.json()["message"] == messages.LOCATION_UPDATE
    assert response.json()["result"] == {"id": 1, "address": "High St"}
    customers = client.get(f"{API}/customers/").json()["result"]
    assert customers[0]["locations"] == [{"id": 1, "address": "High St"}]
    assert customers[1]["locations"] == [{"id": 1, "address": "High St"}, {"id": 2, "address": "Oak Ave"}]


def test_update_location_conflict_and_not_found(client):
    client.post(f"{API}/locations/", json={"address": "Main St"})
    client.post(f"{API}/locations/", json={"address": "Oak Ave"})

    conflict = client.put(f"{API}/locations/1", json={"address": "OAK AVE"})
    missing = client.put(f"{API}/locations/9", json={"address": "Elm"})

    assert conflict.status_code == 200
    assert conflict.json()["message"] == messages.LOCATION_EXIST
    assert client.get(f"{API}/locations/1").json()["result"]["address"] == "Main St"
    assert missing.status_code == 404
    assert missing.json()["message"] == messages.LOCATION_NOT_FOUND


def test_delete_location_cascades(client):
    _post_customer(client, "A", "B", ["Main St"])

    deleted = client.delete(f"{API}/locations/1")

    assert deleted.status_code == 200
    assert deleted.json()["message"] == messages.LOCATION_DELETE
    assert client.get(f"{API}/locations/1").status_code == 404
    assert client.get(f"{API}/customers/1").json()["result"]["locations"] == []
    assert client.delete(f"{API}/locations/1").status_code == 404


# ───────────────────────── ambient behaviour ───────────────────────── #

def test_apps_do_not_share_state(client):
    from customer_location_api.app.main import create_app

    _post_customer(client, "A", "B")
    other = TestClient(create_app())

    assert other.get(f"{API}/customers/").json()["result"] == []


def test_unknown_route_uses_envelope(client):
    response = client.get(f"{API}/nothing-here")

    assert response.status_code == 404
    assert response.json()["statusCode"] == 404


def test_unexpected_error_returns_500_envelope(app):
    class BrokenStore:
        def list_customers(self):
            raise RuntimeError("boom")

    app.dependency_overrides[get_store] = lambda: BrokenStore()
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get(f"{API}/customers/")

    assert response.status_code == 500
    assert response.json() == {"statusCode": 500, "message": messages.INTERNAL_ERROR, "result": None}
