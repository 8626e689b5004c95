# tests/test_products_api.py
from fastapi.testclient import TestClient
from app.database import InMemoryProductStore
from app.main import create_app

store = InMemoryProductStore()
client = TestClient(create_app(store))

WIDGET = {"id": "p1", "name": "Widget", "description": "A widget", "price": 9.99,
          "image": "img.png", "category": "tools"}


def reset():
    store.clear()


def test_widget_lifecycle():
    reset()
    r = client.post("/api/products", json=WIDGET)
    assert r.status_code == 201
    assert r.json() == WIDGET

    r = client.get("/api/products/p1")
    assert r.status_code == 200
    assert r.json() == WIDGET

    r = client.put("/api/products/p1", json={"price": 19.99})
    assert r.status_code == 200
    assert r.json() == dict(WIDGET, price=19.99)

    r = client.delete("/api/products/p1")
    assert r.status_code == 200
    assert r.content == b""

    r = client.get("/api/products/p1")
    assert r.status_code == 404
    body = r.json()
    assert body["statusCode"] == 404
    assert "p1" in body["message"]


def test_list_empty_store():
    reset()
    r = client.get("/api/products")
    assert r.status_code == 200
    assert r.json() == []


def test_list_returns_created_products():
    reset()
    client.post("/api/products", json=WIDGET)
    client.post("/api/products", json=dict(WIDGET, id="p2", name="Gadget"))
    r = client.get("/api/products")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == ["p1", "p2"]


def test_duplicate_create_rejected():
    reset()
    assert client.post("/api/products", json=WIDGET).status_code == 201
    r = client.post("/api/products", json=dict(WIDGET, name="Other"))
    assert r.status_code == 400
    assert r.json() == {"statusCode": 400, "message": "Product with ID p1 already exists"}
    # first product left untouched
    assert client.get("/api/products/p1").json()["name"] == "Widget"


def test_create_with_zero_price():
    reset()
    r = client.post("/api/products", json=dict(WIDGET, price=0))
    assert r.status_code == 400
    assert r.json()["statusCode"] == 400
    assert "All fields are required" in r.json()["message"]
    assert client.get("/api/products").json() == []


def test_create_with_missing_field():
    reset()
    payload = dict(WIDGET)
    del payload["image"]
    r = client.post("/api/products", json=payload)
    assert r.status_code == 400
    assert r.json()["message"].startswith("All fields are required")


def test_create_with_malformed_body():
    reset()
    r = client.post("/api/products", json=dict(WIDGET, price="cheap"))
    assert r.status_code == 400
    body = r.json()
    assert body["statusCode"] == 400
    assert "price" in body["message"]

    r = client.post("/api/products", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400


def test_unknown_id_is_404_everywhere():
    reset()
    assert client.get("/api/products/nope").status_code == 404
    assert client.put("/api/products/nope", json={"name": "n"}).status_code == 404
    r = client.delete("/api/products/nope")
    assert r.status_code == 404
    assert r.json() == {"statusCode": 404, "message": "Product not found with id nope"}


def test_update_ignores_payload_id():
    reset()
    client.post("/api/products", json=WIDGET)
    r = client.put("/api/products/p1", json={"id": "other", "name": "n"})
    assert r.status_code == 200
    assert r.json()["id"] == "p1"
    assert r.json()["name"] == "n"
    assert client.get("/api/products/other").status_code == 404


def test_empty_update_changes_nothing():
    reset()
    client.post("/api/products", json=WIDGET)
    r = client.put("/api/products/p1", json={})
    assert r.status_code == 200
    assert r.json() == WIDGET


def test_update_with_negative_price():
    reset()
    client.post("/api/products", json=WIDGET)
    r = client.put("/api/products/p1", json={"price": -1, "name": "Cheaper"})
    assert r.status_code == 400
    assert r.json() == {"statusCode": 400, "message": "Price must be greater than 0"}
    assert client.get("/api/products/p1").json() == WIDGET


def test_non_finite_price_rejected_over_http():
    reset()
    body = ('{"id": "n1", "name": "Widget", "description": "A widget", "price": NaN,'
            ' "image": "img.png", "category": "tools"}')
    r = client.post("/api/products", content=body, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["statusCode"] == 400
    assert client.get("/api/products").json() == []

    client.post("/api/products", json=WIDGET)
    for literal in ("NaN", "Infinity"):
        r = client.put("/api/products/p1", content='{"price": %s}' % literal,
                       headers={"Content-Type": "application/json"})
        assert r.status_code == 400
    assert client.get("/api/products/p1").json() == WIDGET
