from fastapi.testclient import TestClient

WIDGET = {
    "name": "Widget",
    "description": "Small widget",
    "category": "Parts",
    "quantity": "10",
    "price": "2.50",
}


def test_list_seeded_products(client: TestClient, alice_headers: dict) -> None:
    response = client.get("/api/v1/products/", headers=alice_headers)

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data] == [1, 2, 3]
    assert data[0]["name"] == "Laptop Dell"
    assert data[0]["stock_value"] == 6000.0


def test_missing_api_key_rejected(client: TestClient) -> None:
    response = client.get("/api/v1/products/")
    assert response.status_code in (401, 403)


def test_invalid_api_key_rejected(client: TestClient) -> None:
    response = client.get("/api/v1/products/", headers={"X-API-Key": "wrong"})
    assert response.status_code == 401


def test_product_lifecycle(client: TestClient, alice_headers: dict) -> None:
    # 1. Create
    response = client.post("/api/v1/products/", json=WIDGET, headers=alice_headers)
    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 4
    assert created["quantity"] == 10
    assert created["price"] == 2.5

    # 2. Read back
    response = client.get("/api/v1/products/4", headers=alice_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Widget"

    # 3. Update in place
    response = client.put(
        "/api/v1/products/4",
        json={**WIDGET, "name": "Widget XL", "quantity": 12},
        headers=alice_headers,
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Widget XL"
    assert response.json()["quantity"] == 12

    products = client.get("/api/v1/products/", headers=alice_headers).json()
    assert [p["id"] for p in products] == [1, 2, 3, 4]
    assert products[3]["name"] == "Widget XL"

    # 4. Delete
    response = client.delete("/api/v1/products/4", headers=alice_headers)
    assert response.status_code == 204

    # 5. Verify it's gone
    response = client.get("/api/v1/products/4", headers=alice_headers)
    assert response.status_code == 404

    # 6. Ids are not reused
    response = client.post("/api/v1/products/", json=WIDGET, headers=alice_headers)
    assert response.json()["id"] == 5


def test_create_reports_all_validation_errors(client: TestClient, alice_headers: dict) -> None:
    response = client.post(
        "/api/v1/products/",
        json={"name": "", "quantity": "abc", "price": "-5"},
        headers=alice_headers,
    )

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert errors == ["empty_name", "invalid_quantity", "invalid_price"]

    products = client.get("/api/v1/products/", headers=alice_headers).json()
    assert len(products) == 3


def test_update_with_invalid_input_keeps_product(client: TestClient, alice_headers: dict) -> None:
    response = client.put(
        "/api/v1/products/1", json={**WIDGET, "quantity": "0"}, headers=alice_headers
    )
    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == ["invalid_quantity"]

    product = client.get("/api/v1/products/1", headers=alice_headers).json()
    assert product["name"] == "Laptop Dell"


def test_update_and_delete_unknown_product(client: TestClient, alice_headers: dict) -> None:
    before = client.get("/api/v1/products/", headers=alice_headers).json()

    response = client.put("/api/v1/products/99", json=WIDGET, headers=alice_headers)
    assert response.status_code == 404

    response = client.delete("/api/v1/products/99", headers=alice_headers)
    assert response.status_code == 404

    after = client.get("/api/v1/products/", headers=alice_headers).json()
    assert after == before


def test_search_products(client: TestClient, alice_headers: dict) -> None:
    response = client.get("/api/v1/products/?q=accesorios", headers=alice_headers)

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Mouse Logitech", "Teclado Mecánico"]


def test_export_csv(client: TestClient, alice_headers: dict) -> None:
    response = client.get("/api/v1/products/export/csv", headers=alice_headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="inventory.csv"' in response.headers["content-disposition"]

    lines = response.text.strip().splitlines()
    assert lines[0] == "id,name,description,category,quantity,price,stock_value"
    assert lines[1] == "1,Laptop Dell,Laptop para oficina,Electrónicos,5,1200.00,6000.00"
    assert len(lines) == 4


def test_each_client_starts_with_fresh_store(client: TestClient, alice_headers: dict) -> None:
    client.delete("/api/v1/products/1", headers=alice_headers)
    assert len(client.get("/api/v1/products/", headers=alice_headers).json()) == 2
