from conftest import product_payload


def create(client, headers, **overrides):
    response = client.post("/api/admin/products", json=product_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_public_listing_orders_by_category_then_name(client, admin_headers):
    create(client, admin_headers, name="Velvet For Him", category="For Him")
    create(client, admin_headers, name="VIP For Her", category="For Her")
    create(client, admin_headers, name="Good Girl Inspired", category="For Her")
    create(client, admin_headers, name="Golden Moment", category="New Arrivals")

    names = [p["name"] for p in client.get("/api/products").json()]

    assert names == ["Good Girl Inspired", "VIP For Her", "Velvet For Him", "Golden Moment"]


def test_product_fields(client, admin_headers):
    create(client, admin_headers)

    product = client.get("/api/products").json()[0]

    assert product["price"] == 119.99
    assert product["stock_quantity"] == 100
    assert product["featured"] is True
    assert product["active"] is True


def test_inactive_products_hidden_from_public_but_not_admin(client, admin_headers):
    kept = create(client, admin_headers, name="Royal For Him", category="For Him",
                  description="Royal oud and leather")
    hidden = create(client, admin_headers, name="Velvet For Him", category="For Him",
                    description="Velvet amber evening scent")

    response = client.patch(f"/api/admin/products/{hidden['id']}/deactivate", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["active"] is False

    public = [p["id"] for p in client.get("/api/products").json()]
    by_category = [p["id"] for p in client.get("/api/products/For Him").json()]
    searched = [p["id"] for p in client.get("/api/products/search/velvet").json()]
    admin = client.get("/api/admin/products", headers=admin_headers).json()

    assert public == [kept["id"]]
    assert by_category == [kept["id"]]
    assert searched == []
    assert {p["id"] for p in admin} == {kept["id"], hidden["id"]}
    # active rows first
    assert admin[0]["id"] == kept["id"]


def test_restore_product(client, admin_headers):
    product = create(client, admin_headers)
    client.patch(f"/api/admin/products/{product['id']}/deactivate", headers=admin_headers)

    response = client.patch(f"/api/admin/products/{product['id']}/restore", headers=admin_headers)

    assert response.json()["active"] is True
    assert len(client.get("/api/products").json()) == 1


def test_category_filter(client, admin_headers):
    create(client, admin_headers, name="Royal For Him", category="For Him")
    create(client, admin_headers, name="VIP For Her", category="For Her")

    response = client.get("/api/products/For Her")

    assert [p["name"] for p in response.json()] == ["VIP For Her"]


def test_search_is_case_insensitive_across_fields(client, admin_headers):
    create(client, admin_headers, name="Golden Moment", category="New Arrivals",
           description="Your golden moment awaits")
    create(client, admin_headers, name="Travel Size", category="New Arrivals",
           description="Convenient WARM notes")
    create(client, admin_headers, name="Royal For Him", category="For Him", description="Royal")

    assert [p["name"] for p in client.get("/api/products/search/GOLDEN").json()] == ["Golden Moment"]
    assert [p["name"] for p in client.get("/api/products/search/warm").json()] == ["Travel Size"]
    assert len(client.get("/api/products/search/arrivals").json()) == 2


def test_search_treats_wildcards_literally(client, admin_headers):
    create(client, admin_headers, name="Golden Moment", category="New Arrivals",
           description="Your golden moment awaits")
    create(client, admin_headers, name="VIP 100% For Her", category="For Her",
           description="Soft florals")

    assert client.get("/api/products/search/_").json() == []
    assert [p["name"] for p in client.get("/api/products/search/%25").json()] == ["VIP 100% For Her"]
    assert client.get("/api/products/search/Golden%25Moment").json() == []
    assert client.get("/api/products/search/Gold_n").json() == []


def test_update_is_full_replace(client, admin_headers):
    product = create(client, admin_headers, description="Old", featured=True, stock_quantity=5)

    response = client.put(
        f"/api/admin/products/{product['id']}",
        json={"name": "Velvet Torrida", "category": "For Her", "size": "100ml", "price": 199.99},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["size"] == "100ml"
    assert body["price"] == 199.99
    # omitted fields fall back to defaults, not the previous values
    assert body["description"] == ""
    assert body["featured"] is False
    assert body["stock_quantity"] == 100


def test_update_unknown_product(client, admin_headers):
    response = client.put("/api/admin/products/999", json=product_payload(), headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"detail": "Product not found"}


def test_create_requires_core_fields(client, admin_headers):
    for missing in ["name", "category", "size", "price"]:
        payload = product_payload()
        del payload[missing]
        response = client.post("/api/admin/products", json=payload, headers=admin_headers)
        assert response.status_code == 400, missing


def test_create_rejects_negative_price_and_unknown_category(client, admin_headers):
    negative = client.post("/api/admin/products", json=product_payload(price=-1), headers=admin_headers)
    unknown = client.post("/api/admin/products", json=product_payload(category="Candles"), headers=admin_headers)

    assert negative.status_code == 400
    assert unknown.status_code == 400


def test_free_product_is_allowed(client, admin_headers):
    product = create(client, admin_headers, price=0)

    assert product["price"] == 0


def test_hard_delete(client, admin_headers):
    product = create(client, admin_headers)

    response = client.delete(f"/api/admin/products/{product['id']}", headers=admin_headers)
    assert response.status_code == 200

    assert client.get(f"/api/admin/products/{product['id']}", headers=admin_headers).status_code == 404
    assert client.delete(f"/api/admin/products/{product['id']}", headers=admin_headers).status_code == 404


def test_admin_routes_require_admin(client, customer_headers):
    assert client.get("/api/admin/products").status_code == 401
    response = client.get("/api/admin/products", headers=customer_headers)
    assert response.status_code == 403
    assert response.json() == {"detail": "Admin access required"}
    assert client.post("/api/admin/products", json=product_payload(), headers=customer_headers).status_code == 403
