"""Order Routes — pagination envelope, lenient parameters and 404 handling."""


async def test_second_page(client, seed_northwind):
    res = await client.get("/api/v1/orders", params={"page": 2, "page_size": 2})
    assert res.status_code == 200
    body = res.json()
    assert [o["order_id"] for o in body["items"]] == [10250, 10251]
    assert body["page"] == 2
    assert body["page_size"] == 2
    assert body["total_items"] == 5
    assert body["total_pages"] == 3
    assert body["has_next"] is True
    assert body["has_prev"] is True


async def test_last_page(client, seed_northwind):
    body = (await client.get("/api/v1/orders?page=3&page_size=2")).json()
    assert [o["order_id"] for o in body["items"]] == [10252]
    assert body["has_next"] is False


async def test_unparsable_params_fall_back_to_defaults(client, seed_northwind):
    res = await client.get("/api/v1/orders?page=abc&page_size=-5")
    assert res.status_code == 200
    body = res.json()
    assert body["page"] == 1
    assert body["page_size"] == 10
    assert len(body["items"]) == 5
    assert body["total_pages"] == 1


async def test_listing_items_have_status(client, seed_northwind):
    body = (await client.get("/api/v1/orders")).json()
    assert [o["status"] for o in body["items"]] == [
        "Shipped", "Late", "Pending", "Shipped", "Pending",
    ]


async def test_empty_listing(client):
    body = (await client.get("/api/v1/orders")).json()
    assert body["items"] == []
    assert body["total_pages"] == 0
    assert body["has_next"] is False
    assert body["has_prev"] is False


async def test_get_order_detail(client, seed_northwind):
    res = await client.get("/api/v1/orders/10249")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Late"
    assert body["total"] == 114.0
    assert body["lines"] == [{
        "product_id": 2, "product_name": "Chang", "unit_price": 15.2,
        "quantity": 10, "discount": 0.25, "net_amount": 114.0,
    }]


async def test_missing_order_returns_404(client, seed_northwind):
    res = await client.get("/api/v1/orders/99999")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["context"]["entity_id"] == "99999"


async def test_non_numeric_order_id_is_validation_error(client):
    res = await client.get("/api/v1/orders/abc")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_huge_page_number_returns_empty_page(client, seed_northwind):
    res = await client.get("/api/v1/orders?page=99999999999999999999&page_size=10")
    assert res.status_code == 200
    body = res.json()
    assert body["items"] == []
    assert body["total_items"] == 5
    assert body["has_next"] is False
    assert body["has_prev"] is True


async def test_huge_order_id_returns_404(client, seed_northwind):
    res = await client.get("/api/v1/orders/99999999999999999999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
