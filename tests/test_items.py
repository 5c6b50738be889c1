"""Tests for the catalog listing"""


def test_list_all_items_in_insertion_order(client):
    response = client.get("/api/items")
    assert response.status_code == 200
    names = [item["name"] for item in response.json()]
    assert names == [
        "MacBook Pro M2",
        "iPhone 14",
        "Nike Air Jordan",
        "Levi's Jeans",
        "The Great Gatsby",
        "Sony Headphones",
    ]


def test_item_shape(client):
    item = client.get("/api/items", params={"search": "gatsby"}).json()[0]
    assert item["id"]
    assert item["description"] == "Classic American novel"
    assert item["price"] == 15
    assert item["category"] == "Books"
    assert item["stock"] == 30
    assert item["image"].startswith("https://")


def test_filter_by_category(client):
    items = client.get("/api/items", params={"category": "Clothing"}).json()
    assert {item["name"] for item in items} == {"Nike Air Jordan", "Levi's Jeans"}


def test_category_all_returns_every_category(client):
    items = client.get("/api/items", params={"category": "all"}).json()
    assert len(items) == 6
    assert {item["category"] for item in items} == {"Electronics", "Clothing", "Books"}


def test_price_range_is_inclusive(client):
    items = client.get("/api/items", params={"minPrice": 100, "maxPrice": 500}).json()
    assert {item["name"] for item in items} == {"Nike Air Jordan", "Sony Headphones"}
    assert all(100 <= item["price"] <= 500 for item in items)

    edges = client.get("/api/items", params={"minPrice": 150, "maxPrice": 200}).json()
    assert {item["price"] for item in edges} == {150, 200}


def test_price_bounds_apply_independently(client):
    cheap = client.get("/api/items", params={"maxPrice": 80}).json()
    assert {item["name"] for item in cheap} == {"Levi's Jeans", "The Great Gatsby"}

    pricey = client.get("/api/items", params={"minPrice": 999}).json()
    assert {item["name"] for item in pricey} == {"MacBook Pro M2", "iPhone 14"}


def test_search_is_case_insensitive_substring(client):
    items = client.get("/api/items", params={"search": "phone"}).json()
    assert {item["name"] for item in items} == {"iPhone 14", "Sony Headphones"}


def test_filters_combine(client):
    items = client.get(
        "/api/items",
        params={"category": "Electronics", "maxPrice": 1000, "search": "PHONE"},
    ).json()
    assert {item["name"] for item in items} == {"iPhone 14", "Sony Headphones"}


def test_blank_parameters_are_ignored(client):
    items = client.get(
        "/api/items",
        params={"category": "", "minPrice": "", "maxPrice": "", "search": ""},
    ).json()
    assert len(items) == 6


def test_non_numeric_price_is_rejected(client):
    response = client.get("/api/items", params={"minPrice": "cheap"})
    assert response.status_code == 422


def test_search_treats_like_wildcards_literally(client):
    assert client.get("/api/items", params={"search": "_"}).json() == []
    assert client.get("/api/items", params={"search": "%"}).json() == []
    assert client.get("/api/items", params={"search": "i_h"}).json() == []

    items = client.get("/api/items", params={"search": "'s j"}).json()
    assert [item["name"] for item in items] == ["Levi's Jeans"]
