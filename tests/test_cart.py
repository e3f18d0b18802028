import asyncio

import pytest


async def add(client, cart_id="abc123", product_id=1, quantity=1, attributes=""):
    return await client.post(
        "/shoppingcart/add",
        json={
            "cart_id": cart_id,
            "product_id": product_id,
            "quantity": quantity,
            "attributes": attributes,
        },
    )


class TestCartId:
    async def test_generated_ids_are_unique(self, client):
        first = (await client.get("/shoppingcart/generateUniqueId")).json()["cart_id"]
        second = (await client.get("/shoppingcart/generateUniqueId")).json()["cart_id"]

        assert first and second
        assert first != second


class TestAddItem:
    async def test_add_creates_line(self, client, catalog):
        response = await add(client, quantity=2)

        assert response.status_code == 201
        body = response.json()
        assert body["cart_id"] == "abc123"
        assert body["name"] == "Arc d'Triomphe"
        assert body["quantity"] == 2
        assert body["subtotal"] == 20.0

    async def test_same_product_merges_into_one_line(self, client, catalog):
        first = (await add(client, quantity=2)).json()
        second = (await add(client, quantity=3)).json()

        assert second["item_id"] == first["item_id"]
        assert second["quantity"] == 5

        cart = (await client.get("/shoppingcart/abc123")).json()
        assert len(cart["rows"]) == 1
        assert cart["rows"][0]["quantity"] == 5

    async def test_different_attributes_are_separate_lines(self, client, catalog):
        await add(client, attributes="S, White")
        await add(client, attributes="M, White")

        cart = (await client.get("/shoppingcart/abc123")).json()
        assert [row["attributes"] for row in cart["rows"]] == ["S, White", "M, White"]

    async def test_carts_are_independent(self, client, catalog):
        await add(client, cart_id="one")
        await add(client, cart_id="two", quantity=4)

        cart = (await client.get("/shoppingcart/one")).json()
        assert [row["quantity"] for row in cart["rows"]] == [1]

    @pytest.mark.parametrize("quantity", [0, -1])
    async def test_non_positive_quantity_is_rejected(self, client, catalog, quantity):
        response = await add(client, quantity=quantity)

        assert response.status_code == 400
        assert (await client.get("/shoppingcart/abc123")).json()["rows"] == []

    async def test_unknown_product_is_rejected(self, client, catalog):
        response = await add(client, product_id=999)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Product with id 999 does not exist"

    async def test_missing_cart_id_is_rejected(self, client, catalog):
        response = await client.post("/shoppingcart/add", json={"product_id": 1})
        assert response.status_code == 400


class TestGetCart:
    async def test_unknown_cart_is_empty(self, client, catalog):
        response = await client.get("/shoppingcart/nobody-has-this")

        assert response.status_code == 200
        assert response.json() == {"cart_id": "nobody-has-this", "rows": [], "total_amount": 0}

    async def test_total_uses_discounted_price(self, client, catalog):
        await add(client, product_id=1, quantity=2)
        await add(client, product_id=3, quantity=2)

        cart = (await client.get("/shoppingcart/abc123")).json()
        coat = cart["rows"][1]
        assert coat["unit_price"] == 15.0
        assert coat["subtotal"] == 30.0
        assert cart["total_amount"] == 50.0


class TestUpdateItem:
    async def test_update_sets_quantity(self, client, catalog):
        item_id = (await add(client, quantity=2)).json()["item_id"]

        response = await client.put(f"/shoppingcart/update/{item_id}", json={"quantity": 7})

        assert response.status_code == 200
        assert response.json()["quantity"] == 7
        assert response.json()["subtotal"] == 70.0

    async def test_update_missing_item(self, client, catalog):
        response = await client.put("/shoppingcart/update/12345", json={"quantity": 1})
        assert response.status_code == 404

    async def test_update_to_zero_is_rejected(self, client, catalog):
        item_id = (await add(client)).json()["item_id"]

        response = await client.put(f"/shoppingcart/update/{item_id}", json={"quantity": 0})

        assert response.status_code == 400
        cart = (await client.get("/shoppingcart/abc123")).json()
        assert cart["rows"][0]["quantity"] == 1


class TestRemoval:
    async def test_remove_product_twice(self, client, catalog):
        item_id = (await add(client)).json()["item_id"]

        first = await client.delete(f"/shoppingcart/removeProduct/{item_id}")
        second = await client.delete(f"/shoppingcart/removeProduct/{item_id}")

        assert first.status_code == second.status_code == 200
        assert first.json() == {"removed": 1}
        assert second.json() == {"removed": 0}

    async def test_empty_cart_twice(self, client, catalog):
        await add(client, product_id=1)
        await add(client, product_id=2)

        first = await client.delete("/shoppingcart/empty/abc123")
        second = await client.delete("/shoppingcart/empty/abc123")

        assert first.json() == {"rows": [], "removed": 2}
        assert second.json() == {"rows": [], "removed": 0}
        assert (await client.get("/shoppingcart/abc123")).json()["rows"] == []


class TestConcurrentAdds:
    async def test_simultaneous_adds_merge_into_one_line(self, client, catalog):
        responses = await asyncio.gather(*(add(client, quantity=2) for _ in range(5)))

        assert all(r.status_code == 201 for r in responses)
        assert len({r.json()["item_id"] for r in responses}) == 1
        cart = (await client.get("/shoppingcart/abc123")).json()
        assert [row["quantity"] for row in cart["rows"]] == [10]


class TestOversizedNumbers:
    async def test_oversized_quantity_on_add(self, client, catalog):
        response = await add(client, quantity=10**20)

        assert response.status_code == 400
        assert (await client.get("/shoppingcart/abc123")).json()["rows"] == []

    async def test_oversized_product_id_on_add(self, client, catalog):
        assert (await add(client, product_id=10**19)).status_code == 400

    async def test_oversized_quantity_on_update(self, client, catalog):
        item_id = (await add(client)).json()["item_id"]

        response = await client.put(f"/shoppingcart/update/{item_id}", json={"quantity": 10**20})

        assert response.status_code == 400
        assert (await client.get("/shoppingcart/abc123")).json()["rows"][0]["quantity"] == 1

    async def test_oversized_item_id(self, client, catalog):
        assert (await client.put(f"/shoppingcart/update/{10**19}", json={"quantity": 1})).status_code == 400
        assert (await client.delete(f"/shoppingcart/removeProduct/{10**19}")).status_code == 400
