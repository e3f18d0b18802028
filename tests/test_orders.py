import pytest
from sqlalchemy import func, select, update

from services.cart_service.models import ShoppingCart
from services.order_service.models import Order, OrderDetail, OrderStatus
from services.order_service.repository import OrderRepository
from services.order_service.schemas import OrderCreate
from services.order_service.service import OrderService, compute_totals
from services.product_service.models import Product


async def fill_cart(client, cart_id="abc123"):
    await client.post("/shoppingcart/add", json={"cart_id": cart_id, "product_id": 1, "quantity": 2})
    await client.post("/shoppingcart/add", json={"cart_id": cart_id, "product_id": 2, "quantity": 1})


async def checkout(client, headers, cart_id="abc123", tax_id=1, shipping_id=1):
    return await client.post(
        "/orders",
        json={"cart_id": cart_id, "tax_id": tax_id, "shipping_id": shipping_id},
        headers=headers,
    )


class TestCheckout:
    async def test_checkout_snapshots_cart_and_empties_it(self, client, catalog, auth_headers):
        await fill_cart(client)

        response = await checkout(client, auth_headers)

        assert response.status_code == 201
        order_id = response.json()["order_id"]

        summary = (await client.get(f"/orders/{order_id}", headers=auth_headers)).json()
        # 2 x 10.00 + 1 x 5.00, 10% tax, 20.00 shipping
        assert summary["total_amount"] == 47.5
        assert summary["status"] == OrderStatus.PLACED
        assert OrderStatus(summary["status"]).can_move_to(OrderStatus.CONFIRMED)
        assert [(i["product_id"], i["quantity"], i["unit_cost"]) for i in summary["order_items"]] == [
            (1, 2, 10.0),
            (2, 1, 5.0),
        ]
        assert (await client.get("/shoppingcart/abc123")).json()["rows"] == []

    async def test_discounted_price_is_charged(self, client, catalog, auth_headers):
        await client.post("/shoppingcart/add", json={"cart_id": "abc123", "product_id": 3, "quantity": 1})

        order_id = (await checkout(client, auth_headers, tax_id=2, shipping_id=2)).json()["order_id"]

        summary = (await client.get(f"/orders/{order_id}", headers=auth_headers)).json()
        assert summary["order_items"][0]["unit_cost"] == 15.0
        assert summary["total_amount"] == 25.0

    async def test_empty_cart_cannot_be_checked_out(self, client, catalog, auth_headers):
        response = await checkout(client, auth_headers, cart_id="empty")

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Cannot create an order from an empty cart"

    async def test_same_cart_cannot_be_checked_out_twice(self, client, catalog, auth_headers):
        await fill_cart(client)

        assert (await checkout(client, auth_headers)).status_code == 201
        assert (await checkout(client, auth_headers)).status_code == 400

        orders = (await client.get("/orders/inCustomer", headers=auth_headers)).json()["rows"]
        assert len(orders) == 1

    @pytest.mark.parametrize("tax_id, shipping_id", [(99, 1), (1, 99)])
    async def test_unknown_tax_or_shipping_keeps_cart(
        self, client, catalog, auth_headers, tax_id, shipping_id
    ):
        await fill_cart(client)

        response = await checkout(client, auth_headers, tax_id=tax_id, shipping_id=shipping_id)

        assert response.status_code == 400
        assert len((await client.get("/shoppingcart/abc123")).json()["rows"]) == 2

    async def test_checkout_requires_a_token(self, client, catalog):
        await fill_cart(client)

        response = await checkout(client, headers={})

        assert response.status_code == 401
        assert len((await client.get("/shoppingcart/abc123")).json()["rows"]) == 2

    async def test_later_price_changes_do_not_touch_the_order(self, client, db, catalog, auth_headers):
        await fill_cart(client)
        order_id = (await checkout(client, auth_headers)).json()["order_id"]

        await db.execute(update(Product).where(Product.product_id == 1).values(price=99.00, name="Renamed"))
        await db.commit()

        summary = (await client.get(f"/orders/{order_id}", headers=auth_headers)).json()
        first = summary["order_items"][0]
        assert first["unit_cost"] == 10.0
        assert first["product_name"] == "Arc d'Triomphe"
        assert summary["total_amount"] == 47.5

    async def test_later_discount_changes_do_not_touch_the_order(
        self, client, db, catalog, auth_headers
    ):
        await client.post("/shoppingcart/add", json={"cart_id": "abc123", "product_id": 3, "quantity": 2})
        order_id = (await checkout(client, auth_headers, tax_id=2, shipping_id=2)).json()["order_id"]

        await db.execute(
            update(Product).where(Product.product_id == 3).values(price=40.00, discounted_price=0)
        )
        await db.commit()

        summary = (await client.get(f"/orders/{order_id}", headers=auth_headers)).json()
        assert summary["order_items"][0]["unit_cost"] == 15.0
        assert summary["order_items"][0]["subtotal"] == 30.0
        assert summary["total_amount"] == 40.0

    async def test_oversized_ids_are_a_bad_request(self, client, catalog, auth_headers):
        await fill_cart(client)

        assert (await checkout(client, auth_headers, tax_id=10**19)).status_code == 400
        assert (await checkout(client, auth_headers, shipping_id=10**19)).status_code == 400
        assert (await client.get(f"/orders/{10**19}", headers=auth_headers)).status_code == 400
        assert (await client.get(f"/orders/shortDetail/{10**19}", headers=auth_headers)).status_code == 400
        assert len((await client.get("/shoppingcart/abc123")).json()["rows"]) == 2


class TestCheckoutAtomicity:
    async def test_failure_mid_checkout_leaves_nothing_behind(
        self, client, session_factory, catalog, customer, monkeypatch
    ):
        await fill_cart(client)

        original = OrderRepository.add_detail
        calls = []

        async def failing_add_detail(db, detail):
            calls.append(detail)
            if len(calls) == 2:
                raise RuntimeError("disk full")
            return await original(db, detail)

        monkeypatch.setattr(OrderRepository, "add_detail", staticmethod(failing_add_detail))

        async with session_factory() as session:
            with pytest.raises(RuntimeError):
                await OrderService.create_order(
                    session,
                    customer.customer_id,
                    OrderCreate(cart_id="abc123", tax_id=1, shipping_id=1),
                )

        async with session_factory() as session:
            assert await session.scalar(select(func.count()).select_from(Order)) == 0
            assert await session.scalar(select(func.count()).select_from(OrderDetail)) == 0
            lines = await session.scalar(
                select(func.count()).select_from(ShoppingCart).where(ShoppingCart.cart_id == "abc123")
            )
            assert lines == 2


class TestOrderReads:
    async def test_orders_in_customer(self, client, catalog, auth_headers):
        await fill_cart(client)
        order_id = (await checkout(client, auth_headers)).json()["order_id"]

        rows = (await client.get("/orders/inCustomer", headers=auth_headers)).json()["rows"]

        assert [row["order_id"] for row in rows] == [order_id]
        assert rows[0]["name"] == "Ada Lovelace"

    async def test_short_detail(self, client, catalog, auth_headers):
        await fill_cart(client)
        order_id = (await checkout(client, auth_headers)).json()["order_id"]

        response = await client.get(f"/orders/shortDetail/{order_id}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total_amount"] == 47.5
        assert body["shipped_on"] is None

    async def test_another_customers_order_is_not_found(
        self, client, catalog, auth_headers, other_auth_headers
    ):
        await fill_cart(client)
        order_id = (await checkout(client, auth_headers)).json()["order_id"]

        summary = await client.get(f"/orders/{order_id}", headers=other_auth_headers)
        short = await client.get(f"/orders/shortDetail/{order_id}", headers=other_auth_headers)
        missing = await client.get("/orders/9999", headers=other_auth_headers)

        assert summary.status_code == short.status_code == 404
        assert summary.json()["error"]["message"] == f"Order with id {order_id} does not exist"
        assert missing.json()["error"]["message"] == "Order with id 9999 does not exist"
        assert (await client.get("/orders/inCustomer", headers=other_auth_headers)).json()["rows"] == []

    async def test_reads_require_a_token(self, client):
        assert (await client.get("/orders/inCustomer")).status_code == 401
        assert (await client.get("/orders/1")).status_code == 401


class TestTotals:
    def test_compute_totals_rounds_to_cents(self):
        details = [OrderDetail(quantity=3, unit_cost=3.33)]

        totals = compute_totals(details, tax_percentage=8.25, shipping_cost=0)

        assert totals == {"subtotal": 9.99, "tax": 0.82, "shipping": 0.0, "total_amount": 10.81}


class TestOrderStatus:
    def test_statuses_only_move_forward(self):
        assert OrderStatus.PLACED.can_move_to(OrderStatus.CONFIRMED)
        assert OrderStatus.CONFIRMED.can_move_to(OrderStatus.CANCELLED)
        assert not OrderStatus.SHIPPED.can_move_to(OrderStatus.PLACED)
        assert not OrderStatus.PLACED.can_move_to(OrderStatus.PLACED)

    @pytest.mark.parametrize("final", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    def test_final_statuses_are_terminal(self, final):
        assert not any(final.can_move_to(target) for target in OrderStatus)
