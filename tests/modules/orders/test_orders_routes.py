# -*- coding: utf-8 -*-
"""
Tests de endpoints de pedidos (/api/orders).

Autor: Equipo Tienda
Fecha: 2026-03-15
"""

from uuid import uuid4

import pytest


class TestCreateOrderEndpoint:
    async def test_creates_order(self, async_client, make_product, shipping_payload):
        mate = await make_product(price=1_500_000)

        resp = await async_client.post(
            "/api/orders",
            json={
                "email": "comprador@gmail.com",
                "items": [{"productId": str(mate.id), "quantity": 1}],
                "shipping": shipping_payload(zone="pickup"),
            },
        )

        assert resp.status_code == 201, resp.text
        body = resp.json()
        assert body["status"] == "pending"
        assert body["orderNumber"].startswith("ORD-")
        assert body["total"] == 1_500_000
        assert body["shippingCost"] == 0
        assert body["items"][0]["productId"] == str(mate.id)

    async def test_unavailable_product_is_400(self, async_client, shipping_payload):
        resp = await async_client.post(
            "/api/orders",
            json={
                "email": "comprador@gmail.com",
                "items": [{"productId": str(uuid4()), "quantity": 1}],
                "shipping": shipping_payload(),
            },
        )

        assert resp.status_code == 400

    async def test_invalid_body_is_422(self, async_client, shipping_payload):
        resp = await async_client.post(
            "/api/orders",
            json={"items": [], "shipping": shipping_payload(postalCode="12")},
        )

        assert resp.status_code == 422


class TestReadOrderEndpoints:
    async def test_get_order(self, async_client, make_order):
        order = await make_order(order_number="ORD-2025-0001")

        resp = await async_client.get(f"/api/orders/{order.id}")

        assert resp.status_code == 200
        body = resp.json()
        assert body["orderNumber"] == "ORD-2025-0001"
        assert len(body["items"]) == 1

    @pytest.mark.parametrize("order_id", [str(uuid4()), "no-es-un-uuid"])
    async def test_get_unknown_order_is_404(self, async_client, order_id):
        resp = await async_client.get(f"/api/orders/{order_id}")

        assert resp.status_code == 404
        assert resp.json()["detail"] == "Order not found"

    async def test_list_user_orders(self, async_client, make_order):
        await make_order(order_number="ORD-2025-0001", user_id="user-1")
        await make_order(order_number="ORD-2025-0002", user_id="user-1")

        resp = await async_client.get("/api/orders", params={"userId": "user-1"})

        assert resp.status_code == 200
        assert [o["orderNumber"] for o in resp.json()] == ["ORD-2025-0002", "ORD-2025-0001"]

    async def test_list_requires_user_id(self, async_client):
        resp = await async_client.get("/api/orders")

        assert resp.status_code == 422
