# -*- coding: utf-8 -*-
"""
Tests del alta de pedido desde el carrito (place_order).

Autor: Equipo Tienda
Fecha: 2026-03-15
"""

from uuid import uuid4

import pytest

from app.modules.orders.facades.errors import OrderValidationError, ProductUnavailable
from app.modules.orders.facades.place_order import place_order
from app.modules.orders.schemas import PlaceOrderRequest
from app.modules.orders.services.shipping import AMBA_SHIPPING_COST, INTERIOR_SHIPPING_COST


def _request(shipping, *items, **extra) -> PlaceOrderRequest:
    payload = {
        "email": "comprador@gmail.com",
        "items": [{"productId": str(pid), "quantity": qty} for pid, qty in items],
        "shipping": shipping,
    }
    payload.update(extra)
    return PlaceOrderRequest.model_validate(payload)


class TestPlaceOrder:
    async def test_prices_come_from_catalog(self, db_session, make_product, shipping_payload):
        mate = await make_product(price=1_200_000)

        order = await place_order(db_session, _request(shipping_payload(), (mate.id, 2)))

        assert order.subtotal == 2_400_000
        assert order.shipping_cost == AMBA_SHIPPING_COST
        assert order.total == 2_400_000 + AMBA_SHIPPING_COST
        assert order.items[0].unit_price == 1_200_000
        assert order.items[0].product_sku == mate.sku
        assert order.guest_email == "comprador@gmail.com"

    async def test_repeated_lines_are_merged(self, db_session, make_product, shipping_payload):
        mate = await make_product(price=1000)

        order = await place_order(
            db_session,
            _request(shipping_payload(zone="interior"), (mate.id, 1), (mate.id, 2)),
        )

        assert len(order.items) == 1
        assert order.items[0].quantity == 3
        assert order.shipping_cost == INTERIOR_SHIPPING_COST

    async def test_discount_is_applied(self, db_session, make_product, shipping_payload):
        mate = await make_product(price=10_000)

        order = await place_order(
            db_session,
            _request(shipping_payload(zone="pickup"), (mate.id, 1), discount=2_500),
        )

        assert order.total == 7_500

    async def test_discount_larger_than_order_is_rejected(self, db_session, make_product, shipping_payload):
        mate = await make_product(price=1000)

        with pytest.raises(OrderValidationError):
            await place_order(
                db_session,
                _request(shipping_payload(zone="pickup"), (mate.id, 1), discount=5000),
            )

    async def test_inactive_product_is_unavailable(self, db_session, make_product, shipping_payload):
        retired = await make_product(is_active=False)

        with pytest.raises(ProductUnavailable):
            await place_order(db_session, _request(shipping_payload(), (retired.id, 1)))

    async def test_unknown_product_is_unavailable(self, db_session, shipping_payload):
        with pytest.raises(ProductUnavailable) as exc_info:
            await place_order(db_session, _request(shipping_payload(), (uuid4(), 1)))

        assert isinstance(exc_info.value, OrderValidationError)
