# -*- coding: utf-8 -*-
"""
Tests del libro de pedidos (OrderService).

Cubre:
- Validación de montos (nada se escribe si no cierran)
- Alta atómica de pedido + ítems con número ORD-AAAA-NNNN
- Reintento ante colisión del número y agotamiento de reintentos
- Altas intercaladas con el generador real: números distintos y crecientes
- Lectura por id y listado por usuario
- Cambio de estado manual y registro de pago

Autor: Equipo Tienda
Fecha: 2026-03-15
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from app.modules.orders.enums import OrderStatus
from app.modules.orders.facades.errors import (
    OrderNotFound,
    OrderNumberConflictError,
    OrderValidationError,
)
from app.modules.orders.models import Order, OrderItem
from app.modules.orders.schemas import OrderItemInput
from app.modules.orders.services import OrderService, format_order_number, generate_order_number
from app.modules.orders.services.order_number import current_store_year


async def _count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


class TestValidateTotals:
    async def test_subtotal_mismatch_writes_nothing(self, db_session, make_product, build_order_input):
        product = await make_product(price=1000)
        data = build_order_input(product, quantity=2).model_copy(update={"subtotal": 1500, "total": 1500})

        with pytest.raises(OrderValidationError):
            await OrderService().create_order(db_session, data)

        assert await _count(db_session, Order) == 0
        assert await _count(db_session, OrderItem) == 0

    async def test_total_mismatch(self, db_session, make_product, build_order_input):
        product = await make_product(price=1000)
        data = build_order_input(product, shipping_cost=350).model_copy(update={"total": 1000})

        with pytest.raises(OrderValidationError):
            await OrderService().create_order(db_session, data)

    async def test_discount_larger_than_order(self, db_session, make_product, build_order_input):
        product = await make_product(price=1000)
        data = build_order_input(product).model_copy(update={"discount": 2000, "total": 0})

        with pytest.raises(OrderValidationError):
            await OrderService().create_order(db_session, data)


class TestCreateOrder:
    async def test_creates_pending_order_with_items(self, db_session, make_product, build_order_input):
        mate = await make_product(name="Mate", price=1_500_000)
        bombilla = await make_product(name="Bombilla", price=250_000, image_url=None)
        data = build_order_input(mate, quantity=1)
        extra = OrderItemInput(
            product_id=bombilla.id,
            product_name=bombilla.name,
            product_sku=bombilla.sku,
            unit_price=bombilla.price,
            quantity=2,
        )
        data = data.model_copy(
            update={
                "items": [*data.items, extra],
                "subtotal": 2_000_000,
                "total": 2_000_000,
            }
        )

        order = await OrderService().create_order(db_session, data)

        assert order.status == OrderStatus.PENDING
        assert order.order_number.startswith("ORD-")
        assert order.subtotal == 2_000_000
        assert [i.product_name for i in order.items] == ["Mate", "Bombilla"]
        assert [i.position for i in order.items] == [0, 1]
        assert order.items[1].total == 500_000
        assert order.paid_at is None
        assert await _count(db_session, OrderItem) == 2

    async def test_retries_on_order_number_collision(
        self, db_session, make_order, make_product, build_order_input, fixed_numbers
    ):
        await make_order(order_number="ORD-2025-0001")
        product = await make_product()
        service = OrderService(number_generator=fixed_numbers("ORD-2025-0001", "ORD-2025-0002"))

        order = await service.create_order(db_session, build_order_input(product))

        assert order.order_number == "ORD-2025-0002"
        assert await _count(db_session, Order) == 2
        assert await _count(db_session, OrderItem) == 2

    async def test_exhausted_retries_raise_conflict(
        self, db_session, make_order, make_product, build_order_input
    ):
        await make_order(order_number="ORD-2025-0001")
        product = await make_product()
        calls = []

        async def always_taken(session):
            calls.append(1)
            return "ORD-2025-0001"

        service = OrderService(max_attempts=3, number_generator=always_taken)

        with pytest.raises(OrderNumberConflictError) as exc_info:
            await service.create_order(db_session, build_order_input(product))

        assert exc_info.value.attempts == 3
        assert len(calls) == 3
        assert await _count(db_session, Order) == 1
        assert await _count(db_session, OrderItem) == 1

    async def test_concurrent_writer_with_same_number_gets_next(
        self, db_session, make_product, build_order_input
    ):
        # Otra alta lee el mismo último número y confirma antes de nuestro flush
        product = await make_product()
        competitor_numbers = []

        async def racing_generator(session):
            number = await generate_order_number(session)
            if not competitor_numbers:
                competitor = await OrderService().create_order(session, build_order_input(product))
                competitor_numbers.append(competitor.order_number)
            return number

        order = await OrderService(number_generator=racing_generator).create_order(
            db_session, build_order_input(product)
        )

        year = current_store_year()
        assert competitor_numbers == [format_order_number(year, 1)]
        assert order.order_number == format_order_number(year, 2)
        assert await _count(db_session, Order) == 2
        assert await _count(db_session, OrderItem) == 2

    async def test_interleaved_orders_get_distinct_increasing_numbers(
        self, db_session, make_product, build_order_input
    ):
        product = await make_product()
        numbers = []

        for _ in range(3):
            raced = []

            async def racing_generator(session, raced=raced):
                number = await generate_order_number(session)
                if not raced:
                    competitor = await OrderService().create_order(session, build_order_input(product))
                    raced.append(competitor.order_number)
                    numbers.append(competitor.order_number)
                return number

            order = await OrderService(number_generator=racing_generator).create_order(
                db_session, build_order_input(product)
            )
            numbers.append(order.order_number)

        year = current_store_year()
        assert numbers == [format_order_number(year, n) for n in range(1, 7)]
        assert await _count(db_session, Order) == 6


class TestReadOrders:
    async def test_get_order_by_id_and_by_string(self, db_session, make_order):
        order = await make_order()
        service = OrderService()

        assert (await service.get_order(db_session, order.id)).id == order.id
        assert (await service.get_order(db_session, str(order.id))).id == order.id

    async def test_get_order_unknown_or_malformed_id(self, db_session):
        service = OrderService()

        assert await service.get_order(db_session, uuid4()) is None
        assert await service.get_order(db_session, "no-es-un-uuid") is None

    async def test_list_orders_newest_first(self, db_session, make_order):
        first = await make_order(order_number="ORD-2025-0001", user_id="user-1")
        second = await make_order(order_number="ORD-2025-0002", user_id="user-1")
        await make_order(order_number="ORD-2025-0003", user_id="user-2")

        orders = await OrderService().list_orders_for_user(db_session, "user-1")

        assert [o.id for o in orders] == [second.id, first.id]

    async def test_list_orders_unknown_user_is_empty(self, db_session):
        assert list(await OrderService().list_orders_for_user(db_session, "nadie")) == []


class TestStatusWrites:
    async def test_update_order_status_overwrites(self, db_session, make_order):
        order = await make_order()

        updated = await OrderService().update_order_status(db_session, order.id, OrderStatus.SHIPPED)

        assert updated.status == OrderStatus.SHIPPED

    async def test_update_order_status_unknown_order(self, db_session):
        with pytest.raises(OrderNotFound):
            await OrderService().update_order_status(db_session, uuid4(), OrderStatus.SHIPPED)

    async def test_apply_payment_state_sets_paid_at_once(self, db_session, make_order):
        order = await make_order()
        service = OrderService()
        first = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)
        later = datetime(2025, 3, 11, 12, 0, tzinfo=timezone.utc)

        locked = await service.lock_order(db_session, order.id)
        await service.apply_payment_state(
            db_session, locked,
            new_status=OrderStatus.PAID, payment_id="111", payment_status="approved", now=first,
        )
        locked = await service.lock_order(db_session, order.id)
        await service.apply_payment_state(
            db_session, locked,
            new_status=OrderStatus.PAID, payment_id="111", payment_status="approved", now=later,
        )

        await db_session.refresh(order)
        assert order.status == OrderStatus.PAID
        assert order.payment_id == "111"
        assert order.paid_at.replace(tzinfo=timezone.utc) == first
