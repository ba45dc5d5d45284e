# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/services/order_service.py

Libro de pedidos (fuente de verdad del estado de cada pedido).

Operaciones:
- create_order: valida montos, asigna ORD-AAAA-NNNN y persiste pedido +
  ítems en una sola unidad atómica (savepoint). Ante colisión del número
  (uq_orders_order_number) regenera y reintenta, con tope de intentos.
- get_order / list_orders_for_user: lectura.
- update_order_status: sobrescritura directa del estado (uso manual /
  logística); no valida transiciones.
- lock_order / apply_payment_state: escritura de una sola fila usada por
  la conciliación de pagos, que es quien decide la transición.

Autor: Equipo Tienda
Fecha: 2026-03-06
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import get_settings
from app.modules.orders.enums import OrderStatus
from app.modules.orders.facades.errors import (
    OrderNotFound,
    OrderNumberConflictError,
    OrderValidationError,
)
from app.modules.orders.metrics import (
    ORDER_NUMBER_CONFLICTS_TOTAL,
    ORDER_STATUS_CHANGES_TOTAL,
    ORDERS_CREATED_TOTAL,
)
from app.modules.orders.models import Order, OrderItem
from app.modules.orders.repositories import OrderRepository
from app.modules.orders.schemas import CreateOrderInput
from app.modules.orders.services.order_number import generate_order_number

logger = logging.getLogger(__name__)

NumberGenerator = Callable[[AsyncSession], Awaitable[str]]


def _is_order_number_conflict(exc: IntegrityError) -> bool:
    """True solo para la violación de unicidad de orders.order_number."""
    message = str(exc.orig) if exc.orig is not None else str(exc)
    return "order_number" in message


def coerce_order_id(order_id: UUID | str) -> Optional[UUID]:
    """Convierte a UUID; None si el valor no es un UUID válido."""
    if isinstance(order_id, UUID):
        return order_id
    try:
        return UUID(str(order_id))
    except (TypeError, ValueError):
        return None


class OrderService:
    """Operaciones del libro de pedidos."""

    def __init__(
        self,
        repo: Optional[OrderRepository] = None,
        *,
        max_attempts: Optional[int] = None,
        number_generator: Optional[NumberGenerator] = None,
    ) -> None:
        self.repo = repo or OrderRepository()
        self.max_attempts = max_attempts or get_settings().order_number_max_attempts
        self._generate_number = number_generator or generate_order_number

    # ---------------------------------------------------------
    # Validación
    # ---------------------------------------------------------
    @staticmethod
    def validate_totals(data: CreateOrderInput) -> None:
        """
        Verifica que los montos cierren:
        subtotal == Σ ítems y total == subtotal + envío - descuento.
        """
        items_total = sum(item.total for item in data.items)
        if data.subtotal != items_total:
            raise OrderValidationError(
                f"El subtotal ({data.subtotal}) no coincide con la suma de ítems ({items_total})"
            )
        if data.discount > data.subtotal + data.shipping_cost:
            raise OrderValidationError("El descuento supera el importe del pedido")
        expected_total = data.subtotal + data.shipping_cost - data.discount
        if data.total != expected_total:
            raise OrderValidationError(
                f"El total ({data.total}) no coincide con subtotal + envío - descuento ({expected_total})"
            )

    @staticmethod
    def _build_order(data: CreateOrderInput, order_number: str) -> Order:
        shipping = data.shipping
        order = Order(
            order_number=order_number,
            user_id=data.user_id,
            guest_email=str(data.guest_email) if data.guest_email else None,
            status=OrderStatus.PENDING,
            subtotal=data.subtotal,
            shipping_cost=data.shipping_cost,
            discount=data.discount,
            total=data.total,
            payment_method=data.payment_method,
            shipping_full_name=shipping.full_name,
            shipping_phone=shipping.phone,
            shipping_street=shipping.street,
            shipping_number=shipping.number,
            shipping_floor=shipping.floor,
            shipping_apartment=shipping.apartment,
            shipping_city=shipping.city,
            shipping_province=shipping.province,
            shipping_postal_code=shipping.postal_code,
            shipping_zone=shipping.zone,
            shipping_notes=shipping.notes,
            customer_notes=data.customer_notes,
        )
        order.items = [
            OrderItem(
                product_id=item.product_id,
                position=position,
                product_name=item.product_name,
                product_sku=item.product_sku,
                product_image=item.product_image,
                unit_price=item.unit_price,
                quantity=item.quantity,
                total=item.total,
            )
            for position, item in enumerate(data.items)
        ]
        return order

    # ---------------------------------------------------------
    # Alta
    # ---------------------------------------------------------
    async def create_order(self, session: AsyncSession, data: CreateOrderInput) -> Order:
        """
        Crea un pedido `pending` con sus ítems.

        Raises:
            OrderValidationError: montos inconsistentes (no se escribe nada).
            OrderNumberConflictError: se agotaron los reintentos por colisión.
            IntegrityError: cualquier otra violación de constraint.
        """
        self.validate_totals(data)

        for attempt in range(1, self.max_attempts + 1):
            order_number = await self._generate_number(session)
            order = self._build_order(data, order_number)
            try:
                # Savepoint: pedido e ítems entran juntos o no entra nada
                async with session.begin_nested():
                    session.add(order)
                    await session.flush()
            except IntegrityError as exc:
                if not _is_order_number_conflict(exc):
                    raise
                ORDER_NUMBER_CONFLICTS_TOTAL.inc()
                logger.warning(
                    "order_number_conflict order_number=%s attempt=%d max_attempts=%d",
                    order_number,
                    attempt,
                    self.max_attempts,
                )
                continue

            await session.commit()
            ORDERS_CREATED_TOTAL.labels(payment_method=order.payment_method.value).inc()
            logger.info(
                "order_created order_id=%s order_number=%s total=%d items=%d",
                order.id,
                order.order_number,
                order.total,
                len(order.items),
            )
            return order

        await session.rollback()
        logger.error("order_number_exhausted max_attempts=%d", self.max_attempts)
        raise OrderNumberConflictError(self.max_attempts)

    # ---------------------------------------------------------
    # Lectura
    # ---------------------------------------------------------
    async def get_order(self, session: AsyncSession, order_id: UUID | str) -> Optional[Order]:
        oid = coerce_order_id(order_id)
        if oid is None:
            return None
        return await self.repo.get(session, oid)

    async def list_orders_for_user(self, session: AsyncSession, user_id: str) -> Sequence[Order]:
        return await self.repo.list_by_user(session, user_id)

    # ---------------------------------------------------------
    # Escritura de estado
    # ---------------------------------------------------------
    async def update_order_status(
        self,
        session: AsyncSession,
        order_id: UUID | str,
        new_status: OrderStatus,
    ) -> Order:
        """Sobrescribe el estado sin validar la transición."""
        order = await self.lock_order(session, order_id)
        previous = order.status
        order.status = new_status
        order.updated_at = datetime.now(timezone.utc)
        await session.commit()
        ORDER_STATUS_CHANGES_TOTAL.labels(from_status=previous.value, to_status=new_status.value).inc()
        logger.info(
            "order_status_updated order_id=%s from=%s to=%s",
            order.id,
            previous,
            new_status,
        )
        return order

    async def lock_order(self, session: AsyncSession, order_id: UUID | str) -> Order:
        """Lee el pedido con bloqueo de fila; OrderNotFound si no existe."""
        oid = coerce_order_id(order_id)
        order = await self.repo.get_for_update(session, oid) if oid is not None else None
        if order is None:
            raise OrderNotFound(order_id)
        return order

    async def apply_payment_state(
        self,
        session: AsyncSession,
        order: Order,
        *,
        new_status: OrderStatus,
        payment_id: str,
        payment_status: str,
        now: Optional[datetime] = None,
    ) -> Order:
        """
        Registra el estado de pago en un pedido ya bloqueado y confirma.
        paid_at se fija solo la primera vez que el pedido pasa a `paid`.
        """
        now = now or datetime.now(timezone.utc)
        previous = order.status

        order.status = new_status
        order.payment_id = payment_id
        order.payment_status = payment_status
        if new_status == OrderStatus.PAID and order.paid_at is None:
            order.paid_at = now
        order.updated_at = now

        await session.commit()
        if previous != new_status:
            ORDER_STATUS_CHANGES_TOTAL.labels(
                from_status=previous.value, to_status=new_status.value
            ).inc()
        return order


__all__ = ["OrderService", "coerce_order_id"]

# Fin del archivo backend/app/modules/orders/services/order_service.py
