# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/reconciliation.py

Conciliación: estado del pago en Mercado Pago → estado del pedido.

Mapeo (conjunto cerrado de estados del proveedor):

    approved                                       → paid
    rejected, cancelled                            → cancelled
    pending, in_process, in_mediation, authorized  → pending
    cualquier otro (refunded, charged_back, ...)   → sin cambio, se loguea

Guarda de transiciones: los webhooks llegan desordenados y repetidos, así
que solo se aplican avances válidos:

    pending   → paid | cancelled
    cancelled → paid          (el comprador reintentó con otro medio)

Un evento que llevaría el pedido hacia atrás (p.ej. pending después de
paid, o pending sobre un pedido delivered) se descarta como
`stale_transition`. Mismo estado → `unchanged` (reescritura sin efecto).

Autor: Equipo Tienda
Fecha: 2026-03-12
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, FrozenSet, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.orders.enums import OrderStatus
from app.modules.orders.services import OrderService
from app.modules.payments.enums import MercadoPagoPaymentStatus
from app.modules.payments.schemas import MercadoPagoPayment

logger = logging.getLogger(__name__)


class ReconciliationOutcome(StrEnum):
    APPLIED = "applied"
    UNCHANGED = "unchanged"
    STALE_TRANSITION = "stale_transition"
    UNKNOWN_STATUS = "unknown_status"


class MissingOrderReferenceError(Exception):
    """El pago no trae external_reference: no se puede ubicar el pedido."""
    def __init__(self, payment_id: str):
        self.payment_id = payment_id
        super().__init__(f"El pago {payment_id} no tiene external_reference")


PROVIDER_STATUS_TO_ORDER_STATUS: Dict[MercadoPagoPaymentStatus, OrderStatus] = {
    MercadoPagoPaymentStatus.APPROVED: OrderStatus.PAID,
    MercadoPagoPaymentStatus.REJECTED: OrderStatus.CANCELLED,
    MercadoPagoPaymentStatus.CANCELLED: OrderStatus.CANCELLED,
    MercadoPagoPaymentStatus.PENDING: OrderStatus.PENDING,
    MercadoPagoPaymentStatus.IN_PROCESS: OrderStatus.PENDING,
    MercadoPagoPaymentStatus.IN_MEDIATION: OrderStatus.PENDING,
    MercadoPagoPaymentStatus.AUTHORIZED: OrderStatus.PENDING,
}

ALLOWED_PAYMENT_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.CANCELLED: frozenset({OrderStatus.PAID}),
}


def map_provider_status(raw_status: Optional[str]) -> Optional[OrderStatus]:
    """Estado de pedido destino, o None si el estado del proveedor no se modela."""
    status = MercadoPagoPaymentStatus.parse(raw_status)
    if status is None:
        return None
    return PROVIDER_STATUS_TO_ORDER_STATUS.get(status)


def is_transition_allowed(current: OrderStatus, target: OrderStatus) -> bool:
    return target in ALLOWED_PAYMENT_TRANSITIONS.get(current, frozenset())


@dataclass(frozen=True)
class ReconciliationResult:
    order_id: str
    outcome: ReconciliationOutcome
    order_status: OrderStatus
    payment_status: Optional[str]


async def reconcile_payment(
    session: AsyncSession,
    payment: MercadoPagoPayment,
    *,
    service: Optional[OrderService] = None,
) -> ReconciliationResult:
    """
    Aplica el estado autoritativo del pago al pedido referenciado.

    Raises:
        MissingOrderReferenceError: el pago no trae external_reference.
        OrderNotFound: external_reference no corresponde a ningún pedido.
    """
    if not payment.external_reference:
        raise MissingOrderReferenceError(payment.id)

    service = service or OrderService()
    order = await service.lock_order(session, payment.external_reference)
    order_id = str(order.id)
    current = order.status
    target = map_provider_status(payment.status)

    # Tras un rollback el pedido queda expirado: no volver a leer sus atributos
    def _result(outcome: ReconciliationOutcome, order_status: OrderStatus) -> ReconciliationResult:
        return ReconciliationResult(
            order_id=order_id,
            outcome=outcome,
            order_status=order_status,
            payment_status=payment.status,
        )

    if target is None:
        await session.rollback()
        logger.warning(
            "reconciliation_unknown_status order_id=%s payment_id=%s status=%s",
            order_id,
            payment.id,
            payment.status,
        )
        return _result(ReconciliationOutcome.UNKNOWN_STATUS, current)

    if current == target:
        # Redelivery o nuevo pago con el mismo estado: no pisar un payment_id ajeno
        if order.payment_id in (None, payment.id):
            await service.apply_payment_state(
                session,
                order,
                new_status=target,
                payment_id=payment.id,
                payment_status=payment.status or "",
            )
        else:
            await session.rollback()
        logger.info(
            "reconciliation_unchanged order_id=%s payment_id=%s status=%s",
            order_id,
            payment.id,
            current,
        )
        return _result(ReconciliationOutcome.UNCHANGED, current)

    if not is_transition_allowed(current, target):
        await session.rollback()
        logger.warning(
            "reconciliation_stale_transition order_id=%s payment_id=%s from=%s to=%s provider_status=%s",
            order_id,
            payment.id,
            current,
            target,
            payment.status,
        )
        return _result(ReconciliationOutcome.STALE_TRANSITION, current)

    await service.apply_payment_state(
        session,
        order,
        new_status=target,
        payment_id=payment.id,
        payment_status=payment.status or "",
    )
    logger.info(
        "reconciliation_applied order_id=%s payment_id=%s from=%s to=%s",
        order_id,
        payment.id,
        current,
        target,
    )
    return _result(ReconciliationOutcome.APPLIED, target)


__all__ = [
    "ReconciliationOutcome",
    "ReconciliationResult",
    "MissingOrderReferenceError",
    "PROVIDER_STATUS_TO_ORDER_STATUS",
    "ALLOWED_PAYMENT_TRANSITIONS",
    "map_provider_status",
    "is_transition_allowed",
    "reconcile_payment",
]

# Fin del archivo backend/app/modules/payments/facades/webhooks/reconciliation.py
