# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/handler.py

Orquestador del webhook de Mercado Pago.

Flujo:
1. Solo type == "payment" se procesa; el resto → {"status": "ignored"}.
2. Verifica la firma (x-signature / x-request-id).
3. Consulta el pago en la API (el cuerpo del webhook no es fuente de verdad).
4. Ubica el pedido por external_reference.
5. Mapea y aplica el estado (conciliación idempotente con guarda).

Los errores se lanzan tipados; la ruta los traduce a 401/400/404/500.

Autor: Equipo Tienda
Fecha: 2026-03-12
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config.settings_payments import MercadoPagoSettings
from app.modules.orders.services import OrderService
from app.modules.payments.enums import WebhookEventType
from app.modules.payments.facades.webhooks.reconciliation import reconcile_payment
from app.modules.payments.facades.webhooks.verify import verify_mercadopago_webhook
from app.modules.payments.providers import (
    MercadoPagoClient,
    MercadoPagoError,
    MercadoPagoNotFoundError,
)
from app.modules.payments.schemas import MercadoPagoPayment, MercadoPagoWebhookEvent

logger = logging.getLogger(__name__)


class WebhookSignatureError(Exception):
    """Firma inválida o ausente."""


class WebhookPayloadError(ValueError):
    """Sobre del webhook inválido (JSON roto o sin data.id)."""


class PaymentNotFoundError(Exception):
    """Mercado Pago no conoce el pago notificado."""


class PaymentFetchError(Exception):
    """No se pudo obtener el pago desde Mercado Pago (red, timeout, 5xx)."""


def parse_webhook_event(payload: Any) -> MercadoPagoWebhookEvent:
    if not isinstance(payload, dict):
        raise WebhookPayloadError("El cuerpo del webhook debe ser un objeto JSON")
    try:
        return MercadoPagoWebhookEvent.model_validate(payload)
    except ValidationError as e:
        raise WebhookPayloadError(f"Webhook inválido: {e.error_count()} errores") from e


async def fetch_payment(client: MercadoPagoClient, payment_id: str) -> MercadoPagoPayment:
    try:
        raw = await client.get_payment(payment_id)
    except MercadoPagoNotFoundError as e:
        raise PaymentNotFoundError(f"Pago no encontrado: {payment_id}") from e
    except MercadoPagoError as e:
        raise PaymentFetchError(str(e)) from e

    try:
        return MercadoPagoPayment.model_validate(raw)
    except ValidationError as e:
        raise PaymentFetchError(f"Respuesta de pago inválida para {payment_id}") from e


async def handle_mercadopago_webhook(
    session: AsyncSession,
    *,
    event: MercadoPagoWebhookEvent,
    headers: Mapping[str, str],
    client: MercadoPagoClient,
    settings: Optional[MercadoPagoSettings] = None,
    service: Optional[OrderService] = None,
) -> Dict[str, Any]:
    """
    Procesa una notificación de Mercado Pago.

    Returns:
        {"status": "ignored"} o
        {"status": "success", "orderId", "paymentStatus", "outcome"}

    Raises:
        WebhookSignatureError, WebhookPayloadError, PaymentNotFoundError,
        PaymentFetchError, MissingOrderReferenceError, OrderNotFound
    """
    if event.type != WebhookEventType.PAYMENT:
        logger.info(
            "mercadopago_webhook_ignored type=%s action=%s event_id=%s",
            event.type,
            event.action,
            event.id,
        )
        return {"status": "ignored"}

    payment_id = event.payment_id

    if not verify_mercadopago_webhook(headers, payment_id, settings=settings):
        raise WebhookSignatureError("Firma de webhook inválida")

    if not payment_id:
        raise WebhookPayloadError("Webhook de pago sin data.id")

    payment = await fetch_payment(client, payment_id)
    result = await reconcile_payment(session, payment, service=service)

    return {
        "status": "success",
        "orderId": result.order_id,
        "paymentStatus": result.payment_status,
        "outcome": result.outcome.value,
    }


__all__ = [
    "WebhookSignatureError",
    "WebhookPayloadError",
    "PaymentNotFoundError",
    "PaymentFetchError",
    "parse_webhook_event",
    "fetch_payment",
    "handle_mercadopago_webhook",
]

# Fin del archivo backend/app/modules/payments/facades/webhooks/handler.py
