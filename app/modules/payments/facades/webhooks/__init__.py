# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-12
"""

from .handler import (
    PaymentFetchError,
    PaymentNotFoundError,
    WebhookPayloadError,
    WebhookSignatureError,
    handle_mercadopago_webhook,
    parse_webhook_event,
)
from .reconciliation import (
    MissingOrderReferenceError,
    ReconciliationOutcome,
    map_provider_status,
    reconcile_payment,
)

__all__ = [
    "MissingOrderReferenceError",
    "PaymentFetchError",
    "PaymentNotFoundError",
    "ReconciliationOutcome",
    "WebhookPayloadError",
    "WebhookSignatureError",
    "handle_mercadopago_webhook",
    "map_provider_status",
    "parse_webhook_event",
    "reconcile_payment",
]
