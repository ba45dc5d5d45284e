# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-10
"""

from .checkout_schemas import CheckoutPreferenceRequest, CheckoutPreferenceResponse
from .webhook_schemas import MercadoPagoPayment, MercadoPagoWebhookEvent, WebhookEventData

__all__ = [
    "CheckoutPreferenceRequest",
    "CheckoutPreferenceResponse",
    "MercadoPagoPayment",
    "MercadoPagoWebhookEvent",
    "WebhookEventData",
]
