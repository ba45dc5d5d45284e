# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/__init__.py

Superficie de exportación de enums del módulo Payments.

Autor: Equipo Tienda
Fecha: 2026-03-09
"""

from .mercadopago_status_enum import MercadoPagoPaymentStatus
from .payment_provider_enum import PaymentProvider
from .webhook_event_type_enum import WebhookEventType

__all__ = [
    "MercadoPagoPaymentStatus",
    "PaymentProvider",
    "WebhookEventType",
]

# Fin del archivo backend/app/modules/payments/enums/__init__.py
