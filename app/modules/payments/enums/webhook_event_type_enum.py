# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/webhook_event_type_enum.py

Tipos de notificación de Mercado Pago. Solo `payment` se concilia;
el resto se acusa con {status: "ignored"}.

Autor: Equipo Tienda
Fecha: 2026-03-09
"""

from enum import StrEnum


class WebhookEventType(StrEnum):
    PAYMENT = "payment"
    MERCHANT_ORDER = "merchant_order"
    SUBSCRIPTION = "subscription"


__all__ = ["WebhookEventType"]

# Fin del archivo backend/app/modules/payments/enums/webhook_event_type_enum.py
