# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/verify.py

Fachada de verificación de firma para webhooks de Mercado Pago.
Extrae x-signature / x-request-id de los headers (case-insensitive) y
delega en el servicio de verificación con el secreto configurado.

Autor: Equipo Tienda
Fecha: 2026-03-11
"""

from __future__ import annotations

from typing import Mapping, Optional

from app.shared.config.settings_payments import MercadoPagoSettings, get_payments_settings
from app.modules.payments.services.webhooks.signature_verification import (
    verify_mercadopago_signature as _verify_mercadopago,
)

SIGNATURE_HEADER = "x-signature"
REQUEST_ID_HEADER = "x-request-id"


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def verify_mercadopago_webhook(
    headers: Mapping[str, str],
    data_id: Optional[str],
    # Inyección de dependencias para testing
    settings: Optional[MercadoPagoSettings] = None,
) -> bool:
    """True si la notificación viene firmada por Mercado Pago (o modo inseguro)."""
    if settings is None:
        settings = get_payments_settings()

    return _verify_mercadopago(
        signature_header=get_header(headers, SIGNATURE_HEADER),
        request_id=get_header(headers, REQUEST_ID_HEADER),
        data_id=data_id,
        webhook_secret=settings.webhook_secret,
    )


__all__ = ["verify_mercadopago_webhook", "get_header", "SIGNATURE_HEADER", "REQUEST_ID_HEADER"]

# Fin del archivo backend/app/modules/payments/facades/webhooks/verify.py
