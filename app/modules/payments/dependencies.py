# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/dependencies.py

Dependencias FastAPI del módulo de pagos.

El cliente de Mercado Pago vive en app.state (creado en el lifespan) y se
inyecta explícitamente en cada ruta; los tests lo reemplazan con
app.dependency_overrides.

Autor: Equipo Tienda
Fecha: 2026-03-12
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from app.shared.config.settings_payments import MercadoPagoSettings, get_payments_settings
from app.modules.payments.providers import MercadoPagoClient


def get_mercadopago_client(request: Request) -> MercadoPagoClient:
    client = getattr(request.app.state, "mercadopago_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Mercado Pago client not initialized",
        )
    return client


def get_mercadopago_settings() -> MercadoPagoSettings:
    return get_payments_settings()


__all__ = ["get_mercadopago_client", "get_mercadopago_settings"]

# Fin del archivo backend/app/modules/payments/dependencies.py
