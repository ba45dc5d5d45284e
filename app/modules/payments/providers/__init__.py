# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/providers/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-09
"""

from .mercadopago_client import (
    MercadoPagoClient,
    MercadoPagoError,
    MercadoPagoNotFoundError,
    MercadoPagoTimeoutError,
)

__all__ = [
    "MercadoPagoClient",
    "MercadoPagoError",
    "MercadoPagoNotFoundError",
    "MercadoPagoTimeoutError",
]
