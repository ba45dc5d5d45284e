# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/payment_provider_enum.py

Enum de proveedores de pago soportados.

Autor: Equipo Tienda
Fecha: 2026-03-09
"""

from enum import StrEnum


class PaymentProvider(StrEnum):
    """Proveedor de pago externo."""

    MERCADOPAGO = "mercadopago"


__all__ = ["PaymentProvider"]

# Fin del archivo backend/app/modules/payments/enums/payment_provider_enum.py
