# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/services/shipping.py

Costo de envío por zona (centavos).

Autor: Equipo Tienda
Fecha: 2026-03-06
"""

from __future__ import annotations

from app.modules.orders.enums import ShippingZone

# $50.000 de compra mínima para envío gratis en AMBA
AMBA_FREE_SHIPPING_THRESHOLD = 5_000_000
AMBA_SHIPPING_COST = 350_000
INTERIOR_SHIPPING_COST = 550_000


def calculate_shipping(zone: ShippingZone, subtotal: int) -> int:
    if zone == ShippingZone.PICKUP:
        return 0
    if zone == ShippingZone.AMBA:
        return 0 if subtotal >= AMBA_FREE_SHIPPING_THRESHOLD else AMBA_SHIPPING_COST
    return INTERIOR_SHIPPING_COST


__all__ = [
    "AMBA_FREE_SHIPPING_THRESHOLD",
    "AMBA_SHIPPING_COST",
    "INTERIOR_SHIPPING_COST",
    "calculate_shipping",
]

# Fin del archivo backend/app/modules/orders/services/shipping.py
