# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/enums/__init__.py

Superficie de exportación de enums del módulo Orders.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from .order_status_enum import OrderStatus
from .payment_method_enum import PaymentMethod
from .shipping_zone_enum import ShippingZone

__all__ = [
    "OrderStatus",
    "PaymentMethod",
    "ShippingZone",
]

# Fin del archivo backend/app/modules/orders/enums/__init__.py
