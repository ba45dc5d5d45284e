# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/schemas/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from .order_schemas import (
    CartLine,
    CreateOrderInput,
    OrderItemInput,
    OrderItemOut,
    OrderOut,
    PlaceOrderRequest,
    ShippingAddress,
)

__all__ = [
    "CartLine",
    "CreateOrderInput",
    "OrderItemInput",
    "OrderItemOut",
    "OrderOut",
    "PlaceOrderRequest",
    "ShippingAddress",
]

# Fin del archivo backend/app/modules/orders/schemas/__init__.py
