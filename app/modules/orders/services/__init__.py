# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/services/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-06
"""

from .order_number import (
    format_order_number,
    generate_order_number,
    parse_order_sequence,
)
from .order_service import OrderService, coerce_order_id
from .shipping import calculate_shipping

__all__ = [
    "OrderService",
    "calculate_shipping",
    "coerce_order_id",
    "format_order_number",
    "generate_order_number",
    "parse_order_sequence",
]
