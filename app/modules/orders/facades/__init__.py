# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/facades/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-06
"""

from .errors import (
    OrderError,
    OrderNotFound,
    OrderNumberConflictError,
    OrderValidationError,
    ProductUnavailable,
)

__all__ = [
    "OrderError",
    "OrderNotFound",
    "OrderNumberConflictError",
    "OrderValidationError",
    "ProductUnavailable",
]
