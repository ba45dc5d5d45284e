# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/models/__init__.py

Exporta los modelos ORM del módulo Orders (registra las tablas en Base.metadata).

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from .product_models import Product
from .order_models import Order, OrderItem

__all__ = ["Order", "OrderItem", "Product"]

# Fin del archivo backend/app/modules/orders/models/__init__.py
