# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/repositories/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from .order_repository import OrderRepository
from .product_repository import ProductRepository

__all__ = ["OrderRepository", "ProductRepository"]
