# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/enums/order_status_enum.py

Enum de estados del pedido.
Sincronizado con el tipo ENUM de PostgreSQL: order_status_enum.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class OrderStatus(StrEnum):
    """Estado del pedido en su ciclo de vida."""

    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"

    __pg_enum_name__ = "order_status_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls, name=cls.__pg_enum_name__)


__all__ = ["OrderStatus"]

# Fin del archivo backend/app/modules/orders/enums/order_status_enum.py
