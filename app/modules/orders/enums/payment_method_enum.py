# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/enums/payment_method_enum.py

Enum de medios de pago aceptados en el checkout.
Sincronizado con el tipo ENUM de PostgreSQL: payment_method_enum.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class PaymentMethod(StrEnum):
    MERCADOPAGO = "mercadopago"
    CASH_ON_DELIVERY = "cash_on_delivery"
    BANK_TRANSFER = "bank_transfer"

    __pg_enum_name__ = "payment_method_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls, name=cls.__pg_enum_name__)


__all__ = ["PaymentMethod"]

# Fin del archivo backend/app/modules/orders/enums/payment_method_enum.py
