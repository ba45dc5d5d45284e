# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/enums/shipping_zone_enum.py

Zonas de envío: AMBA (CABA + GBA), interior del país o retiro en local.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class ShippingZone(StrEnum):
    AMBA = "amba"
    INTERIOR = "interior"
    PICKUP = "pickup"

    __pg_enum_name__ = "shipping_zone_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls, name=cls.__pg_enum_name__)


__all__ = ["ShippingZone"]

# Fin del archivo backend/app/modules/orders/enums/shipping_zone_enum.py
