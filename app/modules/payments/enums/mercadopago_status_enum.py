# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/mercadopago_status_enum.py

Estados de pago informados por Mercado Pago (GET /v1/payments/{id}).

Conjunto cerrado: cualquier otro valor se trata como desconocido.

Autor: Equipo Tienda
Fecha: 2026-03-09
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional


class MercadoPagoPaymentStatus(StrEnum):
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    PENDING = "pending"
    IN_PROCESS = "in_process"
    IN_MEDIATION = "in_mediation"
    AUTHORIZED = "authorized"
    REFUNDED = "refunded"
    CHARGED_BACK = "charged_back"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["MercadoPagoPaymentStatus"]:
        """Devuelve el miembro o None si el estado no es uno conocido."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


__all__ = ["MercadoPagoPaymentStatus"]

# Fin del archivo backend/app/modules/payments/enums/mercadopago_status_enum.py
