# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/checkout_schemas.py

Esquemas Pydantic de POST /api/checkout/mercadopago.

Autor: Equipo Tienda
Fecha: 2026-03-10
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CheckoutPreferenceRequest(BaseModel):
    """
    Body del checkout. orderId es opcional a nivel de esquema para poder
    responder 400 "Order ID is required" en lugar de un 422 genérico.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_id: Optional[str] = Field(default=None, description="ID interno del pedido.")

    @field_validator("order_id", mode="before")
    @classmethod
    def _coerce_order_id(cls, v: Any) -> Any:
        # Un id numérico no es un UUID válido: que termine en 404, no en 422
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class CheckoutPreferenceResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    preference_id: str
    init_point: str
    sandbox_init_point: Optional[str] = None


__all__ = ["CheckoutPreferenceRequest", "CheckoutPreferenceResponse"]

# Fin del archivo backend/app/modules/payments/schemas/checkout_schemas.py
