# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/webhook_schemas.py

Modelos de los datos que llegan de Mercado Pago.

- MercadoPagoWebhookEvent: sobre de la notificación (no confiable; solo
  indica que algo cambió).
- MercadoPagoPayment: respuesta de GET /v1/payments/{id}, fuente de verdad.

Autor: Equipo Tienda
Fecha: 2026-03-10
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _id_to_str(value: Any) -> Any:
    # Mercado Pago envía IDs numéricos o como string según el canal
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class WebhookEventData(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        return _id_to_str(v)


class MercadoPagoWebhookEvent(BaseModel):
    """Sobre { type, action, data: { id }, date_created, id, live_mode, user_id }."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    action: Optional[str] = None
    data: WebhookEventData = Field(default_factory=WebhookEventData)
    date_created: Optional[str] = None
    id: Optional[str] = None
    live_mode: Optional[bool] = None
    user_id: Optional[str] = None
    api_version: Optional[str] = None

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _coerce_ids(cls, v: Any) -> Any:
        return _id_to_str(v)

    @property
    def payment_id(self) -> Optional[str]:
        return self.data.id


class MercadoPagoPayment(BaseModel):
    """Subconjunto de GET /v1/payments/{id} que usa la conciliación."""

    model_config = ConfigDict(extra="ignore")

    id: str
    status: Optional[str] = None
    status_detail: Optional[str] = None
    transaction_amount: Optional[Decimal] = None
    external_reference: Optional[str] = None
    payment_method_id: Optional[str] = None
    payment_type_id: Optional[str] = None
    date_created: Optional[datetime] = None
    date_approved: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        return _id_to_str(v)

    @field_validator("external_reference", mode="before")
    @classmethod
    def _blank_reference(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


__all__ = ["MercadoPagoWebhookEvent", "WebhookEventData", "MercadoPagoPayment"]

# Fin del archivo backend/app/modules/payments/schemas/webhook_schemas.py
