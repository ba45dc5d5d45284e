# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/preference.py

Adaptador pedido → preferencia de pago de Mercado Pago.

- Único punto donde los montos pasan de centavos (int) a unidades mayores
  (Decimal con 2 decimales) como espera la API.
- external_reference = ID interno del pedido: así la conciliación puede
  volver del pago al pedido.
- notification_url apunta a POST /api/webhooks/mercadopago.
- Cualquier error del proveedor se devuelve como PreferenceFailed; nunca
  se propaga como excepción no controlada.

Autor: Equipo Tienda
Fecha: 2026-03-11
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from app.shared.config.settings_payments import MercadoPagoSettings
from app.modules.orders.models import Order
from app.modules.payments.enums import PaymentProvider
from app.modules.payments.metrics.exporters.prometheus_exporter import (
    observe_preference_created,
    observe_preference_failed,
)
from app.modules.payments.providers import (
    MercadoPagoClient,
    MercadoPagoError,
    MercadoPagoTimeoutError,
)

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PreferenceCreated:
    preference_id: str
    init_point: str
    sandbox_init_point: Optional[str] = None
    ok: bool = True


@dataclass(frozen=True)
class PreferenceFailed:
    reason: str
    message: str
    status_code: Optional[int] = None
    ok: bool = False


PreferenceResult = Union[PreferenceCreated, PreferenceFailed]


def cents_to_amount(cents: int) -> Decimal:
    """
    Centavos → unidades mayores, exacto.

    >>> cents_to_amount(1500000)
    Decimal('15000.00')
    """
    return (Decimal(cents) / 100).quantize(_CENTS)


def build_back_urls(order: Order, settings: MercadoPagoSettings) -> Dict[str, str]:
    confirmation = f"{settings.app_base_url}/order-confirmation?orderId={order.id}"
    return {
        "success": confirmation,
        "failure": f"{settings.app_base_url}/checkout?error=payment_failed",
        "pending": confirmation,
    }


def build_preference_payload(order: Order, settings: MercadoPagoSettings) -> Dict[str, Any]:
    """Arma el body de POST /checkout/preferences para el pedido."""
    items = []
    for item in order.items:
        line: Dict[str, Any] = {
            "id": str(item.product_id),
            "title": item.product_name,
            "quantity": item.quantity,
            "unit_price": cents_to_amount(item.unit_price),
            "currency_id": settings.mercadopago_currency_id,
        }
        if item.product_image:
            line["picture_url"] = item.product_image
        items.append(line)

    return {
        "items": items,
        "shipments": {
            "cost": cents_to_amount(order.shipping_cost),
            "mode": "not_specified",
        },
        "payer": {
            "email": order.guest_email or settings.mercadopago_fallback_payer_email,
            "name": order.shipping_full_name,
            "phone": {"number": order.shipping_phone},
        },
        "back_urls": build_back_urls(order, settings),
        "auto_return": "approved",
        "external_reference": str(order.id),
        "notification_url": settings.notification_url,
        "statement_descriptor": settings.mercadopago_statement_descriptor,
        "payment_methods": {
            "excluded_payment_methods": [],
            "excluded_payment_types": [],
            "installments": settings.mercadopago_max_installments,
        },
    }


async def create_payment_preference(
    client: MercadoPagoClient,
    order: Order,
    settings: MercadoPagoSettings,
) -> PreferenceResult:
    """Solicita la preferencia a Mercado Pago y devuelve un resultado tipado."""
    provider = PaymentProvider.MERCADOPAGO.value
    payload = build_preference_payload(order, settings)

    try:
        response = await client.create_preference(
            payload,
            idempotency_key=f"preference-{order.id}",
        )
    except MercadoPagoTimeoutError as e:
        observe_preference_failed(provider, "timeout")
        logger.error("preference_failed order_id=%s reason=timeout error=%s", order.id, e)
        return PreferenceFailed(reason="timeout", message=str(e))
    except MercadoPagoError as e:
        observe_preference_failed(provider, "provider_error")
        logger.error(
            "preference_failed order_id=%s reason=provider_error status=%s error=%s",
            order.id,
            e.status_code,
            e,
        )
        return PreferenceFailed(reason="provider_error", message=str(e), status_code=e.status_code)

    preference_id = response.get("id")
    init_point = response.get("init_point")
    if not preference_id or not init_point:
        observe_preference_failed(provider, "invalid_response")
        logger.error("preference_failed order_id=%s reason=invalid_response", order.id)
        return PreferenceFailed(
            reason="invalid_response",
            message="Mercado Pago no devolvió id/init_point",
        )

    observe_preference_created(provider)
    logger.info(
        "preference_created order_id=%s order_number=%s preference_id=%s",
        order.id,
        order.order_number,
        preference_id,
    )
    return PreferenceCreated(
        preference_id=str(preference_id),
        init_point=init_point,
        sandbox_init_point=response.get("sandbox_init_point"),
    )


__all__ = [
    "PreferenceCreated",
    "PreferenceFailed",
    "PreferenceResult",
    "cents_to_amount",
    "build_back_urls",
    "build_preference_payload",
    "create_payment_preference",
]

# Fin del archivo backend/app/modules/payments/facades/checkout/preference.py
