# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/webhooks_mercadopago.py

Webhook endpoint para Mercado Pago.

Endpoint:
- POST /webhooks/mercadopago

Respuestas:
- 200 {"status": "ignored"}  eventos que no son de pago
- 200 {"status": "success", "orderId", "paymentStatus", "outcome"}
- 401 firma inválida · 400 sin referencia al pedido o cuerpo inválido
- 404 pago o pedido inexistente · 500 falla del proveedor / interna
  (Mercado Pago reintenta la entrega ante cualquier no-2xx)

Autor: Equipo Tienda
Fecha: 2026-03-12
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config.settings_payments import MercadoPagoSettings
from app.shared.database.database import get_async_session
from app.modules.orders.facades.errors import OrderNotFound
from app.modules.payments.dependencies import get_mercadopago_client, get_mercadopago_settings
from app.modules.payments.enums import PaymentProvider
from app.modules.payments.facades.webhooks import (
    MissingOrderReferenceError,
    PaymentFetchError,
    PaymentNotFoundError,
    WebhookPayloadError,
    WebhookSignatureError,
    handle_mercadopago_webhook,
    parse_webhook_event,
)
from app.modules.payments.metrics.exporters.prometheus_exporter import (
    observe_webhook_outcome,
    observe_webhook_received,
    observe_webhook_rejected,
)
from app.modules.payments.providers import MercadoPagoClient

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/webhooks",
    tags=["payments:webhooks"],
)

PROVIDER = PaymentProvider.MERCADOPAGO.value


def _reject(reason: str, status_code: int, detail: str) -> HTTPException:
    observe_webhook_rejected(PROVIDER, reason)
    return HTTPException(status_code=status_code, detail=detail)


@router.post("/mercadopago", status_code=status.HTTP_200_OK)
async def mercadopago_webhook(
    request: Request,
    session: AsyncSession = Depends(get_async_session),
    client: MercadoPagoClient = Depends(get_mercadopago_client),
    settings: MercadoPagoSettings = Depends(get_mercadopago_settings),
) -> Dict[str, Any]:
    """Notificaciones de pago de Mercado Pago."""
    observe_webhook_received(PROVIDER)
    start_time = time.perf_counter()

    try:
        event = parse_webhook_event(await request.json())
    except (ValueError, WebhookPayloadError) as e:
        logger.warning("mercadopago_webhook_invalid_body error=%s", e)
        raise _reject("invalid_body", status.HTTP_400_BAD_REQUEST, "Invalid webhook payload")

    try:
        result = await handle_mercadopago_webhook(
            session,
            event=event,
            headers=request.headers,
            client=client,
            settings=settings,
        )
    except WebhookSignatureError:
        raise _reject("invalid_signature", status.HTTP_401_UNAUTHORIZED, "Invalid signature")
    except WebhookPayloadError as e:
        logger.warning("mercadopago_webhook_invalid_body error=%s", e)
        raise _reject("invalid_body", status.HTTP_400_BAD_REQUEST, "Invalid webhook payload")
    except MissingOrderReferenceError as e:
        logger.error("mercadopago_webhook_missing_reference payment_id=%s", e.payment_id)
        raise _reject("missing_reference", status.HTTP_400_BAD_REQUEST, "No order reference")
    except (PaymentNotFoundError, OrderNotFound) as e:
        logger.warning("mercadopago_webhook_not_found error=%s", e)
        raise _reject("not_found", status.HTTP_404_NOT_FOUND, "Not found")
    except PaymentFetchError as e:
        logger.error("mercadopago_webhook_fetch_failed payment_id=%s error=%s", event.payment_id, e)
        raise _reject("provider_error", status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch payment")
    except Exception:
        logger.exception("mercadopago_webhook_error payment_id=%s", event.payment_id)
        raise _reject("internal_error", status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    observe_webhook_outcome(
        PROVIDER,
        result.get("outcome", result["status"]),
        time.perf_counter() - start_time,
    )
    return result


__all__ = ["router"]

# Fin del archivo backend/app/modules/payments/routes/webhooks_mercadopago.py
