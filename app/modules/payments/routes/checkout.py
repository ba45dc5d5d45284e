# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/checkout.py

Endpoint de checkout con Mercado Pago.

Endpoint:
- POST /checkout/mercadopago  body {orderId}
    200 {preferenceId, initPoint, sandboxInitPoint}
    400 orderId ausente · 404 pedido inexistente · 500 falla del proveedor

Autor: Equipo Tienda
Fecha: 2026-03-12
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config.settings_payments import MercadoPagoSettings
from app.shared.database.database import get_async_session
from app.modules.orders.services import OrderService
from app.modules.payments.dependencies import get_mercadopago_client, get_mercadopago_settings
from app.modules.payments.facades.checkout import PreferenceFailed, create_payment_preference
from app.modules.payments.providers import MercadoPagoClient
from app.modules.payments.schemas import CheckoutPreferenceRequest, CheckoutPreferenceResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["payments:checkout"])


@router.post(
    "/mercadopago",
    response_model=CheckoutPreferenceResponse,
    status_code=status.HTTP_200_OK,
)
async def create_mercadopago_preference(
    payload: CheckoutPreferenceRequest,
    session: AsyncSession = Depends(get_async_session),
    client: MercadoPagoClient = Depends(get_mercadopago_client),
    settings: MercadoPagoSettings = Depends(get_mercadopago_settings),
) -> CheckoutPreferenceResponse:
    """Crea la preferencia de pago para un pedido y devuelve el link de pago."""
    if not payload.order_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Order ID is required")

    order = await OrderService().get_order(session, payload.order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")

    result = await create_payment_preference(client, order, settings)
    if isinstance(result, PreferenceFailed):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create payment preference",
        )

    return CheckoutPreferenceResponse(
        preference_id=result.preference_id,
        init_point=result.init_point,
        sandbox_init_point=result.sandbox_init_point,
    )


__all__ = ["router"]

# Fin del archivo backend/app/modules/payments/routes/checkout.py
