# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/routes/orders.py

Endpoints de pedidos.

- POST /orders             → alta desde el checkout (pedido pending)
- GET  /orders/{order_id}  → detalle con ítems
- GET  /orders?userId=...  → pedidos del usuario, más recientes primero

Autor: Equipo Tienda
Fecha: 2026-03-07
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_async_session
from app.modules.orders.facades.errors import (
    OrderNumberConflictError,
    OrderValidationError,
)
from app.modules.orders.facades.place_order import place_order
from app.modules.orders.schemas import OrderOut, PlaceOrderRequest
from app.modules.orders.services import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: PlaceOrderRequest,
    session: AsyncSession = Depends(get_async_session),
) -> OrderOut:
    """Crea un pedido `pending` a partir del carrito y los datos de envío."""
    try:
        order = await place_order(session, payload)
    except OrderValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except OrderNumberConflictError as e:
        logger.error("create_order_conflict error=%s", e)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="No se pudo registrar el pedido, intentá nuevamente",
        )
    return OrderOut.model_validate(order)


@router.get("/{order_id}", response_model=OrderOut)
async def get_order(
    order_id: str,
    session: AsyncSession = Depends(get_async_session),
) -> OrderOut:
    order = await OrderService().get_order(session, order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return OrderOut.model_validate(order)


@router.get("", response_model=List[OrderOut])
async def list_user_orders(
    user_id: str = Query(..., alias="userId", min_length=1),
    session: AsyncSession = Depends(get_async_session),
) -> List[OrderOut]:
    orders = await OrderService().list_orders_for_user(session, user_id)
    return [OrderOut.model_validate(o) for o in orders]


__all__ = ["router"]

# Fin del archivo backend/app/modules/orders/routes/orders.py
