# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/facades/place_order.py

Alta de pedido desde el checkout.

Recibe el carrito (producto + cantidad) y los datos de envío, toma la foto
de cada producto desde el catálogo (nombre, sku, imagen, precio vigente),
calcula el envío por zona y delega en OrderService.create_order.

Los precios nunca se toman del cliente.

Autor: Equipo Tienda
Fecha: 2026-03-06
"""

from __future__ import annotations

import logging
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.orders.facades.errors import OrderValidationError, ProductUnavailable
from app.modules.orders.models import Order
from app.modules.orders.repositories import ProductRepository
from app.modules.orders.schemas import CreateOrderInput, OrderItemInput, PlaceOrderRequest
from app.modules.orders.services import OrderService, calculate_shipping

logger = logging.getLogger(__name__)


def _merge_cart_lines(request: PlaceOrderRequest) -> Dict[UUID, int]:
    """Agrupa líneas repetidas del mismo producto conservando el orden."""
    quantities: Dict[UUID, int] = {}
    for line in request.items:
        quantities[line.product_id] = quantities.get(line.product_id, 0) + line.quantity
    return quantities


async def place_order(
    session: AsyncSession,
    request: PlaceOrderRequest,
    *,
    service: Optional[OrderService] = None,
    products: Optional[ProductRepository] = None,
) -> Order:
    """
    Crea el pedido `pending` para el carrito recibido.

    Raises:
        ProductUnavailable: algún producto no existe o está inactivo.
        OrderValidationError: el descuento supera el importe.
        OrderNumberConflictError: ver OrderService.create_order.
    """
    service = service or OrderService()
    products = products or ProductRepository()

    quantities = _merge_cart_lines(request)
    catalog = await products.get_active_by_ids(session, list(quantities))

    items = []
    for product_id, quantity in quantities.items():
        product = catalog.get(product_id)
        if product is None:
            raise ProductUnavailable(product_id)
        items.append(
            OrderItemInput(
                product_id=product.id,
                product_name=product.name,
                product_sku=product.sku,
                product_image=product.image_url,
                unit_price=product.price,
                quantity=quantity,
            )
        )

    subtotal = sum(item.total for item in items)
    shipping_cost = calculate_shipping(request.shipping.zone, subtotal)
    if request.discount > subtotal + shipping_cost:
        raise OrderValidationError("El descuento supera el importe del pedido")

    data = CreateOrderInput(
        user_id=request.user_id,
        guest_email=request.email,
        items=items,
        subtotal=subtotal,
        shipping_cost=shipping_cost,
        discount=request.discount,
        total=subtotal + shipping_cost - request.discount,
        payment_method=request.payment_method,
        shipping=request.shipping,
        customer_notes=request.notes,
    )
    logger.debug(
        "place_order items=%d subtotal=%d shipping=%d zone=%s",
        len(items),
        subtotal,
        shipping_cost,
        request.shipping.zone,
    )
    return await service.create_order(session, data)


__all__ = ["place_order"]

# Fin del archivo backend/app/modules/orders/facades/place_order.py
