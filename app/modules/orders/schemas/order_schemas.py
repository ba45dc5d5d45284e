# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/schemas/order_schemas.py

Esquemas Pydantic del módulo de pedidos.

- CreateOrderInput: entrada del libro de pedidos (montos ya calculados).
- PlaceOrderRequest: lo que envía el checkout (carrito + envío).
- OrderOut / OrderItemOut: respuesta pública.

La API expone camelCase (orderId, shippingCost, ...); internamente se usa
snake_case.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

from app.modules.orders.enums import OrderStatus, PaymentMethod, ShippingZone

# Formatos argentinos
POSTAL_CODE_PATTERN = r"^\d{4}$"
PHONE_PATTERN = r"^[\d\s+()-]+$"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# =========================================================================
# ENVÍO
# =========================================================================

class ShippingAddress(_CamelModel):
    """Datos de envío del comprador (se copian al pedido)."""

    full_name: str = Field(min_length=2, max_length=255, description="Nombre y apellido.")
    phone: str = Field(
        min_length=8,
        max_length=20,
        pattern=PHONE_PATTERN,
        description="Teléfono de contacto.",
    )
    street: str = Field(min_length=2, max_length=255)
    number: str = Field(min_length=1, max_length=20)
    floor: Optional[str] = Field(default=None, max_length=10)
    apartment: Optional[str] = Field(default=None, max_length=10)
    city: str = Field(min_length=2, max_length=100)
    province: str = Field(min_length=2, max_length=100)
    postal_code: str = Field(pattern=POSTAL_CODE_PATTERN, description="Código postal de 4 dígitos.")
    zone: ShippingZone
    notes: Optional[str] = Field(default=None, max_length=500)


# =========================================================================
# ENTRADA DEL LIBRO DE PEDIDOS
# =========================================================================

class OrderItemInput(_CamelModel):
    """Línea con la foto del producto al momento de la compra."""

    product_id: UUID
    product_name: str = Field(min_length=1, max_length=255)
    product_sku: Optional[str] = Field(default=None, max_length=100)
    product_image: Optional[str] = None
    unit_price: int = Field(ge=0, description="Precio unitario en centavos.")
    quantity: int = Field(gt=0)

    @property
    def total(self) -> int:
        return self.unit_price * self.quantity


class CreateOrderInput(_CamelModel):
    """Entrada de `OrderService.create_order` (montos en centavos)."""

    user_id: Optional[str] = None
    guest_email: Optional[EmailStr] = None
    items: List[OrderItemInput] = Field(min_length=1)
    subtotal: int = Field(ge=0)
    shipping_cost: int = Field(ge=0)
    discount: int = Field(default=0, ge=0)
    total: int = Field(ge=0)
    payment_method: PaymentMethod = PaymentMethod.MERCADOPAGO
    shipping: ShippingAddress
    customer_notes: Optional[str] = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def _require_owner(self) -> "CreateOrderInput":
        if not self.user_id and not self.guest_email:
            raise ValueError("Se requiere user_id o guest_email")
        return self


# =========================================================================
# CHECKOUT (carrito → pedido)
# =========================================================================

class CartLine(_CamelModel):
    product_id: UUID
    quantity: int = Field(gt=0, le=99)


class PlaceOrderRequest(_CamelModel):
    """Body de POST /api/orders."""

    user_id: Optional[str] = None
    email: Optional[EmailStr] = None
    items: List[CartLine] = Field(min_length=1)
    shipping: ShippingAddress
    payment_method: PaymentMethod = PaymentMethod.MERCADOPAGO
    discount: int = Field(default=0, ge=0)
    notes: Optional[str] = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def _require_contact(self) -> "PlaceOrderRequest":
        if not self.user_id and not self.email:
            raise ValueError("Email requerido para compras como invitado")
        return self


# =========================================================================
# SALIDA
# =========================================================================

class OrderItemOut(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    product_id: UUID
    product_name: str
    product_sku: Optional[str] = None
    product_image: Optional[str] = None
    unit_price: int
    quantity: int
    total: int


class OrderOut(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    order_number: str
    status: OrderStatus
    user_id: Optional[str] = None
    guest_email: Optional[str] = None
    subtotal: int
    shipping_cost: int
    discount: int
    total: int
    payment_method: PaymentMethod
    payment_id: Optional[str] = None
    payment_status: Optional[str] = None
    paid_at: Optional[datetime] = None
    shipping_zone: ShippingZone
    shipping_city: str
    shipping_province: str
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemOut] = Field(default_factory=list)


__all__ = [
    "ShippingAddress",
    "OrderItemInput",
    "CreateOrderInput",
    "CartLine",
    "PlaceOrderRequest",
    "OrderItemOut",
    "OrderOut",
]

# Fin del archivo backend/app/modules/orders/schemas/order_schemas.py
