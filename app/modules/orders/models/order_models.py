# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/models/order_models.py

Modelos ORM para las tablas orders y order_items.

Montos siempre en centavos (enteros). Los datos de envío y de cada ítem
son una foto tomada al crear el pedido: editar la dirección del usuario o
el producto después no altera un pedido ya registrado.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import Base
from app.modules.orders.enums import OrderStatus, PaymentMethod, ShippingZone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(Base):
    """Un intento de compra (checkout) con su estado de pago."""

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    order_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        doc="Número visible ORD-AAAA-NNNN, único y creciente dentro del año.",
    )

    user_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        doc="Usuario dueño del pedido (null en compras como invitado).",
    )

    guest_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    status: Mapped[OrderStatus] = mapped_column(
        OrderStatus.as_db_enum(),
        nullable=False,
        default=OrderStatus.PENDING,
    )

    # ----- Montos (centavos) -----
    subtotal: Mapped[int] = mapped_column(Integer, nullable=False)
    shipping_cost: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    discount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total: Mapped[int] = mapped_column(Integer, nullable=False)

    # ----- Pago -----
    payment_method: Mapped[PaymentMethod] = mapped_column(
        PaymentMethod.as_db_enum(),
        nullable=False,
    )

    payment_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        doc="ID del pago en Mercado Pago, se completa al conciliar.",
    )

    payment_status: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        doc="Estado crudo informado por el proveedor (solo informativo).",
    )

    paid_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # ----- Envío (foto al momento de la compra) -----
    shipping_full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    shipping_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    shipping_street: Mapped[str] = mapped_column(String(255), nullable=False)
    shipping_number: Mapped[str] = mapped_column(String(20), nullable=False)
    shipping_floor: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    shipping_apartment: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    shipping_city: Mapped[str] = mapped_column(String(100), nullable=False)
    shipping_province: Mapped[str] = mapped_column(String(100), nullable=False)
    shipping_postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    shipping_zone: Mapped[ShippingZone] = mapped_column(ShippingZone.as_db_enum(), nullable=False)
    shipping_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ----- Seguimiento (lo completa el equipo de logística) -----
    tracking_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    tracking_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    shipped_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    delivered_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    customer_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    internal_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint("order_number"),
        CheckConstraint("total = subtotal + shipping_cost - discount", name="total_consistent"),
        CheckConstraint("subtotal >= 0 AND shipping_cost >= 0 AND discount >= 0", name="amounts_non_negative"),
        Index("ix_orders_user_id", "user_id"),
        Index("ix_orders_status", "status"),
        Index("ix_orders_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Order id={self.id} number={self.order_number} status={self.status} "
            f"total={self.total}>"
        )


class OrderItem(Base):
    """Línea inmutable de un pedido: unit_price × quantity = total."""

    __tablename__ = "order_items"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Solo trazabilidad: el precio nunca se vuelve a derivar del producto
    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("products.id", ondelete="RESTRICT"),
        nullable=False,
    )

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Orden de la línea dentro del pedido.",
    )

    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    product_sku: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    product_image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    unit_price: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    total: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    order: Mapped["Order"] = relationship("Order", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="quantity_positive"),
        CheckConstraint("total = unit_price * quantity", name="total_consistent"),
    )

    def __repr__(self) -> str:
        return f"<OrderItem order_id={self.order_id} sku={self.product_sku!r} qty={self.quantity}>"


__all__ = ["Order", "OrderItem"]

# Fin del archivo backend/app/modules/orders/models/order_models.py
