# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/models/product_models.py

Modelo ORM mínimo del catálogo (tabla products).

Solo se usa para tomar la "foto" de nombre/sku/imagen/precio al crear un
pedido; el listado y filtrado del catálogo viven fuera de este backend.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    sku: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, unique=True)

    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    price: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Precio vigente en centavos.",
    )

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} sku={self.sku!r} price={self.price}>"


__all__ = ["Product"]

# Fin del archivo backend/app/modules/orders/models/product_models.py
