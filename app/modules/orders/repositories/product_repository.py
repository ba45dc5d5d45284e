# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/repositories/product_repository.py

Lectura del catálogo para tomar la foto de los productos del carrito.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from __future__ import annotations

from typing import Dict, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.orders.models import Product


class ProductRepository(BaseRepository[Product]):

    def __init__(self):
        super().__init__(Product)

    async def get_active_by_ids(
        self, session: AsyncSession, product_ids: Sequence[UUID]
    ) -> Dict[UUID, Product]:
        if not product_ids:
            return {}
        stmt = select(Product).where(
            Product.id.in_(list(product_ids)),
            Product.is_active.is_(True),
        )
        result = await session.execute(stmt)
        return {p.id: p for p in result.scalars().all()}


__all__ = ["ProductRepository"]

# Fin del archivo backend/app/modules/orders/repositories/product_repository.py
