# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/repositories/order_repository.py

Repositorio de pedidos (orders + order_items).

Autor: Equipo Tienda
Fecha: 2026-03-05
"""

from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.orders.models import Order


class OrderRepository(BaseRepository[Order]):

    def __init__(self):
        super().__init__(Order)

    async def get_for_update(self, session: AsyncSession, order_id: UUID) -> Optional[Order]:
        """Lee el pedido bloqueando la fila (SELECT ... FOR UPDATE en Postgres)."""
        stmt = select(Order).where(Order.id == order_id).with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_user(self, session: AsyncSession, user_id: str) -> Sequence[Order]:
        stmt = (
            select(Order)
            .where(Order.user_id == user_id)
            .order_by(Order.created_at.desc(), Order.order_number.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_last_number_for_prefix(self, session: AsyncSession, prefix: str) -> Optional[str]:
        """
        Último número emitido con el prefijo dado (p.ej. "ORD-2026-").

        Ordena por longitud y luego por valor: con padding fijo equivale al
        orden numérico, y sigue siéndolo si la secuencia supera 9999.
        """
        stmt = (
            select(Order.order_number)
            .where(Order.order_number.like(f"{prefix}%"))
            .order_by(func.length(Order.order_number).desc(), Order.order_number.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


__all__ = ["OrderRepository"]

# Fin del archivo backend/app/modules/orders/repositories/order_repository.py
