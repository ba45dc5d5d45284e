# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/services/order_number.py

Generador del número visible de pedido: ORD-AAAA-NNNN.

- La secuencia es por año calendario (zona horaria de la tienda) y se
  rellena con ceros a 4 dígitos; arranca en 0001.
- Leer "el último número" no es atómico: dos altas concurrentes pueden
  calcular el mismo valor. La unicidad la garantiza el constraint
  uq_orders_order_number y el reintento de OrderService.create_order.

Autor: Equipo Tienda
Fecha: 2026-03-06
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import get_settings
from app.modules.orders.repositories import OrderRepository

ORDER_NUMBER_PREFIX = "ORD"
SEQUENCE_WIDTH = 4

_ORDER_NUMBER_RE = re.compile(r"^ORD-(\d{4})-(\d+)$")


def year_prefix(year: int) -> str:
    return f"{ORDER_NUMBER_PREFIX}-{year}-"


def format_order_number(year: int, sequence: int) -> str:
    """
    >>> format_order_number(2025, 1)
    'ORD-2025-0001'
    >>> format_order_number(2025, 12345)
    'ORD-2025-12345'
    """
    if sequence < 1:
        raise ValueError("sequence debe ser >= 1")
    return f"{year_prefix(year)}{sequence:0{SEQUENCE_WIDTH}d}"


def parse_order_sequence(order_number: Optional[str]) -> Optional[int]:
    """Extrae la secuencia numérica; None si el formato no es ORD-AAAA-N."""
    if not order_number:
        return None
    match = _ORDER_NUMBER_RE.match(order_number)
    if not match:
        return None
    return int(match.group(2))


def current_store_year(now: Optional[datetime] = None) -> int:
    tz = ZoneInfo(get_settings().store_timezone)
    if now is None:
        return datetime.now(tz).year
    if now.tzinfo is None:
        return now.year
    return now.astimezone(tz).year


async def generate_order_number(
    session: AsyncSession,
    *,
    now: Optional[datetime] = None,
    repo: Optional[OrderRepository] = None,
) -> str:
    """Siguiente número de pedido para el año en curso."""
    repo = repo or OrderRepository()
    year = current_store_year(now)
    last = await repo.get_last_number_for_prefix(session, year_prefix(year))
    last_seq = parse_order_sequence(last) or 0
    return format_order_number(year, last_seq + 1)


__all__ = [
    "ORDER_NUMBER_PREFIX",
    "format_order_number",
    "parse_order_sequence",
    "current_store_year",
    "generate_order_number",
]

# Fin del archivo backend/app/modules/orders/services/order_number.py
