# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/metrics.py

Métricas Prometheus del libro de pedidos.

Autor: Equipo Tienda
Fecha: 2026-03-06
"""

from prometheus_client import Counter

ORDERS_CREATED_TOTAL = Counter(
    "orders_created_total",
    "Pedidos creados",
    ["payment_method"],
)

ORDER_NUMBER_CONFLICTS_TOTAL = Counter(
    "order_number_conflicts_total",
    "Colisiones de número de pedido resueltas con reintento",
)

ORDER_STATUS_CHANGES_TOTAL = Counter(
    "order_status_changes_total",
    "Cambios de estado aplicados a pedidos",
    ["from_status", "to_status"],
)


__all__ = [
    "ORDERS_CREATED_TOTAL",
    "ORDER_NUMBER_CONFLICTS_TOTAL",
    "ORDER_STATUS_CHANGES_TOTAL",
]

# Fin del archivo backend/app/modules/orders/metrics.py
