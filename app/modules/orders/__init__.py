# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/__init__.py

Módulo de pedidos: libro de pedidos (ledger), numeración ORD-AAAA-NNNN,
costo de envío por zona y alta de pedidos desde el carrito.

Autor: Equipo Tienda
Fecha: 2026-03-05
"""
