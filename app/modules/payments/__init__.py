# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/__init__.py

Módulo de pagos con Mercado Pago:
- preferencia de pago (checkout pro) a partir de un pedido
- verificación de firma de webhooks (x-signature)
- conciliación del estado del pago contra el libro de pedidos

Autor: Equipo Tienda
Fecha: 2026-03-09
"""
