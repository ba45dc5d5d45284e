# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/__init__.py

Ensamblador de rutas del módulo Payments.

Incluye:
- /checkout/mercadopago
- /webhooks/mercadopago

Autor: Equipo Tienda
Fecha: 2026-03-12
"""

from fastapi import APIRouter

from .checkout import router as checkout_router
from .webhooks_mercadopago import router as webhooks_mercadopago_router

router = APIRouter()
router.include_router(checkout_router)
router.include_router(webhooks_mercadopago_router)

__all__ = ["router"]

# Fin del archivo backend/app/modules/payments/routes/__init__.py
