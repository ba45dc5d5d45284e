# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores de la API pública de la tienda.

Responsabilidades:
- Incluir el router de health (/health).
- Montar los módulos de negocio (orders, payments) bajo /api.

Autor: Equipo Tienda
Fecha: 2026-03-14
"""

from fastapi import APIRouter

from app.modules.orders.routes import router as orders_router
from app.modules.payments.routes import router as payments_router

from .health_routes import router as health_router

api = APIRouter(prefix="/api")
api.include_router(orders_router)
api.include_router(payments_router)

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)
router.include_router(api)

__all__ = ["router"]

# Fin del archivo backend/app/routes/__init__.py
