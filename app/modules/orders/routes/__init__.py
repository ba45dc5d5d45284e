# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/routes/__init__.py

Ensamblador de rutas del módulo Orders (/api/orders).

Autor: Equipo Tienda
Fecha: 2026-03-07
"""

from fastapi import APIRouter

from .orders import router as orders_router

router = APIRouter()
router.include_router(orders_router)

__all__ = ["router"]

# Fin del archivo backend/app/modules/orders/routes/__init__.py
