# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/facades/errors.py

Excepciones de dominio para el módulo de pedidos.
Las rutas las traducen a HTTPException (400/404/409).

Autor: Equipo Tienda
Fecha: 2026-03-05
"""


class OrderError(Exception):
    """Base de errores del libro de pedidos."""


class OrderValidationError(OrderError):
    """Datos de pedido inconsistentes (montos que no cierran, ítems inválidos)."""


class ProductUnavailable(OrderValidationError):
    """Se lanza cuando un producto del carrito no existe o está inactivo."""
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Producto no disponible: {product_id}")


class OrderNotFound(OrderError):
    """Se lanza cuando no se encuentra un pedido por ID."""
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Pedido no encontrado: {identifier}")


class OrderNumberConflictError(OrderError):
    """Se agotaron los reintentos al asignar un número de pedido único."""
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"No se pudo asignar un número de pedido único tras {attempts} intentos")


__all__ = [
    "OrderError",
    "OrderValidationError",
    "ProductUnavailable",
    "OrderNotFound",
    "OrderNumberConflictError",
]

# Fin del archivo backend/app/modules/orders/facades/errors.py
