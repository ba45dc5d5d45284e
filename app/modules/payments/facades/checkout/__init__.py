# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-11
"""

from .preference import (
    PreferenceCreated,
    PreferenceFailed,
    PreferenceResult,
    build_preference_payload,
    cents_to_amount,
    create_payment_preference,
)

__all__ = [
    "PreferenceCreated",
    "PreferenceFailed",
    "PreferenceResult",
    "build_preference_payload",
    "cents_to_amount",
    "create_payment_preference",
]
