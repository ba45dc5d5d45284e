# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/webhooks/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-10
"""

from .signature_verification import (
    build_signature_manifest,
    compute_signature,
    parse_signature_header,
    verify_mercadopago_signature,
)

__all__ = [
    "build_signature_manifest",
    "compute_signature",
    "parse_signature_header",
    "verify_mercadopago_signature",
]
