# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/webhooks/signature_verification.py

Verificación de firma de webhooks de Mercado Pago (header x-signature).

Mercado Pago firma con HMAC-SHA256 (clave: secreto del webhook) el manifiesto:

    id:<data.id>;request-id:<x-request-id>;ts:<ts>;

y envía `x-signature: ts=<ts>,v1=<hex>` (pares clave=valor separados por
coma, sin orden garantizado).

Política:
- Sin secreto configurado la verificación se omite (modo inseguro, solo
  desarrollo) y se loguea SIEMPRE; en producción a nivel ERROR.
- Header mal formado, request-id ausente o firma distinta → False.
  Nunca lanza excepciones.

Autor: Equipo Tienda
Fecha: 2026-03-10
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Dict, Optional, Tuple

from app.shared.config import get_settings

logger = logging.getLogger(__name__)


def parse_signature_header(signature_header: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Extrae (ts, v1) del header x-signature.

    >>> parse_signature_header("ts=1704908010,v1=abc123")
    ('1704908010', 'abc123')
    >>> parse_signature_header("v1=abc123, ts=1704908010")
    ('1704908010', 'abc123')
    >>> parse_signature_header("garbage") is None
    True
    """
    if not signature_header:
        return None

    elements: Dict[str, str] = {}
    for item in signature_header.split(","):
        item = item.strip()
        if "=" not in item:
            continue
        key, value = item.split("=", 1)
        elements[key.strip().lower()] = value.strip()

    ts = elements.get("ts")
    v1 = elements.get("v1")
    if not ts or not v1:
        return None
    return ts, v1


def build_signature_manifest(data_id: str, request_id: str, ts: str) -> str:
    return f"id:{data_id};request-id:{request_id};ts:{ts};"


def compute_signature(manifest: str, webhook_secret: str) -> str:
    return hmac.new(
        webhook_secret.encode("utf-8"),
        msg=manifest.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).hexdigest()


def _log_insecure_bypass(data_id: Optional[str]) -> None:
    env = get_settings().python_env
    log = logger.error if env == "production" else logger.warning
    log(
        "mercadopago_webhook_signature_bypassed reason=webhook_secret_missing "
        "env=%s data_id=%s; configure MERCADOPAGO_WEBHOOK_SECRET",
        env,
        data_id,
    )


def verify_mercadopago_signature(
    signature_header: Optional[str],
    request_id: Optional[str],
    data_id: Optional[str],
    webhook_secret: Optional[str] = None,
) -> bool:
    """
    Verifica la firma de un webhook de Mercado Pago.

    Args:
        signature_header: Header x-signature
        request_id: Header x-request-id
        data_id: data.id del evento (ID del pago)
        webhook_secret: Secreto del webhook; None activa el modo inseguro

    Returns:
        True si la firma es válida (o si no hay secreto), False en caso contrario
    """
    if not webhook_secret:
        _log_insecure_bypass(data_id)
        return True

    parsed = parse_signature_header(signature_header)
    if parsed is None:
        logger.warning("mercadopago_webhook_rejected reason=malformed_signature_header")
        return False

    if not request_id:
        logger.warning("mercadopago_webhook_rejected reason=missing_request_id")
        return False

    if not data_id:
        logger.warning("mercadopago_webhook_rejected reason=missing_data_id")
        return False

    ts, received = parsed
    expected = compute_signature(build_signature_manifest(data_id, request_id, ts), webhook_secret)

    # Bytes: compare_digest lanza TypeError con str no ASCII (headers latin-1)
    received_bytes = received.lower().encode("utf-8", "surrogateescape")
    if not hmac.compare_digest(expected.encode("ascii"), received_bytes):
        logger.warning(
            "mercadopago_webhook_rejected reason=signature_mismatch data_id=%s ts=%s",
            data_id,
            ts,
        )
        return False

    return True


__all__ = [
    "parse_signature_header",
    "build_signature_manifest",
    "compute_signature",
    "verify_mercadopago_signature",
]

# Fin del archivo backend/app/modules/payments/services/webhooks/signature_verification.py
