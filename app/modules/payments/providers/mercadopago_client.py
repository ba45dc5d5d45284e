# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/providers/mercadopago_client.py

Cliente HTTP para la API REST de Mercado Pago.

- POST /checkout/preferences  → crea la preferencia (checkout pro)
- GET  /v1/payments/{id}      → estado autoritativo de un pago

Una instancia por proceso: se crea en el lifespan de FastAPI (falla si no
hay access token), se inyecta por dependencia y se cierra al apagar.
Mantiene conexiones keep-alive; no usar "async with" por request.

Timeouts explícitos (5s por defecto) y un reintento con backoff para
errores transitorios (429/502/503/504 y timeouts).

Autor: Equipo Tienda
Fecha: 2026-03-09
"""

from __future__ import annotations

import asyncio
import json
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import httpx

from app.shared.config.settings_payments import MercadoPagoSettings

logger = logging.getLogger(__name__)

# Límites de conexión del cliente singleton
MERCADOPAGO_HTTP_LIMITS = httpx.Limits(
    max_keepalive_connections=20,
    max_connections=50,
    keepalive_expiry=30.0,
)

# Códigos HTTP que se consideran transitorios (retry permitido)
TRANSIENT_HTTP_ERRORS = frozenset({429, 502, 503, 504})

MAX_TRANSIENT_RETRIES = 1
RETRY_BACKOFF_BASE = 0.5


class MercadoPagoError(Exception):
    """Error al hablar con la API de Mercado Pago (red, timeout o rechazo)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MercadoPagoTimeoutError(MercadoPagoError):
    """La API no respondió dentro del timeout."""


class MercadoPagoNotFoundError(MercadoPagoError):
    """El recurso (p.ej. el pago) no existe en Mercado Pago."""


def _json_default(value: Any) -> Any:
    # Montos en unidades mayores con 2 decimales: float conserva el literal
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Tipo no serializable: {type(value).__name__}")


def build_timeout(seconds: float) -> httpx.Timeout:
    return httpx.Timeout(connect=seconds, read=seconds, write=seconds, pool=seconds)


class MercadoPagoClient:
    """Cliente async de la API de Mercado Pago."""

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = "https://api.mercadopago.com",
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_retries: int = MAX_TRANSIENT_RETRIES,
        retry_backoff: float = RETRY_BACKOFF_BASE,
    ) -> None:
        if not access_token:
            raise ValueError("access_token es obligatorio")
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=build_timeout(timeout_seconds),
            limits=MERCADOPAGO_HTTP_LIMITS,
            transport=transport,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
        )

    @classmethod
    def from_settings(
        cls,
        settings: MercadoPagoSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "MercadoPagoClient":
        """Crea el cliente; MissingAccessTokenError si falta el token."""
        return cls(
            settings.require_access_token(),
            base_url=settings.mercadopago_api_base_url,
            timeout_seconds=settings.mercadopago_timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    # ---------------------------------------------------------
    # Operaciones
    # ---------------------------------------------------------
    async def create_preference(
        self,
        body: Dict[str, Any],
        *,
        idempotency_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if idempotency_key:
            headers["X-Idempotency-Key"] = idempotency_key
        return await self._request(
            "POST",
            "/checkout/preferences",
            content=json.dumps(body, default=_json_default),
            headers=headers,
        )

    async def get_payment(self, payment_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/v1/payments/{payment_id}")

    # ---------------------------------------------------------
    # Transporte
    # ---------------------------------------------------------
    async def _request(self, method: str, url: str, **kwargs: Any) -> Dict[str, Any]:
        last_error: Optional[MercadoPagoError] = None

        for attempt in range(self.max_retries + 1):
            try:
                response = await self._http.request(method, url, **kwargs)
            except httpx.TimeoutException as e:
                last_error = MercadoPagoTimeoutError(f"Timeout en {method} {url}: {e!r}")
            except httpx.HTTPError as e:
                last_error = MercadoPagoError(f"Error de red en {method} {url}: {e!r}")
            else:
                if response.status_code in TRANSIENT_HTTP_ERRORS:
                    last_error = MercadoPagoError(
                        f"Error transitorio {response.status_code} en {method} {url}",
                        status_code=response.status_code,
                    )
                elif response.status_code == 404:
                    raise MercadoPagoNotFoundError(
                        f"No encontrado: {method} {url}", status_code=404
                    )
                elif response.status_code >= 400:
                    raise MercadoPagoError(
                        f"Mercado Pago respondió {response.status_code}: {response.text[:200]}",
                        status_code=response.status_code,
                    )
                else:
                    try:
                        return response.json()
                    except ValueError as e:
                        raise MercadoPagoError(
                            f"Respuesta no JSON de Mercado Pago ({method} {url})",
                            status_code=response.status_code,
                        ) from e

            if attempt < self.max_retries:
                backoff = self.retry_backoff * (2 ** attempt)
                logger.warning(
                    "mercadopago_retry method=%s url=%s attempt=%d backoff=%.2f error=%s",
                    method,
                    url,
                    attempt + 1,
                    backoff,
                    last_error,
                )
                await asyncio.sleep(backoff)

        if last_error is None:
            raise MercadoPagoError(f"Sin intentos para {method} {url} (max_retries={self.max_retries})")
        raise last_error


__all__ = [
    "MercadoPagoClient",
    "MercadoPagoError",
    "MercadoPagoTimeoutError",
    "MercadoPagoNotFoundError",
    "build_timeout",
]

# Fin del archivo backend/app/modules/payments/providers/mercadopago_client.py
