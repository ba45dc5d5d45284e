# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_payments.py

Configuración de la integración con Mercado Pago.

Descripción:
    Centraliza credenciales, URLs de callback, tiempos de espera y
    opciones de la preferencia de pago.

    - MERCADOPAGO_ACCESS_TOKEN es obligatorio: su ausencia aborta el arranque
      (ver `require_access_token`).
    - MERCADOPAGO_WEBHOOK_SECRET es opcional: sin él la verificación de firma
      de webhooks queda en modo inseguro (solo desarrollo, siempre logueado).

Autor: Equipo Tienda
Fecha: 2026-03-03
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingAccessTokenError(RuntimeError):
    """El token de acceso de Mercado Pago no está configurado."""


class MercadoPagoSettings(BaseSettings):
    """Configuración de Mercado Pago."""

    # =========================================================================
    # CREDENCIALES
    # =========================================================================

    mercadopago_access_token: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("MERCADOPAGO_ACCESS_TOKEN", "MERCADO_PAGO_ACCESS_TOKEN"),
        description="Access token de Mercado Pago (APP_USR-... o TEST-...)",
    )

    mercadopago_webhook_secret: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("MERCADOPAGO_WEBHOOK_SECRET", "MERCADO_PAGO_WEBHOOK_SECRET"),
        description="Clave secreta de firma de webhooks (x-signature)",
    )

    # =========================================================================
    # URLS
    # =========================================================================

    app_base_url: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices("APP_BASE_URL", "BASE_URL"),
        description="URL pública base para back_urls y notification_url",
    )

    mercadopago_api_base_url: str = Field(
        default="https://api.mercadopago.com",
        validation_alias="MERCADOPAGO_API_BASE_URL",
        description="Base de la API REST de Mercado Pago",
    )

    # =========================================================================
    # HTTP
    # =========================================================================

    mercadopago_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        validation_alias="MERCADOPAGO_TIMEOUT_SECONDS",
        description="Timeout por llamada a la API (segundos)",
    )

    # =========================================================================
    # PREFERENCIA
    # =========================================================================

    mercadopago_currency_id: str = Field(
        default="ARS",
        validation_alias="MERCADOPAGO_CURRENCY_ID",
    )

    mercadopago_max_installments: int = Field(
        default=12,
        ge=1,
        le=36,
        validation_alias="MERCADOPAGO_MAX_INSTALLMENTS",
        description="Tope de cuotas ofrecido en el checkout",
    )

    mercadopago_statement_descriptor: str = Field(
        default="Tu Tienda",
        max_length=22,
        validation_alias="MERCADOPAGO_STATEMENT_DESCRIPTOR",
        description="Texto que aparece en el resumen de la tarjeta",
    )

    mercadopago_fallback_payer_email: str = Field(
        default="customer@email.com",
        validation_alias="MERCADOPAGO_FALLBACK_PAYER_EMAIL",
        description="Email del pagador cuando el pedido no tiene email de invitado",
    )

    @field_validator("app_base_url", "mercadopago_api_base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("mercadopago_access_token", "mercadopago_webhook_secret", mode="before")
    @classmethod
    def _empty_as_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # =========================================================================
    # HELPERS
    # =========================================================================

    @property
    def access_token(self) -> Optional[str]:
        if self.mercadopago_access_token is None:
            return None
        return self.mercadopago_access_token.get_secret_value()

    @property
    def webhook_secret(self) -> Optional[str]:
        if self.mercadopago_webhook_secret is None:
            return None
        return self.mercadopago_webhook_secret.get_secret_value()

    @property
    def notification_url(self) -> str:
        return f"{self.app_base_url}/api/webhooks/mercadopago"

    def require_access_token(self) -> str:
        """Devuelve el access token o aborta (condición fatal de arranque)."""
        token = self.access_token
        if not token:
            raise MissingAccessTokenError(
                "MERCADOPAGO_ACCESS_TOKEN no está configurado; no se puede iniciar el servicio"
            )
        return token

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton
_settings: Optional[MercadoPagoSettings] = None


def get_payments_settings() -> MercadoPagoSettings:
    """Obtiene instancia singleton de configuración de Mercado Pago."""
    global _settings
    if _settings is None:
        _settings = MercadoPagoSettings()
    return _settings


def reset_payments_settings() -> None:
    """Descarta el singleton (útil en tests que cambian variables de entorno)."""
    global _settings
    _settings = None



__all__ = [
    "MercadoPagoSettings",
    "MissingAccessTokenError",
    "get_payments_settings",
    "reset_payments_settings",
]

# Fin del archivo backend/app/shared/config/settings_payments.py
