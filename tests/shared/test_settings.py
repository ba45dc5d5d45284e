# -*- coding: utf-8 -*-
"""
Tests de configuración (pydantic-settings).

Autor: Equipo Tienda
Fecha: 2026-03-15
"""

import pytest

from app.shared.config import BaseAppSettings, MercadoPagoSettings
from app.shared.config.settings_testing import EnvTestingSettings


class TestDatabaseUrl:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("postgres://u:p@db:5432/tienda", "postgresql+asyncpg://u:p@db:5432/tienda"),
            ("postgresql://u:p@db:5432/tienda", "postgresql+asyncpg://u:p@db:5432/tienda"),
            ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
        ],
    )
    def test_normalizes_scheme(self, monkeypatch, raw, expected):
        monkeypatch.setenv("DB_URL", raw)

        assert BaseAppSettings().database_url == expected

    def test_testing_defaults_to_sqlite(self, monkeypatch):
        monkeypatch.delenv("DB_URL", raising=False)

        assert EnvTestingSettings().database_url.startswith("sqlite+aiosqlite")


class TestCors:
    def test_parses_origin_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://tienda.com.ar, 'https://admin.tienda.com.ar'")

        assert BaseAppSettings().get_cors_origins() == [
            "https://tienda.com.ar",
            "https://admin.tienda.com.ar",
        ]


class TestMercadoPagoSettings:
    def test_accepts_legacy_env_names(self, monkeypatch):
        monkeypatch.delenv("MERCADOPAGO_ACCESS_TOKEN", raising=False)
        monkeypatch.setenv("MERCADO_PAGO_ACCESS_TOKEN", "APP_USR-legacy")
        monkeypatch.setenv("MERCADO_PAGO_WEBHOOK_SECRET", "legacy-secret")

        settings = MercadoPagoSettings()

        assert settings.access_token == "APP_USR-legacy"
        assert settings.webhook_secret == "legacy-secret"

    def test_notification_url_from_base_url(self, monkeypatch):
        monkeypatch.setenv("APP_BASE_URL", "https://tienda.com.ar/")

        settings = MercadoPagoSettings()

        assert settings.notification_url == "https://tienda.com.ar/api/webhooks/mercadopago"

    def test_empty_secret_means_insecure_mode(self, monkeypatch):
        monkeypatch.setenv("MERCADOPAGO_WEBHOOK_SECRET", "")

        assert MercadoPagoSettings().webhook_secret is None
