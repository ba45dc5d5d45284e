# -*- coding: utf-8 -*-
"""
Tests del adaptador pedido → preferencia de Mercado Pago.

Autor: Equipo Tienda
Fecha: 2026-03-15
"""

import json
from decimal import Decimal

import pytest

from app.modules.payments.facades.checkout import (
    PreferenceCreated,
    PreferenceFailed,
    build_preference_payload,
    cents_to_amount,
    create_payment_preference,
)


class TestCentsToAmount:
    @pytest.mark.parametrize(
        "cents, expected",
        [
            (1_500_000, Decimal("15000.00")),
            (1, Decimal("0.01")),
            (0, Decimal("0.00")),
            (350_050, Decimal("3500.50")),
        ],
    )
    def test_exact_conversion(self, cents, expected):
        assert cents_to_amount(cents) == expected


class TestBuildPreferencePayload:
    async def test_payload_fields(self, make_order, mp_settings):
        order = await make_order(order_number="ORD-2025-0001", shipping_cost=350_000)

        payload = build_preference_payload(order, mp_settings)

        item = payload["items"][0]
        assert item["unit_price"] == Decimal("15000.00")
        assert item["quantity"] == 1
        assert item["currency_id"] == "ARS"
        assert item["picture_url"] == "https://cdn.tienda.test/mate.jpg"
        assert payload["shipments"]["cost"] == Decimal("3500.00")
        assert payload["external_reference"] == str(order.id)
        assert payload["notification_url"] == "https://tienda.test/api/webhooks/mercadopago"
        assert payload["back_urls"]["success"] == (
            f"https://tienda.test/order-confirmation?orderId={order.id}"
        )
        assert payload["back_urls"]["failure"] == "https://tienda.test/checkout?error=payment_failed"
        assert payload["auto_return"] == "approved"
        assert payload["payer"]["email"] == "comprador@gmail.com"
        assert payload["payment_methods"]["installments"] == 12

    async def test_registered_user_without_email_uses_fallback(self, make_order, mp_settings):
        order = await make_order(user_id="user-1", guest_email=None)

        payload = build_preference_payload(order, mp_settings)

        assert payload["payer"]["email"] == mp_settings.mercadopago_fallback_payer_email


class TestCreatePaymentPreference:
    async def test_created(self, make_order, mp_client, mp_api, mp_settings):
        order = await make_order()

        result = await create_payment_preference(mp_client, order, mp_settings)

        assert isinstance(result, PreferenceCreated)
        assert result.preference_id == "123456789-abcd-pref"
        assert result.init_point.startswith("https://www.mercadopago.com.ar/")
        sent = mp_api.preference_requests[0]
        assert json.loads(sent.content)["items"][0]["unit_price"] == 15000.0
        assert sent.headers["X-Idempotency-Key"] == f"preference-{order.id}"

    async def test_provider_rejection_is_a_result(self, make_order, mp_client, mp_api, mp_settings):
        order = await make_order()
        mp_api.preference_status = 400

        result = await create_payment_preference(mp_client, order, mp_settings)

        assert isinstance(result, PreferenceFailed)
        assert result.reason == "provider_error"
        assert result.status_code == 400

    async def test_timeout_is_a_result(self, make_order, mp_client, mp_api, mp_settings):
        order = await make_order()
        mp_api.raise_timeout = True

        result = await create_payment_preference(mp_client, order, mp_settings)

        assert isinstance(result, PreferenceFailed)
        assert result.reason == "timeout"
