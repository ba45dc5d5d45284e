# -*- coding: utf-8 -*-
"""
Tests de /health, /metrics y del middleware de errores JSON.

Autor: Equipo Tienda
Fecha: 2026-03-15
"""

from prometheus_client import REGISTRY


class TestHealth:
    async def test_health_reports_database(self, async_client):
        resp = await async_client.get("/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["service"]["name"] == "tienda-backend"
        assert body["environment"] == "test"
        assert "reachable" in body["database"]


class TestMetrics:
    async def test_metrics_exposes_business_counters(self, async_client, make_order, mp_api):
        order = await make_order()
        before = REGISTRY.get_sample_value(
            "payments_preference_created_total", {"provider": "mercadopago"}
        ) or 0.0

        await async_client.post("/api/checkout/mercadopago", json={"orderId": str(order.id)})
        resp = await async_client.get("/metrics")

        assert resp.status_code == 200
        assert "http_requests_total" in resp.text
        assert "orders_created_total" in resp.text
        after = REGISTRY.get_sample_value(
            "payments_preference_created_total", {"provider": "mercadopago"}
        )
        assert after == before + 1

    async def test_http_metrics_use_route_template(self, async_client, make_order):
        order = await make_order()

        await async_client.get(f"/api/orders/{order.id}")

        value = REGISTRY.get_sample_value(
            "http_requests_total",
            {"method": "GET", "path": "/api/orders/{order_id}", "status": "200"},
        )
        assert value is not None and value >= 1


class TestUnhandledErrors:
    async def test_unexpected_error_returns_json_500(self, app, async_client, monkeypatch):
        from app.modules.orders.services import OrderService

        async def boom(self, session, order_id):
            raise RuntimeError("boom")

        monkeypatch.setattr(OrderService, "get_order", boom)

        resp = await async_client.get("/api/orders/whatever", headers={"x-request-id": "req-42"})

        assert resp.status_code == 500
        detail = resp.json()["detail"]
        assert detail["error_code"] == "INTERNAL_SERVER_ERROR"
        assert detail["request_id"] == "req-42"
