# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/exporters/prometheus_exporter.py

Métricas Prometheus del módulo de pagos (checkout y webhooks).
Se registran en el registry global que expone /metrics.

Autor: Equipo Tienda
Fecha: 2026-03-09
"""

from prometheus_client import Counter, Histogram


# --------------------------------------------------------------------------
# Checkout
# --------------------------------------------------------------------------
PREFERENCES_CREATED_TOTAL = Counter(
    "payments_preference_created_total",
    "Preferencias de pago creadas",
    ["provider"],
)
PREFERENCES_FAILED_TOTAL = Counter(
    "payments_preference_failed_total",
    "Fallos al crear preferencias de pago",
    ["provider", "reason"],
)

# --------------------------------------------------------------------------
# Webhooks: verificación separada del outcome de negocio
# --------------------------------------------------------------------------
WEBHOOKS_RECEIVED_TOTAL = Counter(
    "payments_webhook_received_total",
    "Total webhooks recibidos por proveedor",
    ["provider"],
)
WEBHOOKS_REJECTED_TOTAL = Counter(
    "payments_webhook_rejected_total",
    "Total webhooks rechazados por proveedor y razón",
    ["provider", "reason"],
)
WEBHOOKS_OUTCOME_TOTAL = Counter(
    "payments_webhook_outcome_total",
    "Total webhooks por outcome (applied/unchanged/stale_transition/unknown_status/ignored)",
    ["provider", "outcome"],
)
WEBHOOKS_PROCESSING_SECONDS = Histogram(
    "payments_webhook_processing_seconds",
    "Tiempo de procesamiento de webhooks (segundos)",
    ["provider"],
)


def observe_preference_created(provider: str) -> None:
    PREFERENCES_CREATED_TOTAL.labels(provider=provider).inc()


def observe_preference_failed(provider: str, reason: str) -> None:
    PREFERENCES_FAILED_TOTAL.labels(provider=provider, reason=reason).inc()


def observe_webhook_received(provider: str) -> None:
    WEBHOOKS_RECEIVED_TOTAL.labels(provider=provider).inc()


def observe_webhook_rejected(provider: str, reason: str) -> None:
    WEBHOOKS_REJECTED_TOTAL.labels(provider=provider, reason=reason).inc()


def observe_webhook_outcome(provider: str, outcome: str, duration: float) -> None:
    WEBHOOKS_OUTCOME_TOTAL.labels(provider=provider, outcome=outcome).inc()
    WEBHOOKS_PROCESSING_SECONDS.labels(provider=provider).observe(duration)


__all__ = [
    "PREFERENCES_CREATED_TOTAL",
    "PREFERENCES_FAILED_TOTAL",
    "WEBHOOKS_RECEIVED_TOTAL",
    "WEBHOOKS_REJECTED_TOTAL",
    "WEBHOOKS_OUTCOME_TOTAL",
    "WEBHOOKS_PROCESSING_SECONDS",
    "observe_preference_created",
    "observe_preference_failed",
    "observe_webhook_received",
    "observe_webhook_rejected",
    "observe_webhook_outcome",
]

# Fin del archivo backend/app/modules/payments/metrics/exporters/prometheus_exporter.py
