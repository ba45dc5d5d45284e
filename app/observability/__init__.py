# -*- coding: utf-8 -*-
"""
backend/app/observability/__init__.py

Observabilidad HTTP (Prometheus) del backend.
"""

from .prom import PrometheusMiddleware, mount_metrics, setup_observability

__all__ = ["PrometheusMiddleware", "mount_metrics", "setup_observability"]

# Fin del archivo backend/app/observability/__init__.py
