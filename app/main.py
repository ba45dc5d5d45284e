# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de la tienda.

Ajustes clave:
- Carga de .env antes de leer configuración
- Logging centralizado (plain/json) vía app.shared.config.setup_logging
- Cliente de Mercado Pago creado en el lifespan y guardado en app.state;
  sin access token el arranque falla
- Montaje de observabilidad Prometheus (/metrics) vía app.observability.prom
- Rutas de negocio bajo /api; /health sin prefijo

Autor: Equipo Tienda
Fecha: 2026-03-14
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que use os.getenv
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().lower()
load_dotenv(dotenv_path=_ENV_PATH, override=False)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.shared.config import get_payments_settings, get_settings, setup_logging
from app.shared.middleware import JSONExceptionMiddleware, RequestLoggingMiddleware
from app.observability.prom import setup_observability
from app.modules.payments.providers import MercadoPagoClient

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

logger.info("[dotenv] Loaded %s (PYTHON_ENV=%s)", _ENV_PATH, _PYTHON_ENV)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    # MissingAccessTokenError se propaga: sin token no hay checkout ni webhooks
    client = MercadoPagoClient.from_settings(get_payments_settings())
    app.state.mercadopago_client = client
    logger.info("🟢 Backend de %s iniciado (env=%s).", settings.app_name, settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        await client.aclose()
        app.state.mercadopago_client = None
        logger.info("🔴 Backend de %s apagado.", settings.app_name)


openapi_tags = [
    {"name": "orders", "description": "Alta y consulta de órdenes"},
    {"name": "payments:checkout", "description": "Preferencias de checkout de Mercado Pago"},
    {"name": "payments:webhooks", "description": "Notificaciones de pago de Mercado Pago"},
    {"name": "Health", "description": "Estado del servicio"},
]

app = FastAPI(
    title=f"{settings.app_name} API",
    description="API de órdenes y pagos de la tienda",
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
)

# IMPORTANTE: el orden real de ejecución de middlewares en Starlette es inverso al registro.
# Registramos CORS AL FINAL para que se ejecute PRIMERO (outermost).
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(JSONExceptionMiddleware)
setup_observability(app)

_cors_origins = settings.get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    # "*" con allow_credentials=True es inválido en navegadores
    allow_credentials=_cors_origins != ["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=600,
)
logger.info("🌐 CORS habilitado para: %s", _cors_origins)

# Incluye router maestro
from app.routes import router as main_router

app.include_router(main_router)


@app.get("/", include_in_schema=False)
async def root():
    return {"service": settings.app_name, "status": "active"}


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_dev,
    )

# Fin del archivo backend/app/main.py
