# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Configuración centralizada de logging para el backend de la tienda.
Soporta formato plain (desarrollo) y json (producción).

Autor: Equipo Tienda
Fecha: 2026-03-02
"""

import importlib
import logging.config
from typing import Literal


def _json_formatter_path() -> str:
    """Ruta del JsonFormatter (python-json-logger v3 movió jsonlogger -> json)."""
    try:
        importlib.import_module("pythonjsonlogger.json")
        return "pythonjsonlogger.json.JsonFormatter"
    except ImportError:  # pragma: no cover
        return "pythonjsonlogger.jsonlogger.JsonFormatter"


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el logging raíz de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Formato de salida; "pretty" equivale a "plain"

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    use_json = fmt == "json"

    formatters = {
        "default": {
            "format": "%(asctime)s %(levelname)s [%(name)s]: %(message)s",
        },
        "json": {
            "()": _json_formatter_path(),
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if use_json else "default",
            "stream": "ext://sys.stdout",
        }
    }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": handlers,
            "root": {
                "handlers": ["console"],
                "level": level.upper(),
            },
            "loggers": {
                # El access log de uvicorn ya lo cubre el middleware de requests
                "uvicorn.access": {"level": "WARNING"},
            },
        }
    )


__all__ = ["setup_logging"]
# Fin del archivo backend/app/shared/config/logging_config.py
