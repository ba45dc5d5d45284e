# -*- coding: utf-8 -*-
"""
backend/app/shared/config/config_loader.py

Carga dinámica de configuración según PYTHON_ENV.
Cachea la instancia (singleton).

Autor: Equipo Tienda
Fecha: 2026-03-02
"""

import os
from functools import lru_cache

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_prod import ProdSettings
from .settings_testing import EnvTestingSettings


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración apropiada según PYTHON_ENV
    (development | test | production) y la cachea.
    """
    env = os.getenv("PYTHON_ENV", "development").lower()

    if env == "production":
        return ProdSettings()
    if env == "test":
        return EnvTestingSettings()
    return DevSettings()


__all__ = ["get_settings"]
# Fin del archivo backend/app/shared/config/config_loader.py
