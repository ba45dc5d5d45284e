# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/metrics/exporters/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-09
"""
