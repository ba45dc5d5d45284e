# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/__init__.py

Autor: Equipo Tienda
Fecha: 2026-03-10
"""
