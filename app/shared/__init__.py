# app/shared/__init__.py
"""
Infraestructura compartida del backend: configuración, base de datos y
middlewares HTTP.

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""
# fin del archivo
