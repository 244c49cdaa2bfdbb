# reserva_trip/modules/ventas/__init__.py
"""
Módulo de Ventas - Registro de ventas de la agencia

Este módulo maneja el ciclo de vida de las ventas:
- Alta con cálculo automático de comisión (30%)
- Consulta individual y listado de ventas activas
- Edición completa con recálculo de comisión
- Baja lógica (activo = FALSE)

Arquitectura:
- router.py: Endpoints de ventas
- service.py: Lógica de negocio de ventas
- repository.py: Acceso a datos de ventas
- schemas.py: Modelos de request
"""

from .router import router
from .service import VentasService
from .repository import VentasRepository

__all__ = [
    "router",
    "VentasService",
    "VentasRepository"
]
