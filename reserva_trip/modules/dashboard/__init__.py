# reserva_trip/modules/dashboard/__init__.py
"""
Módulo de Dashboard - Agregados de ventas

- Totales y promedio, con rango de fechas opcional
- Ranking de usuarios por monto vendido
- Estadísticas mensuales
"""

from .router import router
from .service import DashboardService
from .repository import DashboardRepository

__all__ = [
    "router",
    "DashboardService",
    "DashboardRepository"
]
