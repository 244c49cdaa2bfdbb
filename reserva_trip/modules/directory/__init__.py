# reserva_trip/modules/directory/__init__.py
"""
Módulo de Directorio - Usuarios y clientes

Listados de solo lectura que alimentan los selectores del frontend.
"""

from .router import router
from .service import DirectoryService
from .repository import DirectoryRepository

__all__ = [
    "router",
    "DirectoryService",
    "DirectoryRepository"
]
