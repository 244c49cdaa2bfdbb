from sqlalchemy.orm import Session
from typing import Any, Dict, List

from .repository import DirectoryRepository


class DirectoryService:
    """Catálogos de solo lectura: usuarios y clientes"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = DirectoryRepository(db)

    async def list_usuarios(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": usuario.id,
                "nombre": usuario.nombre,
                "email": usuario.email,
                "telefono": usuario.telefono,
                "activo": usuario.activo,
                "fecha_creacion": usuario.fecha_creacion
            }
            for usuario in self.repository.list_active_usuarios()
        ]

    async def list_clientes(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": cliente.id,
                "nombre": cliente.nombre,
                "email": cliente.email,
                "telefono": cliente.telefono,
                "documento": cliente.documento,
                "fecha_creacion": cliente.fecha_creacion
            }
            for cliente in self.repository.list_clientes()
        ]
