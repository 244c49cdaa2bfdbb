from sqlalchemy.orm import Session
from typing import List

from reserva_trip.shared.database.models import Usuario, Cliente
from reserva_trip.shared.database.errors import store_operation


class DirectoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_active_usuarios(self) -> List[Usuario]:
        with store_operation(self.db):
            return self.db.query(Usuario).filter(
                Usuario.activo == True
            ).order_by(Usuario.nombre.asc()).all()

    def list_clientes(self) -> List[Cliente]:
        with store_operation(self.db):
            return self.db.query(Cliente).order_by(Cliente.nombre.asc()).all()
