from sqlalchemy.orm import Session
from sqlalchemy import and_
from typing import Any, Dict, List, Optional
from decimal import Decimal
import logging

from reserva_trip.shared.database.models import Venta
from reserva_trip.shared.database.errors import store_operation

logger = logging.getLogger(__name__)


class VentasRepository:
    def __init__(self, db: Session):
        self.db = db

    def _active(self):
        return self.db.query(Venta).filter(Venta.activo == True)

    def list_active(self) -> List[Venta]:
        """Ventas activas, la más reciente primero"""
        with store_operation(self.db):
            return self._active().order_by(
                Venta.fecha_registro.desc(), Venta.id.desc()
            ).all()

    def get_active(self, venta_id: int) -> Optional[Venta]:
        with store_operation(self.db):
            return self._active().filter(Venta.id == venta_id).first()

    def exists_active(self, venta_id: int) -> bool:
        with store_operation(self.db):
            return self.db.query(Venta.id).filter(
                and_(Venta.id == venta_id, Venta.activo == True)
            ).first() is not None

    def create(self, venta_data: Dict[str, Any], comision: Decimal) -> Venta:
        """Insertar venta y releerla con id y fecha_registro generados"""
        with store_operation(self.db):
            venta = Venta(
                fecha_venta=venta_data['fecha_venta'],
                codigo_reserva=venta_data['codigo_reserva'],
                cliente_nombre=venta_data['cliente'],
                total_venta=venta_data['total_venta'],
                comision=comision,
                usuario_nombre=venta_data['usuario_registra'],
            )
            self.db.add(venta)
            self.db.commit()
            self.db.refresh(venta)

        logger.info(f"Venta creada con ID: {venta.id}")
        return venta

    def update(self, venta_id: int, venta_data: Dict[str, Any], comision: Decimal) -> Venta:
        with store_operation(self.db):
            self.db.query(Venta).filter(Venta.id == venta_id).update(
                {
                    Venta.fecha_venta: venta_data['fecha_venta'],
                    Venta.codigo_reserva: venta_data['codigo_reserva'],
                    Venta.cliente_nombre: venta_data['cliente'],
                    Venta.total_venta: venta_data['total_venta'],
                    Venta.comision: comision,
                    Venta.usuario_nombre: venta_data['usuario_registra'],
                },
                synchronize_session=False
            )
            self.db.commit()
            venta = self.db.query(Venta).filter(Venta.id == venta_id).first()

        logger.info(f"Venta {venta_id} actualizada")
        return venta

    def soft_delete(self, venta_id: int) -> None:
        with store_operation(self.db):
            self.db.query(Venta).filter(Venta.id == venta_id).update(
                {Venta.activo: False}, synchronize_session=False
            )
            self.db.commit()

        logger.info(f"Venta {venta_id} marcada como inactiva")
