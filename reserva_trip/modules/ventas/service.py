# reserva_trip/modules/ventas/service.py
from sqlalchemy.orm import Session
from typing import Any, Dict, List
from decimal import Decimal, ROUND_HALF_UP
import logging

from .repository import VentasRepository
from .schemas import VentaRequest
from reserva_trip.core.errors import NotFoundError, ValidationError
from reserva_trip.shared.database.models import Venta

logger = logging.getLogger(__name__)

COMMISSION_RATE = Decimal("0.3")
CENTS = Decimal("0.01")


def calculate_commission(total: Decimal) -> Decimal:
    """Comisión fija del 30%, redondeada a centavos"""
    return (Decimal(str(total)) * COMMISSION_RATE).quantize(CENTS, rounding=ROUND_HALF_UP)


def serialize_venta(venta: Venta) -> Dict[str, Any]:
    return {
        "id": venta.id,
        "fecha_venta": venta.fecha_venta,
        "fecha_registro": venta.fecha_registro,
        "codigo_reserva": venta.codigo_reserva,
        "cliente": venta.cliente_nombre,
        "total_venta": float(venta.total_venta),
        "comision": float(venta.comision),
        "usuarioRegistra": venta.usuario_nombre,
    }


class VentasService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = VentasRepository(db)

    async def list_ventas(self) -> List[Dict[str, Any]]:
        return [serialize_venta(v) for v in self.repository.list_active()]

    async def get_venta(self, venta_id: int) -> Dict[str, Any]:
        venta = self.repository.get_active(venta_id)
        if not venta:
            raise NotFoundError("Venta no encontrada")
        return serialize_venta(venta)

    async def create_venta(self, venta_data: VentaRequest) -> Dict[str, Any]:
        """
        Registrar una venta nueva.

        La comisión se calcula aquí y nunca se toma del cliente. Los datos
        se validan antes de tocar la base de datos.
        """
        self._validate(venta_data)
        comision = calculate_commission(venta_data.total_venta)

        venta = self.repository.create(venta_data.model_dump(), comision)
        return serialize_venta(venta)

    async def update_venta(self, venta_id: int, venta_data: VentaRequest) -> Dict[str, Any]:
        """Reemplazar todos los campos editables y recalcular la comisión"""
        self._validate(venta_data)

        if not self.repository.exists_active(venta_id):
            raise NotFoundError("Venta no encontrada")

        comision = calculate_commission(venta_data.total_venta)
        venta = self.repository.update(venta_id, venta_data.model_dump(), comision)
        return serialize_venta(venta)

    async def delete_venta(self, venta_id: int) -> None:
        if not self.repository.exists_active(venta_id):
            raise NotFoundError("Venta no encontrada")
        self.repository.soft_delete(venta_id)

    # MÉTODOS PRIVADOS HELPERS

    def _validate(self, venta_data: VentaRequest) -> None:
        missing = venta_data.missing_fields()
        if missing:
            logger.warning(f"Venta rechazada, campos faltantes: {missing}")
            raise ValidationError("Todos los campos son obligatorios")

        if venta_data.total_venta <= 0:
            raise ValidationError("El total de venta debe ser mayor a 0")
