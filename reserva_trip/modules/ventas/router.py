# reserva_trip/modules/ventas/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from reserva_trip.config.database import get_db
from reserva_trip.shared.schemas.common import Envelope
from .service import VentasService
from .schemas import VentaRequest

router = APIRouter()

# Rango de la columna INTEGER
MAX_VENTA_ID = 2_147_483_647


@router.get("")
async def list_ventas(db: Session = Depends(get_db)):
    """Ventas activas ordenadas por fecha de registro descendente"""
    service = VentasService(db)
    return Envelope.ok(await service.list_ventas()).to_response()


@router.get("/{venta_id}")
async def get_venta(
    venta_id: int = Path(..., ge=1, le=MAX_VENTA_ID),
    db: Session = Depends(get_db)
):
    service = VentasService(db)
    return Envelope.ok(await service.get_venta(venta_id)).to_response()


@router.post("")
async def create_venta(venta: VentaRequest, db: Session = Depends(get_db)):
    """
    Registrar venta

    **Campos obligatorios:** fechaVenta, codigoReserva, cliente,
    totalVenta (> 0), usuarioRegistra. La comisión (30%) se calcula
    en el servidor.
    """
    service = VentasService(db)
    data = await service.create_venta(venta)
    return Envelope.ok(data, "Venta creada exitosamente").to_response(status.HTTP_201_CREATED)


@router.put("/{venta_id}")
async def update_venta(
    venta: VentaRequest,
    venta_id: int = Path(..., ge=1, le=MAX_VENTA_ID),
    db: Session = Depends(get_db)
):
    service = VentasService(db)
    data = await service.update_venta(venta_id, venta)
    return Envelope.ok(data, "Venta actualizada exitosamente").to_response()


@router.delete("/{venta_id}")
async def delete_venta(
    venta_id: int = Path(..., ge=1, le=MAX_VENTA_ID),
    db: Session = Depends(get_db)
):
    """Baja lógica: la venta queda inactiva pero no se borra"""
    service = VentasService(db)
    await service.delete_venta(venta_id)
    return Envelope.ok(message="Venta eliminada exitosamente").to_response()
