# reserva_trip/modules/dashboard/router.py
from typing import Optional
from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from reserva_trip.config.database import get_db
from reserva_trip.shared.schemas.common import Envelope
from .service import DashboardService, DEFAULT_TOP_USERS_LIMIT

router = APIRouter()


@router.get("/stats")
async def get_dashboard_stats(
    fecha_inicio: Optional[date] = Query(None, alias="fechaInicio"),
    fecha_fin: Optional[date] = Query(None, alias="fechaFin"),
    db: Session = Depends(get_db)
):
    """
    Estadísticas generales de ventas

    **Incluye:** número de ventas, total vendido, promedio y total de
    comisiones. El filtro por fechas solo se aplica si llegan ambas.
    """
    service = DashboardService(db)
    return Envelope.ok(await service.get_stats(fecha_inicio, fecha_fin)).to_response()


@router.get("/top-users")
async def get_top_users(
    limit: int = Query(DEFAULT_TOP_USERS_LIMIT, ge=1),
    db: Session = Depends(get_db)
):
    """Usuarios con mayor monto vendido"""
    service = DashboardService(db)
    return Envelope.ok(await service.get_top_users(limit)).to_response()


@router.get("/monthly-stats")
async def get_monthly_stats(db: Session = Depends(get_db)):
    service = DashboardService(db)
    return Envelope.ok(await service.get_monthly_stats()).to_response()
