# reserva_trip/modules/directory/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from reserva_trip.config.database import get_db
from reserva_trip.shared.schemas.common import Envelope
from .service import DirectoryService

router = APIRouter()


@router.get("/usuarios")
async def list_usuarios(db: Session = Depends(get_db)):
    """Usuarios activos ordenados por nombre"""
    service = DirectoryService(db)
    return Envelope.ok(await service.list_usuarios()).to_response()


@router.get("/clientes")
async def list_clientes(db: Session = Depends(get_db)):
    """Todos los clientes ordenados por nombre"""
    service = DirectoryService(db)
    return Envelope.ok(await service.list_clientes()).to_response()
