# reserva_trip/api/health.py
from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.exc import SQLAlchemyError

from reserva_trip.config.database import Database, get_database
from reserva_trip.core.errors import DB_ERROR_PLACEHOLDER
from reserva_trip.shared.schemas.common import Envelope

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request, database: Database = Depends(get_database)):
    """Verifica la conexión a la base de datos con un SELECT 1"""
    timestamp = datetime.now(timezone.utc).isoformat()

    try:
        database.ping()
    except SQLAlchemyError as e:
        logger.error(f"Health check fallido: {e}")
        detail = str(e) if request.app.state.settings.is_development else DB_ERROR_PLACEHOLDER
        return Envelope.fail(
            "Error de conexión a la base de datos",
            error=detail,
            data={"database": "Desconectada", "timestamp": timestamp}
        ).to_response(status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Envelope.ok(
        {"database": "Conectada", "timestamp": timestamp},
        "API funcionando correctamente"
    ).to_response()
