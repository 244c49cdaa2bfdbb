# reserva_trip/main.py
from typing import Optional
import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager

from reserva_trip.config.settings import Settings, settings
from reserva_trip.config.database import Database
from reserva_trip.core.errors import register_exception_handlers
from reserva_trip.core.logging_config import setup_logging
from reserva_trip.core.middleware import setup_middleware
from reserva_trip.api.router import api_router

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Construir la aplicación con su propio handle de base de datos.

    El engine se crea aquí (sin conectar todavía) y el lifespan lo libera
    al apagar el servidor.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level)
    database = Database.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"{app_settings.app_name} v{app_settings.version} iniciando")
        logger.info(f"Entorno: {app_settings.environment}")
        logger.info(f"API disponible en http://localhost:{app_settings.port}/api")
        if app_settings.auto_create_tables:
            database.create_tables()

        yield

        # Shutdown
        logger.info("Cerrando servidor...")
        database.dispose()

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.version,
        description="API de registro de ventas para agencia de viajes",
        lifespan=lifespan
    )
    app.state.settings = app_settings
    app.state.database = database

    setup_middleware(app, app_settings)
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "reserva_trip.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
