# reserva_trip/api/router.py
from fastapi import APIRouter
from reserva_trip.api.health import router as health_router
from reserva_trip.modules.ventas import router as ventas_router
from reserva_trip.modules.dashboard import router as dashboard_router
from reserva_trip.modules.directory import router as directory_router


# Router principal, montado bajo /api
api_router = APIRouter()

api_router.include_router(
    ventas_router,
    prefix="/ventas",
    tags=["Ventas"]
)

api_router.include_router(
    dashboard_router,
    prefix="/dashboard",
    tags=["Dashboard"]
)

api_router.include_router(
    directory_router,
    tags=["Directorio"]
)

api_router.include_router(health_router, tags=["Health"])
