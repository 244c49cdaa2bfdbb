from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import time
import logging

from reserva_trip.config.settings import Settings
from .errors import unhandled_error_response

logger = logging.getLogger(__name__)


def setup_middleware(app: FastAPI, settings: Settings):
    """Configure all middleware for the application"""

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as exc:
            response = unhandled_error_response(request, exc)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response
