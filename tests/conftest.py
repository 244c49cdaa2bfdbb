"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from reserva_trip.config.settings import Settings
from reserva_trip.main import create_app


VENTA_PAYLOAD = {
    "fechaVenta": "2024-01-01",
    "codigoReserva": "R1",
    "cliente": "Ana",
    "totalVenta": 100,
    "usuarioRegistra": "bob",
}


@pytest.fixture
def settings():
    """Settings apuntando a una base SQLite en memoria."""
    return Settings(database_url="sqlite://", environment="production", _env_file=None)


@pytest.fixture
def app(settings):
    """Aplicación con tablas creadas sobre su propio engine."""
    application = create_app(settings)
    application.state.database.create_tables()
    yield application
    application.dependency_overrides.clear()
    application.state.database.dispose()


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def db_session(app):
    session = app.state.database.session()
    yield session
    session.close()


@pytest.fixture
def venta_payload():
    return dict(VENTA_PAYLOAD)


@pytest.fixture
def create_venta(client):
    """Crear una venta vía API y devolver la fila creada."""
    def _create(**overrides):
        payload = dict(VENTA_PAYLOAD)
        payload.update(overrides)
        response = client.post("/api/ventas", json=payload)
        assert response.status_code == 201, response.json()
        return response.json()["data"]
    return _create
