# reserva_trip/config/database.py
from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .settings import Settings
from reserva_trip.shared.database.models import Base


class Database:
    """Engine y fábrica de sesiones de la aplicación.

    Se construye en ``create_app`` y se libera en el shutdown del lifespan;
    los handlers lo reciben a través de ``get_db``.
    """

    def __init__(self, url: str, **engine_kwargs: Any):
        self.url = url
        self.engine: Engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.sqlalchemy_url
        engine_kwargs: Dict[str, Any] = {"echo": settings.debug}

        # SQLite en memoria (tests): una sola conexión compartida entre hilos
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=0,
                pool_pre_ping=True,
                pool_recycle=settings.db_pool_recycle,
            )

        return cls(url, **engine_kwargs)

    def session(self) -> Session:
        return self.session_factory()

    def ping(self) -> None:
        """Ida y vuelta mínima contra la base de datos"""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


# Database dependency
def get_db(request: Request) -> Iterator[Session]:
    """Sesión por request, siempre cerrada al terminar"""
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
