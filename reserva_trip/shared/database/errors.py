# reserva_trip/shared/database/errors.py
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

# SQLSTATE (PostgreSQL) y errno (MySQL) de las violaciones que se distinguen
UNIQUE_VIOLATION_CODES = {"23505", 1062}
FOREIGN_KEY_VIOLATION_CODES = {"23503", 1452}


class StoreErrorKind(str, Enum):
    DUPLICATE = "duplicate"
    INVALID_REFERENCE = "invalid_reference"
    UNAVAILABLE = "unavailable"


class StoreError(Exception):
    """Fallo de la capa de datos, ya clasificado"""

    def __init__(self, kind: StoreErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail

    @classmethod
    def from_exception(cls, exc: SQLAlchemyError) -> "StoreError":
        detail = str(getattr(exc, "orig", None) or exc)

        if isinstance(exc, IntegrityError):
            code = _driver_error_code(exc.orig)
            message = detail.upper()
            if code in UNIQUE_VIOLATION_CODES or "UNIQUE CONSTRAINT" in message or "DUPLICATE" in message:
                return cls(StoreErrorKind.DUPLICATE, detail)
            if code in FOREIGN_KEY_VIOLATION_CODES or "FOREIGN KEY" in message:
                return cls(StoreErrorKind.INVALID_REFERENCE, detail)

        return cls(StoreErrorKind.UNAVAILABLE, detail)


def _driver_error_code(orig: Optional[BaseException]):
    """Código nativo del driver: sqlstate (psycopg) o errno (MySQL)"""
    if orig is None:
        return None
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return code
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int):
        return args[0]
    return None


@contextmanager
def store_operation(db: Session) -> Iterator[Session]:
    """Ejecuta una operación de datos traduciendo errores de SQLAlchemy.

    Hace rollback de la sesión y relanza como ``StoreError``.
    """
    try:
        yield db
    except SQLAlchemyError as e:
        db.rollback()
        error = StoreError.from_exception(e)
        logger.error(f"Error de base de datos ({error.kind.value}): {error.detail}")
        raise error from e
