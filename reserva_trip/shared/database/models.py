# reserva_trip/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Date,
    Numeric, CheckConstraint, func, true
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


# =====================================================
# VENTAS
# =====================================================

class Venta(Base):
    """Venta registrada por un usuario de la agencia"""
    __tablename__ = "ventas"

    id = Column(Integer, primary_key=True, index=True)
    fecha_venta = Column(Date, nullable=False, index=True)
    fecha_registro = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    codigo_reserva = Column(String(50), nullable=False, unique=True)
    cliente_nombre = Column(String(255), nullable=False)
    total_venta = Column(Numeric(12, 2), nullable=False)
    # Siempre 30% de total_venta, recalculada en cada alta o edición
    comision = Column(Numeric(12, 2), nullable=False)
    usuario_nombre = Column(String(255), nullable=False, index=True)
    activo = Column(Boolean, nullable=False, default=True, server_default=true())

    __table_args__ = (
        CheckConstraint("total_venta > 0", name="ck_ventas_total_positivo"),
    )


# =====================================================
# CATÁLOGOS DE SOLO LECTURA
# =====================================================

class Usuario(Base):
    """Usuario de la agencia que registra ventas"""
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)
    email = Column(String(255), unique=True)
    telefono = Column(String(50))
    activo = Column(Boolean, nullable=False, default=True, server_default=true())
    fecha_creacion = Column(DateTime, server_default=func.current_timestamp())


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)
    email = Column(String(255))
    telefono = Column(String(50))
    documento = Column(String(50))
    fecha_creacion = Column(DateTime, server_default=func.current_timestamp())
