# reserva_trip/modules/dashboard/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import Float, cast, extract, func
from typing import Any, Dict, List, Optional
from datetime import date

from reserva_trip.shared.database.models import Venta
from reserva_trip.shared.database.errors import store_operation


class DashboardRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_stats(
        self,
        fecha_inicio: Optional[date] = None,
        fecha_fin: Optional[date] = None
    ) -> Dict[str, Any]:
        """
        Totales de ventas activas.

        El rango solo se aplica si llegan ambas fechas (inclusivo sobre
        fecha_venta). Sin ventas, todos los valores son 0.
        """
        query = self.db.query(
            func.count(Venta.id).label('numero_ventas'),
            func.coalesce(func.sum(Venta.total_venta), 0).label('total_ventas'),
            cast(func.coalesce(func.avg(Venta.total_venta), 0), Float).label('promedio_ventas'),
            func.coalesce(func.sum(Venta.comision), 0).label('total_comisiones')
        ).filter(Venta.activo == True)

        if fecha_inicio and fecha_fin:
            query = query.filter(Venta.fecha_venta.between(fecha_inicio, fecha_fin))

        with store_operation(self.db):
            summary = query.one()

        return {
            "numeroVentas": summary.numero_ventas or 0,
            "totalVentas": float(summary.total_ventas or 0),
            "promedioVentas": float(summary.promedio_ventas or 0),
            "totalComisiones": float(summary.total_comisiones or 0)
        }

    def get_top_users(self, limit: int = 5) -> List[Dict[str, Any]]:
        total_ventas = func.sum(Venta.total_venta).label('total_ventas')

        with store_operation(self.db):
            rows = self.db.query(
                Venta.usuario_nombre.label('nombre'),
                func.count(Venta.id).label('numero_ventas'),
                total_ventas,
                func.sum(Venta.comision).label('total_comisiones')
            ).filter(
                Venta.activo == True
            ).group_by(
                Venta.usuario_nombre
            ).order_by(
                total_ventas.desc(), Venta.usuario_nombre.asc()
            ).limit(limit).all()

        return [
            {
                "nombre": row.nombre,
                "numeroVentas": row.numero_ventas,
                "totalVentas": float(row.total_ventas or 0),
                "totalComisiones": float(row.total_comisiones or 0)
            }
            for row in rows
        ]

    def get_monthly_stats(self) -> List[Dict[str, Any]]:
        """Agregados por mes de fecha_venta, en orden cronológico"""
        year = extract('year', Venta.fecha_venta).label('anio')
        month = extract('month', Venta.fecha_venta).label('mes')

        with store_operation(self.db):
            rows = self.db.query(
                year,
                month,
                func.count(Venta.id).label('numero_ventas'),
                func.sum(Venta.total_venta).label('total_ventas'),
                func.sum(Venta.comision).label('total_comisiones')
            ).filter(
                Venta.activo == True
            ).group_by(year, month).order_by(year.asc(), month.asc()).all()

        return [
            {
                "mes": f"{int(row.anio):04d}-{int(row.mes):02d}",
                "numeroVentas": row.numero_ventas,
                "totalVentas": float(row.total_ventas or 0),
                "totalComisiones": float(row.total_comisiones or 0)
            }
            for row in rows
        ]
