# reserva_trip/modules/dashboard/service.py
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
from datetime import date

from .repository import DashboardRepository

DEFAULT_TOP_USERS_LIMIT = 5


class DashboardService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = DashboardRepository(db)

    async def get_stats(
        self,
        fecha_inicio: Optional[date] = None,
        fecha_fin: Optional[date] = None
    ) -> Dict[str, Any]:
        return self.repository.get_stats(fecha_inicio, fecha_fin)

    async def get_top_users(self, limit: int = DEFAULT_TOP_USERS_LIMIT) -> List[Dict[str, Any]]:
        return self.repository.get_top_users(limit)

    async def get_monthly_stats(self) -> List[Dict[str, Any]]:
        return self.repository.get_monthly_stats()
