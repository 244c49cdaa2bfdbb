# reserva_trip/client/api_client.py
import httpx
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

from reserva_trip.config.settings import settings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Error en la petición"


class ApiClientError(Exception):
    """Error devuelto por la API (status no exitoso o success: false)"""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}


class ApiClient:
    """Cliente asíncrono para la API de ventas.

    Cada método hace un único intento: los errores se registran en el log
    y se relanzan al llamador.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self.transport = transport

    def _get_headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _request(
        self,
        method: str,
        path: str,
        action: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport
            ) as client:
                response = await client.request(
                    method,
                    path,
                    params=params,
                    json=payload,
                    headers=self._get_headers()
                )
            return self._handle_response(response)
        except (ApiClientError, httpx.HTTPError) as e:
            logger.error(f"Error al {action}: {e}")
            raise

    @staticmethod
    def _handle_response(response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.is_success or not data.get("success", False):
            raise ApiClientError(
                data.get("message") or DEFAULT_ERROR_MESSAGE,
                status_code=response.status_code,
                payload=data
            )
        return data

    # ==================== VENTAS ====================

    async def get_ventas(self) -> List[Dict[str, Any]]:
        result = await self._request("GET", "/ventas", "obtener ventas")
        return result.get("data")

    async def get_venta(self, venta_id: int) -> Dict[str, Any]:
        result = await self._request("GET", f"/ventas/{venta_id}", "obtener venta")
        return result.get("data")

    async def create_venta(self, venta_data: Dict[str, Any]) -> Dict[str, Any]:
        result = await self._request("POST", "/ventas", "crear venta", payload=venta_data)
        return result.get("data")

    async def update_venta(self, venta_id: int, venta_data: Dict[str, Any]) -> Dict[str, Any]:
        result = await self._request("PUT", f"/ventas/{venta_id}", "actualizar venta", payload=venta_data)
        return result.get("data")

    async def delete_venta(self, venta_id: int) -> Dict[str, Any]:
        """Devuelve el envelope completo (la baja no trae data)"""
        return await self._request("DELETE", f"/ventas/{venta_id}", "eliminar venta")

    # ==================== DASHBOARD ====================

    async def get_dashboard_stats(
        self,
        fecha_inicio: Optional[Union[date, str]] = None,
        fecha_fin: Optional[Union[date, str]] = None
    ) -> Dict[str, Any]:
        params = None
        if fecha_inicio and fecha_fin:
            params = {"fechaInicio": str(fecha_inicio), "fechaFin": str(fecha_fin)}
        result = await self._request("GET", "/dashboard/stats", "obtener estadísticas", params=params)
        return result.get("data")

    async def get_top_users(self, limit: int = 5) -> List[Dict[str, Any]]:
        result = await self._request(
            "GET", "/dashboard/top-users", "obtener top usuarios", params={"limit": limit}
        )
        return result.get("data")

    async def get_monthly_stats(self) -> List[Dict[str, Any]]:
        result = await self._request("GET", "/dashboard/monthly-stats", "obtener estadísticas mensuales")
        return result.get("data")

    # ==================== CATÁLOGOS ====================

    async def get_usuarios(self) -> List[Dict[str, Any]]:
        result = await self._request("GET", "/usuarios", "obtener usuarios")
        return result.get("data")

    async def get_clientes(self) -> List[Dict[str, Any]]:
        result = await self._request("GET", "/clientes", "obtener clientes")
        return result.get("data")

    async def check_health(self) -> Dict[str, Any]:
        return await self._request("GET", "/health", "verificar salud de la API")
