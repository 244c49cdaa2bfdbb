# reserva_trip/shared/schemas/common.py
from pydantic import BaseModel
from typing import Any, Dict, Optional
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class Envelope(BaseModel):
    """Respuesta uniforme de todos los endpoints"""
    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "Envelope":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, error: Optional[str] = None, data: Any = None) -> "Envelope":
        return cls(success=False, message=message, error=error, data=data)

    def to_payload(self) -> Dict[str, Any]:
        # Solo se omiten las claves de primer nivel vacías; data se serializa tal cual
        payload: Dict[str, Any] = {"success": self.success}
        for field in ("message", "data", "error"):
            value = getattr(self, field)
            if value is not None:
                payload[field] = value
        return jsonable_encoder(payload)

    def to_response(self, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=self.to_payload())
