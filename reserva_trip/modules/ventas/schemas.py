# reserva_trip/modules/ventas/schemas.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from decimal import Decimal, ROUND_HALF_UP
from datetime import date


class VentaRequest(BaseModel):
    """Payload de alta y edición de ventas.

    Acepta los nombres del frontend (camelCase) y sus equivalentes en inglés.
    Los campos son opcionales a nivel de esquema: la obligatoriedad la valida
    el servicio para responder con el mensaje de negocio.
    """
    model_config = ConfigDict(populate_by_name=True)

    fecha_venta: Optional[date] = Field(
        None, validation_alias=AliasChoices("fechaVenta", "sale_date", "fecha_venta")
    )
    codigo_reserva: Optional[str] = Field(
        None, validation_alias=AliasChoices("codigoReserva", "reservation_code", "codigo_reserva")
    )
    cliente: Optional[str] = Field(
        None, validation_alias=AliasChoices("cliente", "customer_name", "cliente_nombre")
    )
    total_venta: Optional[Decimal] = Field(
        None, validation_alias=AliasChoices("totalVenta", "total_amount", "total_venta")
    )
    usuario_registra: Optional[str] = Field(
        None, validation_alias=AliasChoices("usuarioRegistra", "registering_user_name", "usuario_nombre")
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("total_venta")
    @classmethod
    def round_to_cents(cls, v):
        # Misma escala que la columna Numeric(12, 2)
        if v is None:
            return v
        return v.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    def missing_fields(self) -> list:
        return [name for name, value in self.model_dump().items() if value is None]
