"""Tests for the async API client."""

import asyncio
import json
import logging

import httpx
import pytest

from reserva_trip.client import ApiClient, ApiClientError


BASE_URL = "http://testserver/api"


@pytest.fixture
def api(app):
    """Client wired to the application through an in-process ASGI transport."""
    return ApiClient(base_url=BASE_URL, transport=httpx.ASGITransport(app=app))


def mock_client(handler):
    return ApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


class TestAgainstApplication:

    def test_venta_lifecycle(self, api, venta_payload):
        async def scenario():
            created = await api.create_venta(venta_payload)
            fetched = await api.get_venta(created["id"])
            listed = await api.get_ventas()

            venta_payload["totalVenta"] = 200
            updated = await api.update_venta(created["id"], venta_payload)

            deleted = await api.delete_venta(created["id"])
            with pytest.raises(ApiClientError) as exc_info:
                await api.get_venta(created["id"])
            return created, fetched, listed, updated, deleted, exc_info.value

        created, fetched, listed, updated, deleted, error = asyncio.run(scenario())

        assert created["comision"] == 30.00
        assert fetched == created
        assert listed == [created]
        assert updated["comision"] == 60.00
        assert deleted == {"success": True, "message": "Venta eliminada exitosamente"}
        assert error.status_code == 404
        assert error.message == "Venta no encontrada"

    def test_validation_error_carries_server_message(self, api, venta_payload):
        venta_payload["totalVenta"] = 0

        with pytest.raises(ApiClientError) as exc_info:
            asyncio.run(api.create_venta(venta_payload))

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "El total de venta debe ser mayor a 0"

    def test_dashboard_and_catalogs(self, api, create_venta):
        create_venta(codigoReserva="R1", usuarioRegistra="ana", fechaVenta="2024-03-01")
        create_venta(codigoReserva="R2", usuarioRegistra="bob", totalVenta=300, fechaVenta="2024-04-01")

        async def scenario():
            return (
                await api.get_dashboard_stats(),
                await api.get_dashboard_stats("2024-04-01", "2024-04-30"),
                await api.get_top_users(limit=1),
                await api.get_monthly_stats(),
                await api.get_usuarios(),
                await api.get_clientes(),
                await api.check_health(),
            )

        stats, ranged, top, monthly, usuarios, clientes, health = asyncio.run(scenario())

        assert stats["numeroVentas"] == 2
        assert ranged["numeroVentas"] == 1
        assert [u["nombre"] for u in top] == ["bob"]
        assert [m["mes"] for m in monthly] == ["2024-03", "2024-04"]
        assert usuarios == []
        assert clientes == []
        assert health["success"] is True
        assert health["data"]["database"] == "Conectada"


class TestRequestShape:

    def test_sends_json_content_type(self):
        seen = {}

        def handler(request):
            seen["content_type"] = request.headers.get("content-type")
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"success": True, "data": []})

        asyncio.run(mock_client(handler).get_ventas())

        assert seen["content_type"] == "application/json"
        assert seen["url"] == "http://testserver/api/ventas"

    def test_create_sends_body(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"success": True, "data": {"id": 1}})

        data = asyncio.run(mock_client(handler).create_venta({"cliente": "Ana"}))

        assert data == {"id": 1}
        assert seen == {"method": "POST", "body": {"cliente": "Ana"}}

    @pytest.mark.parametrize("fecha_inicio, fecha_fin, expected_query", [
        ("2024-01-01", "2024-01-31", {"fechaInicio": "2024-01-01", "fechaFin": "2024-01-31"}),
        ("2024-01-01", None, {}),
        (None, None, {}),
    ])
    def test_stats_query_only_with_both_dates(self, fecha_inicio, fecha_fin, expected_query):
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"success": True, "data": {}})

        asyncio.run(mock_client(handler).get_dashboard_stats(fecha_inicio, fecha_fin))

        assert seen["params"] == expected_query

    def test_top_users_default_limit(self):
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json={"success": True, "data": []})

        asyncio.run(mock_client(handler).get_top_users())

        assert seen["params"] == {"limit": "5"}


class TestErrorHandling:

    def test_success_false_raises_even_with_200(self):
        def handler(request):
            return httpx.Response(200, json={"success": False, "message": "Algo falló"})

        with pytest.raises(ApiClientError) as exc_info:
            asyncio.run(mock_client(handler).get_monthly_stats())

        assert exc_info.value.message == "Algo falló"
        assert exc_info.value.status_code == 200

    def test_missing_message_uses_generic_text(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ApiClientError) as exc_info:
            asyncio.run(mock_client(handler).get_usuarios())

        assert exc_info.value.message == "Error en la petición"
        assert exc_info.value.status_code == 502

    def test_errors_are_logged_and_reraised(self, caplog):
        def handler(request):
            return httpx.Response(404, json={"success": False, "message": "Venta no encontrada"})

        with caplog.at_level(logging.ERROR, logger="reserva_trip.client.api_client"):
            with pytest.raises(ApiClientError):
                asyncio.run(mock_client(handler).get_venta(7))

        assert "Error al obtener venta" in caplog.text

    def test_transport_errors_are_reraised(self, caplog):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        with caplog.at_level(logging.ERROR, logger="reserva_trip.client.api_client"):
            with pytest.raises(httpx.ConnectError):
                asyncio.run(mock_client(handler).check_health())

        # single attempt, no retries
        assert len(calls) == 1
        assert "Error al verificar salud de la API" in caplog.text
