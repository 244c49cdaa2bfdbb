"""Integration tests for the dashboard endpoints."""

import pytest


@pytest.fixture
def ventas(create_venta):
    """Ventas repartidas entre tres usuarios y tres meses."""
    return [
        create_venta(codigoReserva="A1", usuarioRegistra="ana", totalVenta=100, fechaVenta="2024-01-10"),
        create_venta(codigoReserva="A2", usuarioRegistra="ana", totalVenta=300, fechaVenta="2024-02-05"),
        create_venta(codigoReserva="B1", usuarioRegistra="bob", totalVenta=500, fechaVenta="2024-02-20"),
        create_venta(codigoReserva="C1", usuarioRegistra="carla", totalVenta=50, fechaVenta="2023-12-31"),
    ]


class TestDashboardStats:
    """Test GET /api/dashboard/stats."""

    def test_empty_returns_zeros(self, client):
        response = client.get("/api/dashboard/stats")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "numeroVentas": 0,
            "totalVentas": 0,
            "promedioVentas": 0,
            "totalComisiones": 0,
        }

    def test_totals(self, client, ventas):
        data = client.get("/api/dashboard/stats").json()["data"]

        assert data["numeroVentas"] == 4
        assert data["totalVentas"] == 950.0
        assert data["promedioVentas"] == 237.5
        assert data["totalComisiones"] == 285.0

    def test_date_range_is_inclusive(self, client, ventas):
        response = client.get(
            "/api/dashboard/stats",
            params={"fechaInicio": "2024-01-10", "fechaFin": "2024-02-20"},
        )

        data = response.json()["data"]
        assert data["numeroVentas"] == 3
        assert data["totalVentas"] == 900.0

    def test_single_bound_is_ignored(self, client, ventas):
        data = client.get("/api/dashboard/stats", params={"fechaInicio": "2024-02-01"}).json()["data"]

        assert data["numeroVentas"] == 4

    def test_empty_range_returns_zeros(self, client, ventas):
        data = client.get(
            "/api/dashboard/stats",
            params={"fechaInicio": "2030-01-01", "fechaFin": "2030-12-31"},
        ).json()["data"]

        assert data == {"numeroVentas": 0, "totalVentas": 0, "promedioVentas": 0, "totalComisiones": 0}

    def test_invalid_date_rejected(self, client):
        response = client.get("/api/dashboard/stats", params={"fechaInicio": "ayer", "fechaFin": "hoy"})

        assert response.status_code == 400

    def test_deleted_ventas_excluded(self, client, ventas):
        client.delete(f"/api/ventas/{ventas[2]['id']}")

        data = client.get("/api/dashboard/stats").json()["data"]

        assert data["numeroVentas"] == 3
        assert data["totalVentas"] == 450.0

    def test_average_is_not_rounded(self, client, create_venta):
        create_venta(codigoReserva="P1", totalVenta=100)
        create_venta(codigoReserva="P2", totalVenta=100)
        create_venta(codigoReserva="P3", totalVenta=50)

        data = client.get("/api/dashboard/stats").json()["data"]

        assert data["promedioVentas"] == pytest.approx(250 / 3)
        assert data["promedioVentas"] != 83.33


class TestTopUsers:
    """Test GET /api/dashboard/top-users."""

    def test_sorted_by_total_descending(self, client, ventas):
        data = client.get("/api/dashboard/top-users").json()["data"]

        assert [u["nombre"] for u in data] == ["bob", "ana", "carla"]
        totals = [u["totalVentas"] for u in data]
        assert totals == sorted(totals, reverse=True)
        assert data[1] == {
            "nombre": "ana",
            "numeroVentas": 2,
            "totalVentas": 400.0,
            "totalComisiones": 120.0,
        }

    def test_limit_caps_results(self, client, ventas):
        data = client.get("/api/dashboard/top-users", params={"limit": 2}).json()["data"]

        assert len(data) == 2
        assert [u["nombre"] for u in data] == ["bob", "ana"]

    def test_default_limit_is_five(self, client, create_venta):
        for i in range(7):
            create_venta(codigoReserva=f"R{i}", usuarioRegistra=f"user{i}", totalVenta=10 + i)

        data = client.get("/api/dashboard/top-users").json()["data"]

        assert len(data) == 5
        assert data[0]["nombre"] == "user6"

    @pytest.mark.parametrize("limit", ["0", "-1", "cinco"])
    def test_invalid_limit_rejected(self, client, limit):
        response = client.get("/api/dashboard/top-users", params={"limit": limit})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestMonthlyStats:
    """Test GET /api/dashboard/monthly-stats."""

    def test_grouped_by_month_in_order(self, client, ventas):
        data = client.get("/api/dashboard/monthly-stats").json()["data"]

        assert [m["mes"] for m in data] == ["2023-12", "2024-01", "2024-02"]
        assert data[2] == {
            "mes": "2024-02",
            "numeroVentas": 2,
            "totalVentas": 800.0,
            "totalComisiones": 240.0,
        }

    def test_empty(self, client):
        response = client.get("/api/dashboard/monthly-stats")

        assert response.status_code == 200
        assert response.json()["data"] == []
