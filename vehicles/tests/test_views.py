from datetime import datetime, timezone
from unittest.mock import patch

from django.test import TestCase, override_settings
from django.urls import reverse

from vehicles.data_sources import StaticDataSource
from vehicles.exceptions import DataLoadFailure
from vehicles.models import Vehicle
from vehicles.records import VehicleRecord


class ExplodingDataSource:
    """Fonte que sempre rejeita, simulando uma API fora do ar."""

    async def fetch(self):
        raise DataLoadFailure("upstream indisponível")


class VehicleDashboardViewTests(TestCase):
    """
    Testes de integração da página e do endpoint JSON do dashboard.

    O que cobrimos aqui:
      - GET da página: sempre entrega o estado Loading (placeholder).
      - GET da API com a fonte estática padrão (os 7 veículos de exemplo).
      - GET da API com a fonte de banco configurada via settings.
      - GET da API com uma fonte que falha: estado "error" e mensagem fixa.
      - Métodos diferentes de GET são recusados.
    """

    # --------------------------------------------------------------------------
    # Página
    # --------------------------------------------------------------------------

    def test_page_renders_loading_placeholder(self):
        """
        A página nasce em Loading e aponta o script para a URL da API.
        """
        resp = self.client.get(reverse("vehicle_dashboard"))

        self.assertEqual(resp.status_code, 200)
        self.assertTemplateUsed(resp, "vehicles/dashboard.html")
        self.assertContains(resp, "Loading dashboard...")
        self.assertContains(resp, 'data-url="/api/dashboard/"')
        self.assertContains(resp, 'data-state="loading"')

    def test_page_rejects_post(self):
        resp = self.client.post(reverse("vehicle_dashboard"))
        self.assertEqual(resp.status_code, 405)

    # --------------------------------------------------------------------------
    # API: fonte estática
    # --------------------------------------------------------------------------

    def test_api_returns_ready_payload_for_sample_data(self):
        """
        Com a fonte padrão a API devolve os 7 registros, os 4 gráficos e o resumo.

        Estrutura mínima do contrato JSON:
        - state, charts, table, summary, records, generated_at
        """
        resp = self.client.get(reverse("vehicle_dashboard_data"))
        self.assertEqual(resp.status_code, 200)

        data = resp.json()
        for key in ["state", "charts", "table", "summary", "records", "generated_at"]:
            self.assertIn(key, data)

        self.assertEqual(data["state"], "ready")
        self.assertEqual(len(data["records"]), 7)
        self.assertEqual(
            [c["title"] for c in data["charts"]],
            ["Production Status", "Vehicles by Plant", "Vehicles by Model Year", "Vehicle Colors"],
        )
        self.assertEqual(data["summary"]["total"], 7)
        self.assertEqual(data["summary"]["completed_or_shipped"], 3)
        self.assertEqual(data["summary"]["in_progress"], 4)

        plant_chart = data["charts"][1]
        self.assertEqual(
            plant_chart["labels"],
            ["Aichi", "Kentucky", "Texas", "Mexico", "Japan", "South Africa"],
        )
        self.assertEqual(plant_chart["values"], [2, 1, 1, 1, 1, 1])

    @patch("vehicles.views.get_data_source")
    def test_api_uses_whatever_source_is_configured(self, mock_get_source):
        """
        A view não conhece a fonte: trocar por outra lista não exige mudança alguma.
        """
        mock_get_source.return_value = StaticDataSource([
            VehicleRecord("X1", "Prius", 2026, "Gray", "VIN-X1", "Shipped",
                          "Toyota Plant Texas", "Line 1", "2026-01-01T00:00:00Z"),
        ])

        data = self.client.get(reverse("vehicle_dashboard_data")).json()

        self.assertEqual(data["state"], "ready")
        self.assertEqual(data["table"]["rows"], [
            ["X1", "Prius", 2026, "Gray", "Shipped", "Toyota Plant Texas", "Line 1"],
        ])
        self.assertEqual(data["summary"]["completed_or_shipped"], 1)

    # --------------------------------------------------------------------------
    # API: fonte de banco
    # --------------------------------------------------------------------------

    @override_settings(
        VEHICLE_DATA_SOURCE="vehicles.data_sources.DatabaseDataSource",
        VEHICLE_DATA_SOURCE_OPTIONS={},
    )
    def test_api_reads_from_database_source(self):
        Vehicle.objects.create(
            id="V010",
            model="Tundra",
            year=2025,
            color="Black",
            vin="JT00000TUN00001",
            status="Quality Check",
            plant="Toyota Plant Texas",
            assembly_line="Line 4",
            created_at=datetime(2025, 4, 1, 12, 0, tzinfo=timezone.utc),
        )

        data = self.client.get(reverse("vehicle_dashboard_data")).json()

        self.assertEqual(data["state"], "ready")
        self.assertEqual([r["id"] for r in data["records"]], ["V010"])
        self.assertEqual(data["records"][0]["createdAt"], "2025-04-01T12:00:00Z")
        self.assertEqual(data["summary"]["in_progress"], 1)

    @override_settings(
        VEHICLE_DATA_SOURCE="vehicles.data_sources.DatabaseDataSource",
        VEHICLE_DATA_SOURCE_OPTIONS={},
    )
    def test_api_with_empty_database_is_ready_with_zeroes(self):
        """
        Tabela vazia não é erro: gráficos sem buckets e cards zerados.
        """
        data = self.client.get(reverse("vehicle_dashboard_data")).json()

        self.assertEqual(data["state"], "ready")
        self.assertTrue(all(chart["values"] == [] for chart in data["charts"]))
        self.assertEqual([c["value"] for c in data["summary"]["cards"]], [0, 0, 0])

    # --------------------------------------------------------------------------
    # API: falha de carga
    # --------------------------------------------------------------------------

    @patch("vehicles.views.get_data_source")
    def test_api_failure_returns_fixed_message(self, mock_get_source):
        """
        Fonte que rejeita -> estado "error", HTTP 500 e só a mensagem fixa
        (a causa real vai para o log, não para o usuário).
        """
        mock_get_source.return_value = ExplodingDataSource()

        with self.assertLogs("vehicles.state", level="ERROR"):
            resp = self.client.get(reverse("vehicle_dashboard_data"))

        self.assertEqual(resp.status_code, 500)
        data = resp.json()
        self.assertEqual(data["state"], "error")
        self.assertEqual(data["error"], "Failed to load vehicle data")
        self.assertNotIn("charts", data)
        self.assertNotIn("upstream", resp.content.decode())
