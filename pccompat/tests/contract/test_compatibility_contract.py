"""
Contract tests for compatibility API endpoints
"""
from fastapi.testclient import TestClient

from pccompat.main import app
from pccompat.core.config import settings


def _component(component_id, category, **specs):
    return {"id": component_id, "name": f"{category} {component_id}", "category": category, "specifications": specs}


class TestCompatibilityContract:
    """Contract tests for compatibility endpoints"""

    def setup_method(self):
        """Setup test client"""
        self.client = TestClient(app)
        self.prefix = settings.api_prefix

    def test_check_contract(self):
        """Test POST /compatibility/check response structure"""
        request_data = {
            "components": [
                _component("cpu-1", "CPU", socket="AM4", generation="Ryzen 5000 Series", power_consumption=65),
                _component("mb-1", "MOTHERBOARD", socket="AM5", price=3500000),
            ]
        }

        response = self.client.post(f"{self.prefix}/compatibility/check", json=request_data)

        assert response.status_code == 200
        data = response.json()
        for key in ("is_compatible", "issues", "power_requirement", "estimated_price",
                    "error_count", "warning_count", "info_count", "performance", "cached"):
            assert key in data
        assert data["is_compatible"] is False
        assert data["error_count"] == 1
        assert data["power_requirement"] == 65
        assert data["estimated_price"] == 3500000

        issue = data["issues"][0]
        assert issue["severity"] == "error"
        assert issue["components"] == ["cpu-1", "mb-1"]
        assert issue["message"]
        assert issue["message_localized"]
        assert set(data["performance"]) == {"gaming", "productivity", "overall"}

    def test_identical_check_is_served_from_cache(self):
        request_data = {"components": [_component("ssd-1", "STORAGE", price=500000)]}

        first = self.client.post(f"{self.prefix}/compatibility/check", json=request_data).json()
        second = self.client.post(f"{self.prefix}/compatibility/check", json=request_data).json()

        assert first["cached"] is False
        assert second["cached"] is True
        assert {**first, "cached": True} == second

    def test_check_validation_contract(self):
        """Malformed components return the standard error envelope"""
        invalid_requests = [
            {"components": [{"id": "x", "category": "CPU"}]},
            {"components": [_component("r1", "RAM", capacity="plenty")]},
            {"components": "not-a-list"},
        ]

        for invalid_request in invalid_requests:
            response = self.client.post(f"{self.prefix}/compatibility/check", json=invalid_request)
            assert response.status_code == 422
            assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unknown_category_ignored_by_default(self):
        request_data = {"components": [_component("acc-1", "MONITOR", price=3000000)]}

        response = self.client.post(f"{self.prefix}/compatibility/check", json=request_data)

        assert response.status_code == 200
        assert response.json()["issues"] == []

    def test_unknown_category_rejected_when_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "reject_unknown_categories", True)
        request_data = {"components": [_component("acc-1", "MONITOR")]}

        response = self.client.post(f"{self.prefix}/compatibility/check", json=request_data)

        assert response.status_code == 422
        assert response.json()["detail"]["components"] == ["acc-1"]

    def test_suggestions_contract(self):
        request_data = {
            "existing_components": [_component("mb-1", "MOTHERBOARD", socket="AM5")],
            "target_category": "cpu",
        }

        response = self.client.post(f"{self.prefix}/compatibility/suggestions", json=request_data)

        assert response.status_code == 200
        data = response.json()
        assert data["target_category"] == "CPU"
        assert data["suggestions"] == ["Choose a CPU with socket AM5"]

    def test_suggestions_for_storage_are_empty(self):
        request_data = {
            "existing_components": [_component("mb-1", "MOTHERBOARD", socket="AM5")],
            "target_category": "STORAGE",
        }

        response = self.client.post(f"{self.prefix}/compatibility/suggestions", json=request_data)

        assert response.status_code == 200
        assert response.json()["suggestions"] == []

    def test_suggestions_locale_validated(self):
        request_data = {"existing_components": [], "target_category": "CPU", "locale": "fr"}
        response = self.client.post(f"{self.prefix}/compatibility/suggestions", json=request_data)
        assert response.status_code == 422

    def test_categories_contract(self):
        response = self.client.get(f"{self.prefix}/compatibility/categories")

        assert response.status_code == 200
        labels = {entry["category"]: entry["label"] for entry in response.json()}
        assert set(labels) == {"CPU", "GPU", "RAM", "MOTHERBOARD", "STORAGE", "PSU", "CASE", "COOLING"}
        assert labels["MOTHERBOARD"] == "Bo mạch chủ (Mainboard)"

    def test_sockets_contract(self):
        response = self.client.get(f"{self.prefix}/compatibility/sockets")

        assert response.status_code == 200
        assert response.json()["AM5"] == ["Ryzen 7000 Series", "Ryzen 8000 Series"]

    def test_health_endpoint_contract(self):
        """Test GET /health contract compliance"""
        response = self.client.get(f"{self.prefix}/health")

        assert response.status_code == 200
        response_data = response.json()
        assert response_data["status"] in ["healthy", "unhealthy"]
        assert "timestamp" in response_data
        assert response_data["version"] == settings.version
        assert "memory_cache" in response_data["cache"]

    def test_root_endpoint(self):
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == f"{self.prefix}/health"
