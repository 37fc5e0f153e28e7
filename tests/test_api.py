import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


@pytest.fixture
def api_client():
    from src.api.main import app
    return TestClient(app)


class TestServiceEndpoints:

    def test_health_check(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_endpoint(self, api_client):
        response = api_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "guide" in data["endpoints"]

    def test_request_id_is_echoed(self, api_client):
        response = api_client.get("/health", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"

    def test_request_id_is_generated(self, api_client):
        response = api_client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_no_cross_origin_headers(self, api_client):
        response = api_client.get("/health", headers={"Origin": "http://example.com"})

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers


class TestSubstitutionEndpoints:

    def test_find_substitutions(self, api_client):
        response = api_client.post(
            "/cuisine/substitutions",
            json={
                "authentic_ingredients": ["Ghee", "Basmati Rice"],
                "pantry": [{"name": "Unsalted Butter"}],
            },
            headers={"X-Request-ID": "req-1"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["request_id"] == "req-1"
        assert data["substitutions"] == [{
            "original": "Ghee",
            "substitute": "butter",
            "notes": "Unsalted butter is your best alternative, coconut oil changes flavor profile",
            "flavor_impact": "minimal",
        }]
        assert data["skipped_ingredients"] == ["Basmati Rice"]

    def test_find_substitutions_from_recipe(self, api_client):
        response = api_client.post(
            "/cuisine/substitutions",
            json={
                "recipe": {"name": "Pad Krapow", "authentic_ingredients": ["oyster sauce"]},
                "pantry": [],
            },
        )

        assert response.status_code == 200
        assert response.json()["substitutions"][0]["substitute"] == "hoisin sauce"

    def test_get_rule(self, api_client):
        response = api_client.get("/cuisine/substitutions/Miso Paste")

        assert response.status_code == 200
        data = response.json()
        assert data["substitutes"] == ["tahini with soy sauce", "vegetable bouillon"]
        assert data["flavor_impact"] == "significant"

    def test_get_unknown_rule(self, api_client):
        response = api_client.get("/cuisine/substitutions/saffron")

        assert response.status_code == 404


class TestAuthenticityEndpoint:

    def test_score(self, api_client, mixed_substitutions):
        response = api_client.post(
            "/cuisine/authenticity",
            json={"substitutions": [s.model_dump() for s in mixed_substitutions]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 65
        assert len(data["feedback"]) == 3

    def test_invalid_flavor_impact(self, api_client):
        response = api_client.post(
            "/cuisine/authenticity",
            json={"substitutions": [{
                "original": "ghee",
                "substitute": "butter",
                "flavor_impact": "catastrophic",
            }]},
        )

        assert response.status_code == 422


class TestGuideEndpoint:

    def test_guide(self, api_client):
        response = api_client.post(
            "/cuisine/guide",
            json={
                "recipe": {
                    "name": "Mansaf",
                    "authentic_ingredients": ["Sumac", "Za'atar", "Lamb"],
                    "region": "middle_east",
                },
                "pantry": [{"name": "Lemon Zest"}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["region"] == "middle_east"
        assert [s["substitute"] for s in data["substitutions"]] == [
            "lemon zest", "thyme with sesame seeds and sumac"
        ]
        assert data["authenticity"]["score"] == 80
        assert data["pairings"]["desserts"] == ["Baklava", "Kunafa", "Turkish Delight"]
        assert data["etiquette"]["serving_order"][-1] == "Coffee to conclude"


class TestRegionEndpoints:

    def test_list_regions(self, api_client):
        response = api_client.get("/regions")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 10
        assert sum(r["has_etiquette"] for r in data) == 6

    def test_pairings(self, api_client):
        response = api_client.get("/regions/east_asia/pairings")

        assert response.status_code == 200
        assert response.json()["main_dishes"] == [
            "Steamed Fish", "Stir-fried Vegetables", "Clay Pot Rice"
        ]

    def test_unknown_region_pairings(self, api_client):
        response = api_client.get("/regions/atlantis/pairings")

        assert response.status_code == 200
        assert response.json() == {
            "main_dishes": [], "side_dishes": [], "desserts": [], "beverages": []
        }

    def test_etiquette_for_pairing_only_region(self, api_client):
        response = api_client.get("/regions/west_africa/etiquette")

        assert response.status_code == 200
        assert response.json() == {
            "presentation": [], "customs": [], "taboos": [], "serving_order": []
        }
