import pytest
from fastapi.testclient import TestClient

from lawyermatch.main import app
from lawyermatch.dependencies import get_lawyer_store
from lawyermatch.services.lawyer_store import LawyerStore

client = TestClient(app)


@pytest.fixture
def seeded_store(lawyer_data):
    store = LawyerStore()
    store.create(lawyer_data(
        name="Alice Grant", practice_areas=["family_law"], rating=4.9,
        hourly_rate=250, experience_level="senior", featured=True,
        location="Chicago, IL"))
    store.create(lawyer_data(
        name="Bob Reyes", practice_areas=["criminal_defense", "personal_injury"],
        rating=3.5, hourly_rate=120, experience_level="junior",
        available_for_consultation=False, location="Miami, FL"))
    store.create(lawyer_data(
        name="Carla Singh", practice_areas=["immigration_law"], rating=4.2,
        hourly_rate=180, experience_level="mid", location="Seattle, WA"))

    app.dependency_overrides[get_lawyer_store] = lambda: store
    yield store
    app.dependency_overrides = {}


def _names(response):
    return [lawyer["name"] for lawyer in response.json()]


def test_list_lawyers(seeded_store):
    r = client.get("/api/lawyers")
    assert r.status_code == 200
    assert _names(r) == ["Alice Grant", "Bob Reyes", "Carla Singh"]


def test_lawyer_json_uses_camel_case(seeded_store):
    data = client.get("/api/lawyers/1").json()
    assert data["id"] == 1
    assert data["hourlyRate"] == 250
    assert data["practiceAreas"] == ["family_law"]
    assert data["experienceLevel"] == "senior"
    assert data["availableForConsultation"] is True


def test_get_lawyer_not_found(seeded_store):
    r = client.get("/api/lawyers/99")
    assert r.status_code == 404
    assert r.json() == {"message": "Lawyer not found"}


@pytest.mark.parametrize("raw_id", ["abc", "0", "-1", "1.5"])
def test_get_lawyer_invalid_id(seeded_store, raw_id):
    r = client.get(f"/api/lawyers/{raw_id}")
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid lawyer ID"


def test_filter_by_practice_area(seeded_store):
    r = client.get("/api/lawyers/practice/personal_injury")
    assert r.status_code == 200
    assert _names(r) == ["Bob Reyes"]

    r = client.get("/api/lawyers/practice/maritime_law")
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid practice area"


def test_filter_by_rating(seeded_store):
    r = client.get("/api/lawyers/rating/4.2")
    assert r.status_code == 200
    assert _names(r) == ["Alice Grant", "Carla Singh"]


@pytest.mark.parametrize("raw", ["abc", "0.5", "6", "nan"])
def test_filter_by_rating_invalid(seeded_store, raw):
    r = client.get(f"/api/lawyers/rating/{raw}")
    assert r.status_code == 400


def test_filter_by_price(seeded_store):
    r = client.get("/api/lawyers/price", params={"min": 120, "max": 180})
    assert r.status_code == 200
    assert _names(r) == ["Bob Reyes", "Carla Singh"]

    # defaults are 0 to 500
    assert len(client.get("/api/lawyers/price").json()) == 3


@pytest.mark.parametrize("params", [
    {"min": "cheap"},
    {"min": -1},
    {"max": 0},
    {"min": 300, "max": 200},
])
def test_filter_by_price_invalid(seeded_store, params):
    r = client.get("/api/lawyers/price", params=params)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid price range"


def test_filter_by_experience(seeded_store):
    assert _names(client.get("/api/lawyers/experience/mid")) == ["Carla Singh"]
    assert client.get("/api/lawyers/experience/principal").status_code == 400


def test_available_and_featured(seeded_store):
    assert _names(client.get("/api/lawyers/available")) == ["Alice Grant", "Carla Singh"]
    assert _names(client.get("/api/lawyers/featured")) == ["Alice Grant"]


def test_search(seeded_store):
    r = client.get("/api/lawyers/search", params={"q": "SEATTLE"})
    assert r.status_code == 200
    assert _names(r) == ["Carla Singh"]

    assert _names(client.get("/api/lawyers/search", params={"q": "criminal"})) == ["Bob Reyes"]


@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
def test_search_requires_query(seeded_store, params):
    r = client.get("/api/lawyers/search", params=params)
    assert r.status_code == 400
    assert r.json() == {"message": "Search query is required"}


def test_combined_filter(seeded_store):
    r = client.post("/api/lawyers/filter", json={
        "practiceAreas": ["family_law", "immigration_law", "criminal_defense"],
        "minRating": 4,
        "maxPrice": 200,
    })
    assert r.status_code == 200
    assert _names(r) == ["Carla Singh"]


def test_combined_filter_accepts_fractional_prices(seeded_store):
    r = client.post("/api/lawyers/filter", json={"maxPrice": 199.99})
    assert r.status_code == 200
    assert _names(r) == ["Bob Reyes", "Carla Singh"]

    r = client.post("/api/lawyers/filter", json={"minPrice": 180.5, "maxPrice": 250.5})
    assert r.status_code == 200
    assert _names(r) == ["Alice Grant"]


def test_combined_filter_without_body_returns_all(seeded_store):
    assert len(client.post("/api/lawyers/filter").json()) == 3
    assert len(client.post("/api/lawyers/filter", json={}).json()) == 3


@pytest.mark.parametrize("body", [
    {"practiceAreas": ["maritime_law"]},
    {"minRating": 0},
    {"minPrice": -5},
    {"experienceLevels": ["principal"]},
    {"minPrice": 300, "maxPrice": 100},
])
def test_combined_filter_validation(seeded_store, body):
    r = client.post("/api/lawyers/filter", json=body)
    assert r.status_code == 400
    data = r.json()
    assert data["message"] == "Invalid filter criteria"
    assert data["errors"]


def test_browse_pipeline(seeded_store):
    r = client.post("/api/lawyers/browse", json={
        "filters": {"minRating": 4},
        "sortBy": "price-low",
        "page": 1,
        "pageSize": 1,
    })
    assert r.status_code == 200
    data = r.json()
    assert [lawyer["name"] for lawyer in data["lawyers"]] == ["Carla Singh"]
    assert data["total"] == 2
    assert data["totalPages"] == 2
    assert data["pageSize"] == 1

    r = client.post("/api/lawyers/browse", json={"page": 5})
    assert r.status_code == 200
    assert r.json()["lawyers"] == []
    assert r.json()["pageSize"] == 9


def test_browse_rejects_oversized_pages(seeded_store):
    r = client.post("/api/lawyers/browse", json={"pageSize": 1000})
    assert r.status_code == 400

    r = client.post("/api/lawyers/browse", json={"pageSize": 0})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid request parameters"


def test_option_lists():
    areas = client.get("/api/lawyers/practice-areas").json()
    assert len(areas) == 10
    assert {"value": "family_law", "label": "Family Law"} in areas

    levels = client.get("/api/lawyers/experience-levels").json()
    assert [level["value"] for level in levels] == ["junior", "mid", "senior"]

    sorts = client.get("/api/lawyers/sort-options").json()
    assert sorts[0] == {"value": "relevance", "label": "Relevance"}


def test_create_update_delete_lawyer(seeded_store, lawyer_data):
    payload = lawyer_data(name="New Lawyer")
    r = client.post("/api/lawyers", json=payload)
    assert r.status_code == 201
    created = r.json()
    assert created["id"] == 4

    r2 = client.put("/api/lawyers/4", json={"bio": "Experienced", "hourlyRate": 275})
    assert r2.status_code == 200
    assert r2.json()["bio"] == "Experienced"
    assert seeded_store.get(4).hourly_rate == 275
    assert seeded_store.get(4).name == "New Lawyer"

    r3 = client.delete("/api/lawyers/4")
    assert r3.status_code == 200
    assert r3.json() == {"ok": True}
    assert client.get("/api/lawyers/4").status_code == 404
    assert client.delete("/api/lawyers/4").status_code == 404


def test_update_rejects_out_of_range_rating(seeded_store):
    r = client.put("/api/lawyers/1", json={"rating": 7})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid request parameters"
    assert seeded_store.get(1).rating == 4.9


def test_store_failure_returns_generic_500(seeded_store, monkeypatch):
    def broken():
        raise RuntimeError("store offline")

    monkeypatch.setattr(seeded_store, "list", broken)
    r = client.get("/api/lawyers")
    assert r.status_code == 500
    assert r.json() == {"message": "Failed to retrieve lawyers"}


def test_unhandled_error_returns_500_message(monkeypatch):
    def broken_store():
        raise RuntimeError("boom")

    app.dependency_overrides[get_lawyer_store] = broken_store
    try:
        safe_client = TestClient(app, raise_server_exceptions=False)
        r = safe_client.get("/api/lawyers/featured")
        assert r.status_code == 500
        assert r.json()["message"].startswith("Internal server error")
    finally:
        app.dependency_overrides = {}


def test_startup_seeds_catalog():
    original_store = app.state.lawyer_store
    app.state.lawyer_store = LawyerStore()
    try:
        with TestClient(app) as seeded_client:
            r = seeded_client.get("/api/lawyers")
            assert r.status_code == 200
            assert len(r.json()) > 0
            health = seeded_client.get("/health").json()
            assert health["lawyers"] == len(r.json())
    finally:
        app.state.lawyer_store = original_store
    assert app.state.lawyer_store is original_store
