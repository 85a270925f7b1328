from daily_plan.main import app, get_session
from daily_plan.services import PlanSession


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_exercises(client):
    response = client.get("/api/v1/exercises")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 9
    assert data[0] == {
        "exerciseId": "q1",
        "name": "Quad Extension",
        "category": "quad",
        "defaultWeight": 15,
        "isActive": True,
    }


def test_active_by_category(client):
    response = client.get("/api/v1/exercises/active")
    assert response.status_code == 200
    categories = response.json()["categories"]
    assert [ex["exerciseId"] for ex in categories["quad"]] == ["q1", "q2", "q3"]
    assert len(categories["ankle"]) == 2


def test_generate_plan(client):
    response = client.post("/api/v1/plan/generate")
    assert response.status_code == 200
    data = response.json()

    assert data["dayId"] == "2025-10-22"
    assert len(data["planIds"]) == 5
    assert [ex["category"] for ex in data["exercises"]] == [
        "quad", "quad", "ankle", "hamstring", "hip",
    ]
    assert data["notices"] == []
    assert data["notice"] is None

    current = client.get("/api/v1/plan").json()
    assert current["planIds"] == data["planIds"]


def test_generate_plan_reports_shortages(client, sparse_catalog, rng):
    sparse = PlanSession(
        catalog=sparse_catalog,
        quotas={"quad": 2, "ankle": 1, "hamstring": 1, "hip": 1},
        rng=rng,
    )
    app.dependency_overrides[get_session] = lambda: sparse

    data = client.post("/api/v1/plan/generate").json()

    assert data["planIds"] == ["q1", "a1", "hip1"]
    assert [n["message"] for n in data["notices"]] == [
        "only 1/2 quad exercises available.",
        "no hamstring exercise available.",
    ]
    assert data["notice"] == (
        "only 1/2 quad exercises available. no hamstring exercise available."
    )
    assert [ex["currentWeight"] for ex in data["exercises"]] == [15, 5, 8]


def test_weight_update_and_promote(client):
    response = client.put("/api/v1/weights/q1", json={"weight": 22})
    assert response.status_code == 200
    assert response.json() == {"exerciseId": "q1", "weight": 22}

    response = client.post("/api/v1/exercises/q1/promote")
    assert response.status_code == 200
    assert response.json()["defaultWeight"] == 22

    client.post("/api/v1/session/day", json={"dayId": "2025-10-23"})
    assert client.get("/api/v1/weights/q1").json()["weight"] == 22


def test_promote_unknown_returns_404(client):
    response = client.post("/api/v1/exercises/zzz/promote")
    assert response.status_code == 404
    assert response.json()["detail"]["type"] == "ExerciseNotFoundError"


def test_promote_negative_returns_400(client):
    client.put("/api/v1/weights/a1", json={"weight": -3})
    response = client.post("/api/v1/exercises/a1/promote")
    assert response.status_code == 400


def test_get_unknown_weight_returns_404(client):
    assert client.get("/api/v1/weights/zzz").status_code == 404


def test_add_exercise(client):
    payload = {"exerciseId": "hip3", "name": "Clamshell", "category": "hip", "defaultWeight": 0}
    response = client.post("/api/v1/exercises", json=payload)
    assert response.status_code == 201
    assert response.json()["isActive"] is True

    assert client.post("/api/v1/exercises", json=payload).status_code == 409


def test_add_exercise_validation(client):
    bad_weight = {"exerciseId": "x", "name": "Calf", "category": "ankle", "defaultWeight": -1}
    assert client.post("/api/v1/exercises", json=bad_weight).status_code == 422

    bad_category = {"exerciseId": "x", "name": "Calf", "category": "calf", "defaultWeight": 1}
    assert client.post("/api/v1/exercises", json=bad_category).status_code == 422

    blank_name = {"exerciseId": "x", "name": "  ", "category": "ankle", "defaultWeight": 1}
    assert client.post("/api/v1/exercises", json=blank_name).status_code == 400


def test_start_day_and_notes(client):
    client.post("/api/v1/plan/generate")
    notes = client.put("/api/v1/session/notes", json={"notes": "felt strong"}).json()
    assert notes["notes"] == "felt strong"

    data = client.post("/api/v1/session/day", json={"dayId": "2025-10-24"}).json()
    assert data["dayId"] == "2025-10-24"
    assert data["planIds"] == []
    assert data["notes"] == ""
