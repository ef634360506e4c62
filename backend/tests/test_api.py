from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)

VALID_BODY = {
    "years_experience": 10,
    "education": "master",
    "job_role": "data-scientist",
    "location": "san-francisco",
    "company_size": "enterprise",
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_options():
    response = client.get("/options")
    assert response.status_code == 200
    data = response.json()
    assert len(data["job_role"]) == 10
    assert len(data["education"]) == 5
    assert {"value": "san-francisco", "label": "San Francisco, CA"} in data["location"]
    assert all(o["value"] != "unknown" for o in data["company_size"])
    assert data["max_years_experience"] == 50


def test_predict():
    response = client.post("/predict", json=VALID_BODY)
    assert response.status_code == 200
    data = response.json()
    assert data["avg_salary"] == 340032
    assert data["min_salary"] == 289027
    assert data["max_salary"] == 391037
    assert data["confidence"] == 95
    assert data["confidence_label"] == "High"
    assert data["formatted_average"] == "$340,032"
    assert data["formatted_range"] == "$289,027 - $391,037"
    assert data["message"] == "Estimated salary: $340,032"
    assert data["factors"] == {
        "experience": 28.0,
        "education": 21,
        "role": 25,
        "location": 25,
        "company": 18,
    }
    assert data["profile_summary"]["location"] == "San Francisco, CA"


def test_predict_unrecognized_tags_fall_back():
    body = dict(VALID_BODY, location="atlantis", job_role="astronaut")
    response = client.post("/predict", json=body)
    assert response.status_code == 200
    fallback = client.post("/predict", json=dict(VALID_BODY, location="other", job_role="other"))
    assert response.json()["avg_salary"] == fallback.json()["avg_salary"]


def test_predict_rejects_out_of_range_experience():
    for years in (-1, 51):
        response = client.post("/predict", json=dict(VALID_BODY, years_experience=years))
        assert response.status_code == 422


def test_predict_rejects_empty_category():
    response = client.post("/predict", json=dict(VALID_BODY, education=""))
    assert response.status_code == 422


def test_predict_rejects_missing_field():
    body = dict(VALID_BODY)
    del body["company_size"]
    response = client.post("/predict", json=body)
    assert response.status_code == 422


def test_predict_failure_returns_503():
    settings.prediction_failure_rate = 1.0
    response = client.post("/predict", json=VALID_BODY)
    assert response.status_code == 503
    assert response.json()["detail"] == "Prediction failed. Please try again later."


def test_predict_rate_limited():
    original = settings.predict_rate_limit
    try:
        settings.predict_rate_limit = "2/minute"
        assert client.post("/predict", json=VALID_BODY).status_code == 200
        assert client.post("/predict", json=VALID_BODY).status_code == 200
        assert client.post("/predict", json=VALID_BODY).status_code == 429
    finally:
        settings.predict_rate_limit = original
