from __future__ import annotations

import pytest
from flask.testing import FlaskClient


def scenario_payload(**overrides) -> dict:
    payload = {
        "startingAmount": 100,
        "rateOfReturn": 10,
        "incrementalAddition": 505.75,
        "incrementalFrequency": "monthly",
        "years": 30,
    }
    payload.update(overrides)
    return payload


def test_simulate_returns_yearly_rows(client: FlaskClient):
    resp = client.post("/api/simulate", json=scenario_payload(years=1))

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["results"] == [
        {"year": 1, "totalValue": 6179.0, "invested": 6169.0, "gained": 10.0}
    ]
    assert body["finalValue"] == 6179.0
    assert body["finalValueDisplay"] == "$6,179"


def test_simulate_zero_years_is_empty(client: FlaskClient):
    resp = client.post("/api/simulate", json=scenario_payload(years=0))

    assert resp.status_code == 200
    assert resp.get_json() == {"results": [], "finalValue": 0.0, "finalValueDisplay": "$0"}


def test_simulate_rejects_unknown_frequency(client: FlaskClient):
    resp = client.post("/api/simulate", json=scenario_payload(incrementalFrequency="weekly"))

    assert resp.status_code == 422
    body = resp.get_json()
    assert "detail" in body
    assert body["detail"][0]["loc"] == ["incrementalFrequency"]


def test_simulate_rejects_negative_starting_amount(client: FlaskClient):
    resp = client.post("/api/simulate", json=scenario_payload(startingAmount=-1))

    assert resp.status_code == 422


def test_compare_single_scenario(client: FlaskClient):
    resp = client.post("/api/compare", json={"primary": scenario_payload(years=7)})

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["jointSeries"]) == 7
    assert all(point["valueB"] is None for point in body["jointSeries"])
    assert body["xAxisTicks"] == [0, 5]
    assert body["selected"] is None
    assert body["finalValues"]["b"] is None
    assert body["finalValues"]["a"] == body["jointSeries"][-1]["valueA"]


def test_compare_two_scenarios_with_selection(client: FlaskClient):
    payload = {
        "primary": scenario_payload(years=3),
        "secondary": scenario_payload(years=12, rateOfReturn=5),
        "selectedYear": 10,
    }

    resp = client.post("/api/compare", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    joint = body["jointSeries"]
    assert [point["year"] for point in joint] == list(range(1, 13))
    assert [point["valueA"] is None for point in joint] == [False] * 3 + [True] * 9
    assert all(point["valueB"] is not None for point in joint)
    assert body["xAxisTicks"] == [0, 5, 10]

    selected = body["selected"]
    assert selected["year"] == 10
    assert selected["comparing"] is True
    assert selected["resultA"] is None
    assert selected["resultB"]["year"] == 10
    assert selected["resultB"]["totalValue"] == joint[9]["valueB"]
    assert body["finalValues"]["b"] == joint[-1]["valueB"]


def test_compare_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/compare", json={"secondary": scenario_payload()})

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_frequencies_lists_closed_set(client: FlaskClient):
    resp = client.get("/api/frequencies")

    assert resp.status_code == 200
    assert resp.get_json() == [
        {"value": "monthly", "periodsPerYear": 12},
        {"value": "quarterly", "periodsPerYear": 4},
        {"value": "yearly", "periodsPerYear": 1},
    ]


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong"}


def test_comparison_state_error_maps_to_conflict(app):
    from compound_interest.app.api.routes import _handle_comparison_state_error
    from compound_interest.core.comparison import ComparisonStateError

    with app.app_context():
        response, status = _handle_comparison_state_error(
            ComparisonStateError("comparison is not enabled")
        )

    assert status == 409
    assert response.get_json() == {"error": "comparison is not enabled"}


def test_simulate_handles_huge_principal(client: FlaskClient):
    resp = client.post("/api/simulate", json=scenario_payload(startingAmount=1e27, years=1))

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["results"][0]["totalValue"] == pytest.approx(1.1e27)
    assert body["finalValueDisplay"].startswith("$1,100,000,000")


def test_simulate_handles_long_horizon(client: FlaskClient):
    resp = client.post("/api/simulate", json=scenario_payload(years=520))

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["results"]) == 520
    assert body["finalValue"] > 1e26
