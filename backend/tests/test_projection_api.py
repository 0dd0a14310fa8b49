"""Projection, comparison and realized endpoints."""

from __future__ import annotations

from uuid import uuid4

import pytest


async def _seed(api, *, contribution=1000, inflation=0):
    client = (await api.post("/clients", json={"name": "Bruno", "email": "bruno@example.com"})).json()
    simulation = (
        await api.post(
            "/simulations",
            json={
                "client_id": client["id"],
                "name": "Growth",
                "initial_capital": 150000,
                "monthly_contribution": contribution,
                "inflation_rate": inflation,
                "years_projection": 2,
            },
        )
    ).json()
    fund = (
        await api.post(
            "/allocations",
            json={"simulation_id": simulation["id"], "type": "financial", "description": "Equities",
                  "percentage": 60, "initial_value": 100000, "annual_return": 6, "allocation_date": "2024-01-01"},
        )
    ).json()
    await api.post(
        "/allocations",
        json={"simulation_id": simulation["id"], "type": "property", "description": "Flat",
              "percentage": 40, "initial_value": 50000, "allocation_date": "2024-01-01"},
    )
    await api.post(
        "/transactions",
        json={"allocation_id": fund["id"], "type": "contribution", "amount": 5000, "transaction_date": "2024-03-05"},
    )
    await api.post(
        "/transactions",
        json={"allocation_id": fund["id"], "type": "fee", "amount": 200, "transaction_date": "2024-04-20"},
    )
    await api.post(
        "/insurances",
        json={"simulation_id": simulation["id"], "type": "life", "coverage_amount": 300000,
              "monthly_cost": 150, "start_date": "2023-06-01"},
    )
    return client, simulation


async def test_projection_with_stored_defaults(planner_api):
    async with planner_api() as api:
        _, simulation = await _seed(api)
        response = await api.get(
            f"/simulations/{simulation['id']}/projection",
            params={"start_date": "2024-01-01", "end_date": "2025-01-01"},
        )

    assert response.status_code == 200, response.text
    payload = response.json()
    assert len(payload["monthly"]) == 13
    assert [y["year"] for y in payload["yearly"]] == [2024, 2025]
    # Equities carry the only non-zero return: 100000 * 6 / 150000.
    assert payload["interest_rate"] == pytest.approx(4.0)
    assert payload["inflation_rate"] == 0
    assert payload["life_status"] == "normal"

    summary = payload["summary"]
    assert summary["total_entries"] == pytest.approx(13 * 1000 + 5000)
    assert summary["total_exits"] == pytest.approx(200)
    # Premiums compound at the portfolio rate in the counterfactual balance.
    assert 13 * 150 <= summary["insurance_impact"] < 13 * 150 * 1.05
    assert summary["final_assets"] > summary["initial_assets"]
    assert all(m["property_assets"] == pytest.approx(50000) for m in payload["monthly"])


async def test_projection_horizon_defaults_to_years_projection(planner_api):
    async with planner_api() as api:
        _, simulation = await _seed(api)
        response = await api.get(
            f"/simulations/{simulation['id']}/projection", params={"start_date": "2024-05-10"}
        )
    payload = response.json()
    assert payload["end_date"] == "2026-05-10"
    assert len(payload["monthly"]) == 25


async def test_projection_life_event_pays_life_cover(planner_api):
    async with planner_api() as api:
        _, simulation = await _seed(api)
        response = await api.get(
            f"/simulations/{simulation['id']}/projection",
            params={
                "start_date": "2024-01-01",
                "end_date": "2024-12-01",
                "interest_rate": 0,
                "life_status": "dead",
                "life_status_change_date": "2024-06-01",
            },
        )
    payload = response.json()
    payouts = [m["insurance_payouts"] for m in payload["monthly"]]
    assert payouts[5] == pytest.approx(300000)
    assert sum(payouts) == pytest.approx(300000)
    assert all(m["entries"] == 0 for m in payload["monthly"][5:])
    assert all(m["insurance_premiums"] == 0 for m in payload["monthly"][5:])


async def test_projection_follows_client_status(planner_api):
    async with planner_api() as api:
        client, simulation = await _seed(api)
        await api.put(f"/clients/{client['id']}", json={"status": "deceased"})
        response = await api.get(
            f"/simulations/{simulation['id']}/projection",
            params={"start_date": "2024-01-01", "end_date": "2024-06-01"},
        )
    payload = response.json()
    assert payload["life_status"] == "dead"
    assert payload["summary"]["total_entries"] == 0


async def test_projection_validation_errors(planner_api):
    async with planner_api() as api:
        _, simulation = await _seed(api)
        url = f"/simulations/{simulation['id']}/projection"

        reversed_range = await api.get(url, params={"start_date": "2024-05-01", "end_date": "2024-01-01"})
        assert reversed_range.status_code == 400

        unknown_status = await api.get(url, params={"life_status": "retired"})
        assert unknown_status.status_code == 400

        out_of_bounds = await api.get(url, params={"interest_rate": 150})
        assert out_of_bounds.status_code == 422

        missing = await api.get(f"/simulations/{uuid4()}/projection")
        assert missing.status_code == 404


async def test_compare_skips_foreign_simulations(planner_api):
    async with planner_api() as api:
        client, simulation = await _seed(api)
        second = (
            await api.post(
                "/simulations",
                json={"client_id": client["id"], "name": "Conservative", "initial_capital": 0,
                      "years_projection": 1},
            )
        ).json()

        response = await api.post(
            f"/clients/{client['id']}/compare",
            json={"simulation_ids": [simulation["id"], second["id"], str(uuid4())], "interest_rate": 5},
        )
        assert response.status_code == 200, response.text
        comparisons = response.json()["comparisons"]
        assert [c["name"] for c in comparisons] == ["Growth", "Conservative"]
        assert len(comparisons[0]["projection"]["monthly"]) == 25
        assert len(comparisons[1]["projection"]["monthly"]) == 13
        assert comparisons[1]["projection"]["summary"]["total_growth_percent"] == 0

        too_many = await api.post(
            f"/clients/{client['id']}/compare", json={"simulation_ids": [str(uuid4()) for _ in range(6)]}
        )
        assert too_many.status_code == 400

        empty = await api.post(f"/clients/{client['id']}/compare", json={"simulation_ids": []})
        assert empty.status_code == 422


async def test_realized_totals(planner_api):
    async with planner_api() as api:
        client, _ = await _seed(api)
        response = await api.get(f"/clients/{client['id']}/realized")
        missing = await api.get(f"/clients/{uuid4()}/realized")

    assert response.status_code == 200
    assert missing.status_code == 404
    payload = response.json()
    assert payload["allocations"] == {"total": 150000, "financial": 100000, "property": 50000}
    assert payload["transactions"]["total_entries"] == 5000
    assert payload["transactions"]["total_exits"] == 200
    assert payload["transactions"]["per_type"]["contribution"] == 5000
    assert payload["insurances"]["count"] == 1
    assert payload["insurances"]["total_monthly_cost"] == 150
    assert payload["total_assets"] == 154800
