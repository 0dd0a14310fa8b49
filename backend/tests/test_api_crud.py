"""CRUD behaviour of the planning API."""

from __future__ import annotations

from uuid import uuid4


async def _create_client(api, email="ana@example.com", **extra):
    response = await api.post("/clients", json={"name": "Ana Lima", "email": email, **extra})
    assert response.status_code == 201, response.text
    return response.json()


async def _create_simulation(api, client_id, **extra):
    payload = {"client_id": client_id, "name": "Base plan", "initial_capital": 100000, **extra}
    response = await api.post("/simulations", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def test_health(planner_api):
    async with planner_api() as api:
        response = await api.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_client_lifecycle(planner_api):
    async with planner_api() as api:
        created = await _create_client(api, email="Ana@Example.com", tax_id="123.456.789-00")
        assert created["email"] == "ana@example.com"
        assert created["status"] == "alive"

        duplicate = await api.post("/clients", json={"name": "Other", "email": "ana@example.com"})
        assert duplicate.status_code == 409

        duplicate_tax = await api.post(
            "/clients", json={"name": "Other", "email": "other@example.com", "tax_id": "123.456.789-00"}
        )
        assert duplicate_tax.status_code == 409

        invalid = await api.post("/clients", json={"name": "Bad", "email": "not-an-email"})
        assert invalid.status_code == 422

        updated = await api.put(f"/clients/{created['id']}", json={"status": "disabled", "phone": "+55 11 5555"})
        assert updated.status_code == 200
        assert updated.json()["status"] == "disabled"
        assert updated.json()["phone"] == "+55 11 5555"

        listed = await api.get("/clients")
        assert [c["id"] for c in listed.json()] == [created["id"]]

        missing = await api.get(f"/clients/{uuid4()}")
        assert missing.status_code == 404


async def test_simulation_defaults_and_updates(planner_api):
    async with planner_api() as api:
        client = await _create_client(api)
        simulation = await _create_simulation(api, client["id"])
        assert simulation["status"] == "draft"
        assert simulation["inflation_rate"] == 3.5
        assert simulation["years_projection"] == 20
        assert simulation["monthly_contribution"] == 0

        orphan = await api.post(
            "/simulations", json={"client_id": str(uuid4()), "name": "Orphan", "initial_capital": 1}
        )
        assert orphan.status_code == 404

        updated = await api.put(
            f"/simulations/{simulation['id']}", json={"status": "active", "monthly_contribution": 1500}
        )
        assert updated.status_code == 200
        assert updated.json()["status"] == "active"
        assert updated.json()["monthly_contribution"] == 1500

        listed = await api.get(f"/clients/{client['id']}/simulations")
        assert [s["id"] for s in listed.json()] == [simulation["id"]]

        bad_years = await api.put(f"/simulations/{simulation['id']}", json={"years_projection": 0})
        assert bad_years.status_code == 422


async def test_simulation_horizon_defaults_to_configured_years(planner_api, monkeypatch):
    from app.config import get_settings

    monkeypatch.setattr(get_settings(), "default_years_projection", 7)
    async with planner_api() as api:
        client = await _create_client(api)
        configured = await _create_simulation(api, client["id"])
        explicit = await _create_simulation(api, client["id"], years_projection=12)

    assert configured["years_projection"] == 7
    assert explicit["years_projection"] == 12


async def test_allocations_transactions_and_insurances(planner_api):
    async with planner_api() as api:
        client = await _create_client(api)
        simulation = await _create_simulation(api, client["id"])

        allocation = await api.post(
            "/allocations",
            json={
                "simulation_id": simulation["id"],
                "type": "property",
                "description": "Beach house",
                "percentage": 40,
                "initial_value": 400000,
                "allocation_date": "2024-01-10",
                "monthly_payment": 2500,
                "remaining_payments": 120,
            },
        )
        assert allocation.status_code == 201, allocation.text
        allocation_id = allocation.json()["id"]
        assert allocation.json()["monthly_payment"] == 2500

        bad_type = await api.post(
            "/allocations",
            json={
                "simulation_id": simulation["id"],
                "type": "crypto",
                "description": "Coins",
                "percentage": 10,
                "initial_value": 1,
                "allocation_date": "2024-01-10",
            },
        )
        assert bad_type.status_code == 422

        tx = await api.post(
            "/transactions",
            json={"allocation_id": allocation_id, "type": "contribution", "amount": 5000,
                  "transaction_date": "2024-02-01"},
        )
        assert tx.status_code == 201, tx.text
        tx_id = tx.json()["id"]

        changed = await api.put(f"/transactions/{tx_id}", json={"type": "fee", "amount": 120})
        assert changed.json()["type"] == "fee"
        assert changed.json()["amount"] == 120

        listed_tx = await api.get(f"/allocations/{allocation_id}/transactions")
        assert [t["id"] for t in listed_tx.json()] == [tx_id]

        insurance = await api.post(
            "/insurances",
            json={"simulation_id": simulation["id"], "type": "Life", "coverage_amount": 500000,
                  "monthly_cost": 300, "start_date": "2024-01-01"},
        )
        assert insurance.status_code == 201, insurance.text
        insurance_id = insurance.json()["id"]

        bad_range = await api.put(f"/insurances/{insurance_id}", json={"end_date": "2023-01-01"})
        assert bad_range.status_code == 400

        listed_ins = await api.get(f"/simulations/{simulation['id']}/insurances")
        assert len(listed_ins.json()) == 1

        deleted = await api.delete(f"/allocations/{allocation_id}")
        assert deleted.status_code == 204
        assert (await api.get(f"/transactions/{tx_id}")).status_code == 404
        assert (await api.get(f"/simulations/{simulation['id']}/allocations")).json() == []

        assert (await api.delete(f"/insurances/{insurance_id}")).status_code == 204
        assert (await api.get(f"/insurances/{insurance_id}")).status_code == 404


async def test_versions_snapshot_current_state(planner_api):
    async with planner_api() as api:
        client = await _create_client(api)
        simulation = await _create_simulation(api, client["id"])
        await api.post(
            "/allocations",
            json={"simulation_id": simulation["id"], "type": "financial", "description": "Bonds",
                  "percentage": 100, "initial_value": 100000, "annual_return": 7, "allocation_date": "2024-01-01"},
        )

        first = await api.post(f"/simulations/{simulation['id']}/versions")
        second = await api.post(f"/simulations/{simulation['id']}/versions")
        assert first.status_code == 201
        assert first.json()["version_number"] == 1
        assert second.json()["version_number"] == 2

        snapshot = first.json()["snapshot"]
        assert snapshot["simulation"]["name"] == "Base plan"
        assert snapshot["allocations"][0]["initial_value"] == 100000
        assert snapshot["insurances"] == []

        listed = await api.get(f"/simulations/{simulation['id']}/versions")
        assert [v["version_number"] for v in listed.json()] == [1, 2]


async def test_deleting_client_removes_dependants(planner_api):
    async with planner_api() as api:
        client = await _create_client(api)
        simulation = await _create_simulation(api, client["id"])
        allocation = await api.post(
            "/allocations",
            json={"simulation_id": simulation["id"], "type": "financial", "description": "Cash",
                  "percentage": 100, "initial_value": 1000, "allocation_date": "2024-01-01"},
        )
        await api.post(
            "/transactions",
            json={"allocation_id": allocation.json()["id"], "type": "yield", "amount": 10,
                  "transaction_date": "2024-03-01"},
        )
        await api.post(f"/simulations/{simulation['id']}/versions")

        response = await api.delete(f"/clients/{client['id']}")
        assert response.status_code == 204
        assert (await api.get(f"/simulations/{simulation['id']}")).status_code == 404
        assert (await api.get(f"/allocations/{allocation.json()['id']}")).status_code == 404
        assert (await api.get(f"/clients/{client['id']}")).status_code == 404
