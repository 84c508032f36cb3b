"""Tests API / API tests."""

import pytest

from companies_info.services.company_service import CompanyService


async def _seed(client):
    """Pays X, Acme (0 contact), Beta (2 contacts) / Country X, Acme (no contacts), Beta (2 contacts)."""
    country = (await client.post("/countries", json={"name": "X"})).json()
    acme = (await client.post("/companies", json={"name": "Acme", "country_id": country["id"]})).json()
    beta = (await client.post("/companies", json={"name": "Beta", "country_id": country["id"]})).json()
    for name in ("Alice", "Bob"):
        await client.post(
            "/contacts", json={"name": name, "company_id": beta["id"], "country_id": country["id"]}
        )
    return country, acme, beta


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"
    assert "X-Request-ID" in resp.headers


@pytest.mark.asyncio
async def test_create_company(client):
    resp = await client.post("/companies", json={"name": "Acme"})
    assert resp.status_code == 201
    data = resp.json()
    assert data["name"] == "Acme"
    assert data["country_id"] is None
    assert resp.headers["Location"] == f"/companies/{data['id']}"


@pytest.mark.asyncio
async def test_list_and_get(client):
    _, acme, _ = await _seed(client)
    resp = await client.get("/companies")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Acme", "Beta"]

    resp = await client.get(f"/companies/{acme['id']}")
    assert resp.status_code == 200
    assert resp.json() == acme

    assert (await client.get("/companies/999")).status_code == 404
    assert (await client.get("/countries/999")).status_code == 404
    assert (await client.get("/contacts/999")).status_code == 404


@pytest.mark.asyncio
async def test_contacts_list_is_minimal(client):
    await _seed(client)
    resp = await client.get("/contacts")
    assert resp.status_code == 200
    assert resp.json()[0].keys() == {"id", "name"}


@pytest.mark.asyncio
async def test_update_id_mismatch_is_bad_request(client):
    resp = await client.put("/companies/1", json={"id": 2, "name": "Other"})
    assert resp.status_code == 400
    resp = await client.put("/countries/1", json={"id": 2, "name": "Other"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_update(client):
    country, acme, _ = await _seed(client)
    resp = await client.put(
        f"/companies/{acme['id']}", json={"id": acme["id"], "name": "Acme Corp", "country_id": country["id"]}
    )
    assert resp.status_code == 204
    assert (await client.get(f"/companies/{acme['id']}")).json()["name"] == "Acme Corp"

    resp = await client.put("/countries/999", json={"id": 999, "name": "Nowhere"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete(client):
    _, acme, _ = await _seed(client)
    assert (await client.delete(f"/companies/{acme['id']}")).status_code == 204
    assert (await client.delete(f"/companies/{acme['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_country_cascades(client):
    country, acme, beta = await _seed(client)
    assert (await client.delete(f"/countries/{country['id']}")).status_code == 204
    assert (await client.get(f"/companies/{acme['id']}")).status_code == 404
    assert (await client.get(f"/companies/{beta['id']}")).status_code == 404
    assert (await client.get("/contacts")).json() == []


@pytest.mark.asyncio
async def test_company_statistics(client):
    country, _, _ = await _seed(client)
    resp = await client.get(f"/countries/{country['id']}/company-statistics")
    assert resp.status_code == 200
    stats = {s["company_name"]: s["contact_count"] for s in resp.json()}
    assert stats == {"Acme": 0, "Beta": 2}

    resp = await client.get("/countries/999/company-statistics")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "No companies found for this country."


@pytest.mark.asyncio
async def test_contacts_with_company_and_country(client):
    await _seed(client)
    resp = await client.get("/contacts/contacts-with-company-and-country")
    assert resp.status_code == 200
    first = resp.json()[0]
    assert first["company"]["name"] == "Beta"
    assert first["country"]["name"] == "X"


@pytest.mark.asyncio
async def test_filter_contacts(client):
    country, acme, beta = await _seed(client)
    resp = await client.get(f"/contacts/{country['id']}/{beta['id']}/filter-contacts")
    assert resp.status_code == 200
    assert {c["name"] for c in resp.json()} == {"Alice", "Bob"}

    resp = await client.get(f"/contacts/{country['id']}/{acme['id']}/filter-contacts")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "No contacts found for this country and company"


@pytest.mark.asyncio
async def test_persistence_failure_is_problem_response(client):
    resp = await client.post("/contacts", json={"name": "Ghost", "company_id": 41, "country_id": 42})
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/problem+json")
    body = resp.json()
    assert body["title"] == "An error occurred while processing your request."
    assert "FOREIGN KEY" not in resp.text


@pytest.mark.asyncio
async def test_update_contact(client):
    country, acme, _ = await _seed(client)
    alice = (await client.get("/contacts")).json()[0]
    body = {"id": alice["id"], "name": "Zed", "company_id": acme["id"], "country_id": country["id"]}

    resp = await client.put(f"/contacts/{alice['id']}", json=body)
    assert resp.status_code == 204
    assert (await client.get(f"/contacts/{alice['id']}")).json() == {"id": alice["id"], "name": "Zed"}


@pytest.mark.asyncio
async def test_update_contact_errors(client):
    country, acme, _ = await _seed(client)
    body = {"id": 2, "name": "Zed", "company_id": acme["id"], "country_id": country["id"]}
    resp = await client.put("/contacts/1", json=body)
    assert resp.status_code == 400

    body["id"] = 999
    resp = await client.put("/contacts/999", json=body)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Contact not found"


@pytest.mark.asyncio
async def test_delete_contact(client):
    await _seed(client)
    alice = (await client.get("/contacts")).json()[0]
    assert (await client.delete(f"/contacts/{alice['id']}")).status_code == 204
    assert (await client.delete(f"/contacts/{alice['id']}")).status_code == 404
    assert (await client.delete("/contacts/999")).status_code == 404


@pytest.mark.asyncio
async def test_ids_beyond_integer_range_are_not_found(client):
    country, _, beta = await _seed(client)
    huge = 99999999999999999999
    assert (await client.get(f"/contacts/{huge}")).status_code == 404
    assert (await client.get(f"/companies/{huge}")).status_code == 404
    assert (await client.delete(f"/countries/{huge}")).status_code == 404
    assert (await client.put(f"/companies/{huge}", json={"id": huge, "name": "Nope"})).status_code == 404
    assert (await client.get(f"/contacts/{huge}/{beta['id']}/filter-contacts")).status_code == 404
    assert (await client.get(f"/countries/{huge}/company-statistics")).status_code == 404


@pytest.mark.asyncio
async def test_unhandled_error_is_problem_response(server_error_client, monkeypatch):
    async def broken(self):
        raise RuntimeError("secret connection detail")

    monkeypatch.setattr(CompanyService, "list_companies", broken)
    resp = await server_error_client.get("/companies")
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/problem+json")
    assert resp.json() == {
        "type": "about:blank",
        "title": "An error occurred while processing your request.",
        "status": 500,
    }
    assert "secret" not in resp.text
