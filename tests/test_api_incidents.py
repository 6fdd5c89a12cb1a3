import re
from datetime import datetime
from incidentdesk.core.incidents import service
from conftest import INCIDENT_PAYLOAD


async def test_create_then_fetch(client):
    res = await client.post("/api/incidents", json=INCIDENT_PAYLOAD)
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["status"] == "Open"
    assert re.fullmatch(r"INC-\d{4}-\d{3}", data["reference_id"])
    assert data["tools_used"] == [] and data["evidence"] == [] and data["timeline"] == []
    assert data["assignee"] is None

    res = await client.get(f"/api/incidents/{data['reference_id']}")
    assert res.status_code == 200
    assert res.json()["data"] == data


async def test_create_with_client_reference(client, create_incident):
    data = await create_incident(referenceId="INC-2024-555", status="Investigating", assignee="A. Smith")
    assert data["reference_id"] == "INC-2024-555"
    assert data["status"] == "Investigating"
    assert data["assignee"] == "A. Smith"


async def test_duplicate_client_reference_is_storage_error(client, create_incident):
    await create_incident(referenceId="INC-2024-555")
    res = await client.post("/api/incidents", json={**INCIDENT_PAYLOAD, "referenceId": "INC-2024-555"})
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Failed to create incident"
    assert "details" in body


async def test_generated_reference_retries_on_collision(client, create_incident, monkeypatch):
    await create_incident(referenceId="INC-2024-100")
    ids = iter(["INC-2024-100", "INC-2024-101"])
    monkeypatch.setattr(service, "generate_reference_id", lambda: next(ids))
    data = await create_incident()
    assert data["reference_id"] == "INC-2024-101"


async def test_generated_reference_gives_up(client, create_incident, monkeypatch):
    await create_incident(referenceId="INC-2024-100")
    monkeypatch.setattr(service, "generate_reference_id", lambda: "INC-2024-100")
    res = await client.post("/api/incidents", json=INCIDENT_PAYLOAD)
    assert res.status_code == 500
    assert res.json()["error"] == "Failed to create incident"


async def test_validation_rejection_creates_nothing(client):
    res = await client.post("/api/incidents", json={**INCIDENT_PAYLOAD, "title": "ab"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid payload"
    assert "title" in body["details"]["fieldErrors"]

    res = await client.get("/api/incidents")
    assert res.json()["data"] == []


async def test_malformed_json_is_400(client):
    res = await client.post("/api/incidents", content=b"{not json", headers={"content-type": "application/json"})
    assert res.status_code == 400
    assert res.json()["details"]["formErrors"]


async def test_get_missing_is_404(client):
    res = await client.get("/api/incidents/INC-2024-999")
    assert res.status_code == 404
    assert res.json() == {"error": "Incident not found"}


async def test_patch_only_touches_supplied_fields(client, create_incident):
    before = await create_incident(severity="Critical")
    ref = before["reference_id"]
    res = await client.patch(f"/api/incidents/{ref}", json={"status": "Resolved"})
    assert res.status_code == 200
    after = res.json()["data"]
    assert after["status"] == "Resolved"
    for field in ("title", "type", "severity", "description", "reporter", "assignee", "created_at", "reference_id"):
        assert after[field] == before[field]
    assert datetime.fromisoformat(after["updated_at"]) >= datetime.fromisoformat(before["updated_at"])


async def test_patch_replaces_arrays_and_clears_assignee(client, create_incident):
    before = await create_incident(
        assignee="A. Smith",
        toolsUsed=[{"name": "Nmap", "description": "scan", "impact": "ports"}],
    )
    ref = before["reference_id"]
    timeline = [{
        "id": "t1", "timestamp": "2026-10-19T08:00:00Z", "action": "Isolated host",
        "description": "Pulled from VLAN", "user": "A. Smith", "type": "containment",
    }]
    res = await client.patch(f"/api/incidents/{ref}", json={
        "tools_used": [{"name": "Wireshark", "description": "pcap", "impact": "found beacon"}],
        "timeline": timeline,
        "assignee": None,
    })
    after = res.json()["data"]
    assert [t["name"] for t in after["tools_used"]] == ["Wireshark"]
    assert after["timeline"] == timeline
    assert after["assignee"] is None
    assert after["evidence"] == []


async def test_patch_cannot_change_reference_id(client, create_incident):
    before = await create_incident()
    ref = before["reference_id"]
    res = await client.patch(f"/api/incidents/{ref}", json={"reference_id": "INC-1999-123", "title": "Renamed"})
    assert res.status_code == 200
    assert res.json()["data"]["reference_id"] == ref
    assert res.json()["data"]["title"] == "Renamed"


async def test_patch_rejects_bad_enum_and_shapes(client, create_incident):
    ref = (await create_incident())["reference_id"]
    res = await client.patch(f"/api/incidents/{ref}", json={"status": "Done"})
    assert res.status_code == 400
    assert "status" in res.json()["details"]["fieldErrors"]
    res = await client.patch(f"/api/incidents/{ref}", json={"evidence": [{"anything": 1}]})
    assert res.status_code == 400


async def test_any_status_may_follow_any_other(client, create_incident):
    ref = (await create_incident())["reference_id"]
    for status in ("Closed", "Open", "Resolved", "Investigating"):
        res = await client.patch(f"/api/incidents/{ref}", json={"status": status})
        assert res.json()["data"]["status"] == status


async def test_patch_missing_is_404(client):
    res = await client.patch("/api/incidents/INC-2024-999", json={"status": "Closed"})
    assert res.status_code == 404


async def test_delete(client, create_incident):
    ref = (await create_incident())["reference_id"]
    res = await client.delete(f"/api/incidents/{ref}")
    assert res.json() == {"success": True}
    assert (await client.get(f"/api/incidents/{ref}")).status_code == 404


async def test_filter_conjunction(client, create_incident):
    await create_incident(severity="Low", status="Open")
    await create_incident(severity="Low", status="Resolved")
    match = await create_incident(severity="Critical", status="Open")
    await create_incident(severity="Critical", status="Resolved")

    res = await client.get("/api/incidents", params={"severity": "Critical", "status": "Open"})
    data = res.json()["data"]
    assert [i["reference_id"] for i in data] == [match["reference_id"]]

    res = await client.get("/api/incidents", params={"severity": "all", "status": "all"})
    assert len(res.json()["data"]) == 4


async def test_search_matches_reference_id_only(client, create_incident):
    await create_incident(referenceId="INC-2024-777", title="Malware on laptop", reporter="K. Lee")
    await create_incident(referenceId="INC-2025-888", title="Malware on server", reporter="K. Lee")
    res = await client.get("/api/incidents", params={"search": "INC-2024"})
    assert [i["reference_id"] for i in res.json()["data"]] == ["INC-2024-777"]


async def test_search_is_case_insensitive_over_title_and_reporter(client, create_incident):
    await create_incident(title="Credential stuffing", reporter="Blue Team")
    await create_incident(title="Port scan", reporter="red team")
    res = await client.get("/api/incidents", params={"search": "CREDENTIAL"})
    assert len(res.json()["data"]) == 1
    res = await client.get("/api/incidents", params={"search": "team"})
    assert len(res.json()["data"]) == 2


async def test_list_newest_first_with_limit(client, create_incident):
    created = [await create_incident(title=f"Incident number {n}") for n in range(3)]
    res = await client.get("/api/incidents", params={"limit": 2})
    data = res.json()["data"]
    assert [i["title"] for i in data] == [created[2]["title"], created[1]["title"]]


async def test_limit_must_be_positive(client):
    res = await client.get("/api/incidents", params={"limit": 0})
    assert res.status_code == 400
    assert "limit" in res.json()["details"]["fieldErrors"]


async def test_patch_accepts_camel_case_tools(client, create_incident):
    ref = (await create_incident())["reference_id"]
    res = await client.patch(f"/api/incidents/{ref}", json={
        "toolsUsed": [{"name": "Zeek", "description": "network monitor", "impact": "flagged DNS tunnel"}],
    })
    assert res.status_code == 200
    assert res.json()["data"]["tools_used"] == [
        {"name": "Zeek", "description": "network monitor", "impact": "flagged DNS tunnel"},
    ]


async def test_delete_unknown_reference_still_succeeds(client):
    res = await client.delete("/api/incidents/INC-2024-404")
    assert res.status_code == 200
    assert res.json() == {"success": True}


async def test_limit_has_upper_bound(client):
    for path in ("/api/incidents", "/api/logs", "/api/logs/export", "/api/chat"):
        res = await client.get(path, params={"limit": 10**20})
        assert res.status_code == 400, path
        assert "limit" in res.json()["details"]["fieldErrors"]
    res = await client.get("/api/incidents", params={"limit": 1000})
    assert res.status_code == 200


async def test_overlong_fields_rejected_before_storage(client):
    res = await client.post("/api/incidents", json={**INCIDENT_PAYLOAD, "title": "x" * 501, "reporter": "r" * 256})
    assert res.status_code == 400
    assert {"title", "reporter"} <= set(res.json()["details"]["fieldErrors"])
    assert (await client.get("/api/incidents")).json()["data"] == []
