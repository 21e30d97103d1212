from __future__ import annotations

import json


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_staff_crud_and_cascade(client):
    resp = client.post("/api/staff", json={"name": "Dana"})
    assert resp.status_code == 201
    dana = resp.get_json()

    resp = client.post("/api/logs", json={"staffId": dana["id"], "eventTypeId": "2"})
    assert resp.status_code == 201
    assert resp.get_json()["value"] == -1

    assert client.get(f"/api/logs?staff={dana['id']}").get_json()["count"] == 1

    assert client.delete(f"/api/staff/{dana['id']}").get_json() == {"success": True}
    assert client.get(f"/api/logs?staff={dana['id']}").get_json()["count"] == 0
    assert [s["name"] for s in client.get("/api/staff").get_json()] == ["Alice Johnson", "Bob Smith", "Charlie Davis"]


def test_staff_validation_and_rename(client):
    resp = client.post("/api/staff", json={"name": "  "})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    assert client.patch("/api/staff/2", json={"name": "Robert"}).get_json()["name"] == "Robert"
    assert client.patch("/api/staff/nope", json={"name": "X"}).status_code == 404


def test_delete_event_type_keeps_logs_as_unknown(client):
    assert client.delete("/api/event-types/1").status_code == 200

    logs = client.get("/api/logs").get_json()["logs"]

    assert len(logs) == 2
    bob = next(row for row in logs if row["staffId"] == "2")
    assert bob["eventTypeName"] == "Unknown Type"
    assert bob["color"] is None


def test_event_type_create(client):
    resp = client.post("/api/event-types", json={"name": "Duty", "defaultValue": "-0.5", "color": "#22c55e"})

    assert resp.status_code == 201
    assert resp.get_json()["defaultValue"] == -0.5
    assert client.post("/api/event-types", json={"name": ""}).status_code == 400
    assert len(client.get("/api/event-types").get_json()) == 5


def test_log_validation(client):
    resp = client.post("/api/logs", json={"staffId": "1"})

    assert resp.status_code == 400


def test_form_defaults(client):
    assert client.get("/api/logs/form-defaults").get_json() == {
        "date": "2025-03-14",
        "academicYear": "2024-25",
        "academicYearOptions": ["2024-25", "2025-26", "2026-27", "2027-28"],
    }


def test_dashboard_totals_and_filter(client):
    body = client.get("/api/dashboard").get_json()

    assert [(t["name"], t["totalScore"], t["logCount"]) for t in body["totals"]] == [
        ("Alice Johnson", -1, 1),
        ("Bob Smith", 1, 1),
        ("Charlie Davis", 0, 0),
    ]
    assert body["count"] == 2
    assert body["filtered"] is False

    filtered = client.get("/api/dashboard?staff=3").get_json()
    assert filtered["filtered"] is True
    assert [t["name"] for t in filtered["totals"]] == ["Charlie Davis"]
    assert filtered["logs"] == []


def test_dashboard_exports(client):
    resp = client.get("/api/dashboard/export.pdf")
    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.data.startswith(b"%PDF")
    assert "StaffTrack_AllData_2025-03-14.pdf" in resp.headers["Content-Disposition"]

    resp = client.get("/api/dashboard/export.csv?staff=1")
    assert "StaffTrack_Filtered_Alice_Johnson_2025-03-14.csv" in resp.headers["Content-Disposition"]
    assert "Covered for Dave" in resp.data.decode("utf-8-sig")

    assert client.get("/api/dashboard/export.doc").status_code == 404


def test_storage_years_export_and_delete(client):
    client.post("/api/logs", json={"staffId": "3", "eventTypeId": "3", "academicYear": "2023-24"})

    years = client.get("/api/storage/years").get_json()["years"]
    assert years == [{"year": "2024-25", "count": 2}, {"year": "2023-24", "count": 1}]

    resp = client.get("/api/storage/years/2023-24/export.xlsx")
    assert resp.status_code == 200
    assert resp.data.startswith(b"PK")

    assert client.delete("/api/storage/years/2024-25").get_json() == {"success": True, "removed": 2}
    assert client.delete("/api/storage/years/2024-25").get_json()["removed"] == 0

    assert client.delete("/api/storage/logs").get_json() == {"success": True, "removed": 1}
    assert client.get("/api/storage/years").get_json()["years"] == []
    assert len(client.get("/api/staff").get_json()) == 3


def test_delete_log(client):
    log_id = client.get("/api/logs").get_json()["logs"][0]["id"]

    client.delete(f"/api/logs/{log_id}")

    assert [row["id"] for row in client.get("/api/logs").get_json()["logs"]] == ["102"]


def test_summary_without_key(client):
    resp = client.post("/api/staff/1/summary")

    assert resp.get_json()["summary"].startswith("API Key not found")
    assert client.post("/api/staff/nope/summary").status_code == 404


def test_mutations_are_persisted(client, backend):
    client.post("/api/staff", json={"name": "Dana"})

    stored = json.loads(backend.get("stafftrack_data_v5"))

    assert stored["staff"][-1]["name"] == "Dana"


def test_non_object_body_is_rejected(client):
    for method, url in (
        ("post", "/api/staff"),
        ("patch", "/api/staff/1"),
        ("post", "/api/event-types"),
        ("post", "/api/logs"),
    ):
        resp = getattr(client, method)(url, json=["Dana"])
        assert resp.status_code == 400
        assert resp.get_json() == {"success": False, "message": "Request body must be a JSON object"}
