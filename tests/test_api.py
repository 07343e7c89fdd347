"""
HTTP-level tests for the asset, booking and stats endpoints.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from labbook.main import app


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_assets_uses_camel_case(client):
    response = client.get("/api/assets")
    assert response.status_code == 200
    assets = response.json()
    assert len(assets) == 6
    first = assets[0]
    assert first["assetId"] == "OSC-001"
    assert first["isAvailable"] is True
    assert first["calibrationStatus"] == "calibrated"
    assert first["maintenanceStatus"] is None


def test_get_asset_and_not_found(client):
    assert client.get("/api/assets/4").json()["maintenanceStatus"] == "maintenance"
    response = client.get("/api/assets/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Asset not found"}


def test_get_asset_by_code(client):
    assert client.get("/api/assets/code/DMM-003").json()["id"] == 2
    assert client.get("/api/assets/code/XYZ-999").status_code == 404


def test_availability_example_scenario(client, booking_payload):
    before = client.get("/api/assets/1/availability/2025-01-10").json()
    assert len(before["availableSlots"]) == 9
    assert before["bookedSlots"] == []

    created = client.post("/api/bookings", json=booking_payload)
    assert created.status_code == 201

    after = client.get("/api/assets/1/availability/2025-01-10").json()
    assert len(after["availableSlots"]) == 8
    assert "10:00" not in after["availableSlots"]
    assert after["bookedSlots"] == ["10:00"]


def test_availability_for_withdrawn_asset_and_missing_asset(client):
    body = client.get("/api/assets/4/availability/2025-01-10").json()
    assert body == {"availableSlots": [], "bookedSlots": []}
    assert client.get("/api/assets/999/availability/2025-01-10").status_code == 404


def test_create_booking_response(client, booking_payload):
    response = client.post("/api/bookings", json=booking_payload)
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["status"] == "pending"
    assert body["bookingDate"] == "2025-01-10"
    assert body["timeSlot"] == "10:00"
    assert "createdAt" in body


def test_second_booking_same_slot_conflicts(client, booking_payload):
    assert client.post("/api/bookings", json=booking_payload).status_code == 201
    response = client.post("/api/bookings", json=booking_payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Time slot is already booked"}


def test_booking_unavailable_asset(client, booking_payload):
    booking_payload["assetId"] = 4
    response = client.post("/api/bookings", json=booking_payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Asset is not available for booking"}


def test_booking_unknown_asset(client, booking_payload):
    booking_payload["assetId"] = 999
    response = client.post("/api/bookings", json=booking_payload)
    assert response.status_code == 404
    assert response.json() == {"message": "Asset not found"}


def test_short_purpose_fails_before_store(client, store, booking_payload):
    booking_payload["purpose"] = "too short"
    response = client.post("/api/bookings", json=booking_payload)
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation error"
    assert [e["field"] for e in body["errors"]] == ["purpose"]
    assert store.list_bookings() == []


def test_invalid_email_duration_and_slot(client, store, booking_payload):
    booking_payload.update({"userEmail": "not-an-email", "duration": 0, "timeSlot": "08:00"})
    response = client.post("/api/bookings", json=booking_payload)
    assert response.status_code == 400
    fields = {e["field"] for e in response.json()["errors"]}
    assert fields == {"userEmail", "duration", "timeSlot"}
    assert store.list_bookings() == []


def test_list_get_and_filter_bookings(client, booking_payload):
    client.post("/api/bookings", json=booking_payload)
    booking_payload.update({"bookingDate": "2025-01-11", "timeSlot": "16:30"})
    client.post("/api/bookings", json=booking_payload)

    assert len(client.get("/api/bookings").json()) == 2
    filtered = client.get("/api/bookings", params={"date": "2025-01-11"}).json()
    assert [b["timeSlot"] for b in filtered] == ["16:30"]
    assert client.get("/api/bookings/2").json()["bookingDate"] == "2025-01-11"
    missing = client.get("/api/bookings/99")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Booking not found"}


def test_patch_booking_status(client, booking_payload):
    client.post("/api/bookings", json=booking_payload)

    response = client.patch("/api/bookings/1", json={"status": "confirmed"})
    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    assert response.json()["bookingDate"] == "2025-01-10"

    assert client.patch("/api/bookings/1", json={"status": "archived"}).status_code == 400
    assert client.patch("/api/bookings/42", json={"status": "cancelled"}).status_code == 404


def test_asset_bookings_endpoint(client, booking_payload):
    client.post("/api/bookings", json=booking_payload)
    assert len(client.get("/api/assets/1/bookings").json()) == 1
    assert client.get("/api/assets/2/bookings").json() == []
    assert client.get("/api/assets/999/bookings").status_code == 404


def test_create_and_patch_asset(client):
    payload = {
        "assetId": "LCR-001",
        "name": "Keysight E4980AL LCR Meter",
        "location": "Lab C-305",
        "category": "LCR Meters",
        "calibrationStatus": "overdue",
        "lastCalibrated": "2023-05-01T00:00:00",
        "nextDue": "2024-05-01T00:00:00",
    }
    response = client.post("/api/assets", json=payload)
    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 7
    assert created["isAvailable"] is True
    assert created["description"] is None

    assert client.post("/api/assets", json=payload).status_code == 400

    patched = client.patch(
        "/api/assets/7",
        json={"isAvailable": False, "maintenanceStatus": "repair", "estimatedReturn": "2025-03-01T00:00:00"},
    ).json()
    assert patched["isAvailable"] is False
    assert patched["maintenanceStatus"] == "repair"
    assert patched["name"] == payload["name"]

    cleared = client.patch("/api/assets/7", json={"isAvailable": True, "maintenanceStatus": None}).json()
    assert cleared["maintenanceStatus"] is None
    assert client.patch("/api/assets/999", json={"name": "x"}).status_code == 404


def test_stats(client, booking_payload):
    assert client.get("/api/stats").json() == {"available": 5, "inUse": 0, "maintenance": 1, "myBookings": 0}

    client.post("/api/bookings", json=booking_payload)
    client.patch("/api/bookings/1", json={"status": "confirmed"})
    client.patch("/api/assets/2", json={"isAvailable": False})

    assert client.get("/api/stats").json() == {"available": 4, "inUse": 1, "maintenance": 1, "myBookings": 1}


def test_unexpected_error_is_generic(store, monkeypatch):
    from labbook.wiring.dependencies import get_storage

    def boom():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(store, "list_assets", boom)
    app.dependency_overrides[get_storage] = lambda: store
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/assets")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_patch_booking_cannot_double_book_slot(client, booking_payload):
    client.post("/api/bookings", json=booking_payload)
    booking_payload["timeSlot"] = "11:00"
    client.post("/api/bookings", json=booking_payload)

    response = client.patch("/api/bookings/2", json={"timeSlot": "10:00"})
    assert response.status_code == 400
    assert response.json() == {"message": "Time slot is already booked"}

    client.patch("/api/bookings/1", json={"status": "cancelled"})
    booking_payload["timeSlot"] = "10:00"
    assert client.post("/api/bookings", json=booking_payload).status_code == 201
    assert client.patch("/api/bookings/1", json={"status": "pending"}).status_code == 400

    booked = client.get("/api/assets/1/availability/2025-01-10").json()["bookedSlots"]
    assert booked == ["10:00", "11:00"]
