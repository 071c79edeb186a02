"""
Tests for trip endpoints.
"""
from globaltrotters.models.trip import Trip, TripActivity
from globaltrotters.models.user import User
from globaltrotters.schemas.trip import TripActivityCreate
from globaltrotters.services import trip_service


def create_trip(client, headers, **fields):
    body = {"name": "Summer in Europe"}
    body.update(fields)
    response = client.post("/api/trips", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]["trip"]


def test_create_trip(client, auth_headers):
    """Test trip creation."""
    trip = create_trip(
        client, auth_headers,
        description="Three cities",
        startDate="2026-06-01",
        endDate="2026-06-14T00:00:00.000Z",
        budget=5000,
        destinations=["Paris", "Rome"],
        isPublic=True
    )
    assert trip["name"] == "Summer in Europe"
    assert trip["startDate"] == "2026-06-01"
    assert trip["endDate"] == "2026-06-14"
    assert trip["budget"] == 5000
    assert trip["destinations"] == ["Paris", "Rome"]
    assert trip["isPublic"] is True
    assert trip["status"] == "PLANNING"
    assert trip["user"]["name"] == "Traveller"
    assert trip["tripActivities"] == []


def test_create_trip_defaults(client, auth_headers):
    trip = create_trip(client, auth_headers)
    assert trip["isPublic"] is False
    assert trip["destinations"] == []
    assert trip["budget"] is None


def test_create_trip_missing_name(client, auth_headers, db_session):
    """Test that a trip without a name is rejected and nothing is stored."""
    response = client.post("/api/trips", json={"description": "No name"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == {"code": "VALIDATION_ERROR", "message": "name is required"}
    assert db_session.query(Trip).count() == 0

    response = client.post("/api/trips", json={"name": "   "}, headers=auth_headers)
    assert response.status_code == 400


def test_create_trip_invalid_date(client, auth_headers):
    response = client.post("/api/trips", json={"name": "Trip", "startDate": "next week"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_trip_requires_auth(client):
    response = client.post("/api/trips", json={"name": "Trip"})
    assert response.status_code == 401


def test_list_trips_pagination(client, auth_headers):
    """Test that page 2 of 15 trips with limit 10 has 5 trips."""
    for i in range(15):
        create_trip(client, auth_headers, name=f"Trip {i}")

    response = client.get("/api/trips", params={"page": 2, "limit": 10}, headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["trips"]) == 5
    assert data["pagination"] == {"page": 2, "limit": 10, "total": 15, "pages": 2}

    # Newest first
    first_page = client.get("/api/trips", headers=auth_headers).json()["data"]
    assert first_page["trips"][0]["name"] == "Trip 14"


def test_list_trips_only_own(client, auth_headers, other_headers):
    create_trip(client, auth_headers, name="Mine")
    create_trip(client, other_headers, name="Theirs", isPublic=True)

    data = client.get("/api/trips", headers=auth_headers).json()["data"]
    assert [t["name"] for t in data["trips"]] == ["Mine"]


def test_list_trips_filter_by_status(client, auth_headers):
    create_trip(client, auth_headers, name="Draft")
    create_trip(client, auth_headers, name="Booked", status="CONFIRMED")

    data = client.get("/api/trips", params={"status": "CONFIRMED"}, headers=auth_headers).json()["data"]
    assert [t["name"] for t in data["trips"]] == ["Booked"]


def test_list_trips_invalid_page(client, auth_headers):
    response = client.get("/api/trips", params={"page": 0}, headers=auth_headers)
    assert response.status_code == 400


def test_get_trip_visibility(client, auth_headers, other_headers):
    """Test that private trips of other users look missing, public ones are readable."""
    private = create_trip(client, other_headers, name="Secret")
    public = create_trip(client, other_headers, name="Open", isPublic=True)

    response = client.get(f"/api/trips/{private['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == {"code": "NOT_FOUND", "message": "Trip not found"}

    response = client.get(f"/api/trips/{public['id']}", headers=auth_headers)
    assert response.status_code == 200
    trip = response.json()["data"]["trip"]
    assert trip["user"]["name"] == "Other"
    assert trip["user"]["email"] == "other@example.com"

    response = client.get("/api/trips/9999", headers=auth_headers)
    assert response.status_code == 404


def test_public_trips(client, auth_headers, other_headers):
    create_trip(client, auth_headers, name="Private")
    create_trip(client, other_headers, name="Shared", isPublic=True)

    data = client.get("/api/trips/public", headers=auth_headers).json()["data"]
    assert [t["name"] for t in data["trips"]] == ["Shared"]
    assert data["trips"][0]["user"]["name"] == "Other"
    assert data["pagination"]["total"] == 1


def test_update_trip_partial(client, auth_headers):
    """Test that a partial update leaves unsent fields untouched."""
    trip = create_trip(client, auth_headers, description="Keep me", budget=1200, destinations=["Paris"])

    response = client.put(f"/api/trips/{trip['id']}", json={"status": "CONFIRMED"}, headers=auth_headers)
    assert response.status_code == 200
    updated = response.json()["data"]["trip"]
    assert updated["status"] == "CONFIRMED"
    assert updated["name"] == "Summer in Europe"
    assert updated["description"] == "Keep me"
    assert updated["budget"] == 1200
    assert updated["destinations"] == ["Paris"]


def test_update_trip_clears_nullable_field(client, auth_headers):
    trip = create_trip(client, auth_headers, description="Old", destinations=["Paris"])
    response = client.put(
        f"/api/trips/{trip['id']}",
        json={"description": None, "destinations": ["Rome", "Tokyo"]},
        headers=auth_headers
    )
    updated = response.json()["data"]["trip"]
    assert updated["description"] is None
    assert updated["destinations"] == ["Rome", "Tokyo"]


def test_update_trip_rejects_null_name(client, auth_headers):
    trip = create_trip(client, auth_headers)
    response = client.put(f"/api/trips/{trip['id']}", json={"name": None}, headers=auth_headers)
    assert response.status_code == 400


def test_update_trip_not_owner(client, auth_headers, other_headers):
    trip = create_trip(client, other_headers, isPublic=True)
    response = client.put(f"/api/trips/{trip['id']}", json={"name": "Hijacked"}, headers=auth_headers)
    assert response.status_code == 404


def test_delete_trip_cascades(client, auth_headers, louvre, db_session):
    """Test that deleting a trip removes its placements."""
    trip = create_trip(client, auth_headers)
    client.post(f"/api/trips/{trip['id']}/activities", json={"activityId": louvre.id}, headers=auth_headers)
    client.post(f"/api/shared/trips/{trip['id']}", json={}, headers=auth_headers)

    response = client.delete(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Trip deleted successfully"}

    assert db_session.query(Trip).count() == 0
    assert db_session.query(TripActivity).count() == 0
    assert client.get(f"/api/trips/{trip['id']}", headers=auth_headers).status_code == 404


def test_delete_trip_not_owner(client, auth_headers, other_headers):
    trip = create_trip(client, other_headers)
    assert client.delete(f"/api/trips/{trip['id']}", headers=auth_headers).status_code == 404
    assert client.get(f"/api/trips/{trip['id']}", headers=other_headers).status_code == 200


def test_add_activity(client, auth_headers, louvre):
    trip = create_trip(client, auth_headers)
    response = client.post(
        f"/api/trips/{trip['id']}/activities",
        json={"activityId": louvre.id, "date": "2026-06-02", "notes": "Book ahead"},
        headers=auth_headers
    )
    assert response.status_code == 201
    placement = response.json()["data"]["tripActivity"]
    assert placement["date"] == "2026-06-02"
    assert placement["notes"] == "Book ahead"
    assert placement["activity"]["name"] == "Louvre Museum"
    assert placement["activity"]["city"]["name"] == "Paris"


def test_add_activity_twice_upserts(client, auth_headers, louvre, db_session):
    """Test that re-adding an activity overwrites date and notes on the same row."""
    trip = create_trip(client, auth_headers)
    url = f"/api/trips/{trip['id']}/activities"
    first = client.post(url, json={"activityId": louvre.id, "date": "2026-06-02", "notes": "First"},
                        headers=auth_headers).json()["data"]["tripActivity"]
    second = client.post(url, json={"activityId": louvre.id, "date": "2026-06-03", "notes": "Second"},
                         headers=auth_headers).json()["data"]["tripActivity"]

    assert second["id"] == first["id"]
    assert second["date"] == "2026-06-03"
    assert second["notes"] == "Second"
    assert db_session.query(TripActivity).filter(TripActivity.trip_id == trip["id"]).count() == 1


def test_add_activity_unknown_activity(client, auth_headers):
    trip = create_trip(client, auth_headers)
    response = client.post(f"/api/trips/{trip['id']}/activities", json={"activityId": 999}, headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Activity not found"


def test_add_activity_missing_activity_id(client, auth_headers):
    trip = create_trip(client, auth_headers)
    response = client.post(f"/api/trips/{trip['id']}/activities", json={"notes": "?"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "activityId is required"


def test_add_activity_to_foreign_trip(client, auth_headers, other_headers, louvre):
    trip = create_trip(client, other_headers, isPublic=True)
    response = client.post(f"/api/trips/{trip['id']}/activities", json={"activityId": louvre.id},
                           headers=auth_headers)
    assert response.status_code == 404


def test_update_activity(client, auth_headers, louvre):
    trip = create_trip(client, auth_headers)
    client.post(f"/api/trips/{trip['id']}/activities", json={"activityId": louvre.id, "notes": "Keep"},
                headers=auth_headers)

    response = client.put(f"/api/trips/{trip['id']}/activities/{louvre.id}", json={"date": "2026-06-05"},
                          headers=auth_headers)
    assert response.status_code == 200
    placement = response.json()["data"]["tripActivity"]
    assert placement["date"] == "2026-06-05"
    assert placement["notes"] == "Keep"


def test_update_activity_not_on_trip(client, auth_headers, louvre):
    trip = create_trip(client, auth_headers)
    response = client.put(f"/api/trips/{trip['id']}/activities/{louvre.id}", json={"notes": "x"},
                          headers=auth_headers)
    assert response.status_code == 404


def test_remove_activity(client, auth_headers, louvre, cruise):
    trip = create_trip(client, auth_headers)
    for activity in (louvre, cruise):
        client.post(f"/api/trips/{trip['id']}/activities", json={"activityId": activity.id}, headers=auth_headers)

    response = client.delete(f"/api/trips/{trip['id']}/activities/{louvre.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Activity removed from trip successfully"

    remaining = client.get(f"/api/trips/{trip['id']}", headers=auth_headers).json()["data"]["trip"]
    assert [p["activityId"] for p in remaining["tripActivities"]] == [cruise.id]

    # Removing something that is not there still succeeds
    response = client.delete(f"/api/trips/{trip['id']}/activities/{louvre.id}", headers=auth_headers)
    assert response.status_code == 200


def test_add_activity_recovers_from_concurrent_insert(db_session, louvre, monkeypatch):
    """Test that a duplicate insert racing the lookup turns into an update."""
    user = User(email="race@example.com", name="Race", hashed_password="unused")
    db_session.add(user)
    db_session.flush()
    trip = Trip(user_id=user.id, name="Race trip", destinations=[])
    db_session.add(trip)
    db_session.flush()
    # Another request already stored the pair
    db_session.add(TripActivity(trip_id=trip.id, activity_id=louvre.id, notes="Inserted elsewhere"))
    db_session.commit()

    real_lookup = trip_service._find_placement
    lookups = []

    def miss_first_lookup(trip_id, activity_id, db):
        lookups.append(activity_id)
        if len(lookups) == 1:
            return None
        return real_lookup(trip_id, activity_id, db)

    monkeypatch.setattr(trip_service, "_find_placement", miss_first_lookup)

    placement = trip_service.add_activity(
        trip.id, user.id,
        TripActivityCreate(activity_id=louvre.id, date="2026-06-02", notes="Mine"),
        db_session
    )
    assert len(lookups) == 2
    assert placement.notes == "Mine"
    assert str(placement.date) == "2026-06-02"
    assert db_session.query(TripActivity).filter(TripActivity.trip_id == trip.id).count() == 1
