"""
Tests for the itinerary, budget and calendar views of a trip.
"""
from globaltrotters.models.city import Activity, City


def _trip(client, headers, **fields):
    body = {"name": "Europe"}
    body.update(fields)
    return client.post("/api/trips", json=body, headers=headers).json()["data"]["trip"]


def _place(client, headers, trip_id, activity_id, date=None):
    client.post(f"/api/trips/{trip_id}/activities", json={"activityId": activity_id, "date": date}, headers=headers)


def test_budget(client, auth_headers, louvre, cruise):
    trip = _trip(client, auth_headers, budget=1000, startDate="2026-06-01", endDate="2026-06-10")
    _place(client, auth_headers, trip["id"], louvre.id)
    _place(client, auth_headers, trip["id"], cruise.id)

    response = client.get(f"/api/trips/{trip['id']}/budget", headers=auth_headers)
    assert response.status_code == 200
    budget = response.json()["data"]["budget"]
    assert budget["totalBudget"] == 1000
    assert [(a["name"], a["percentage"], a["amount"]) for a in budget["allocations"]] == [
        ("Accommodation", 35, 350),
        ("Transportation", 25, 250),
        ("Food & Dining", 20, 200),
        ("Activities", 15, 150),
        ("Other", 5, 50),
    ]
    assert budget["plannedActivitiesCost"] == 40
    assert budget["activityCostsByCategory"] == {"Culture": 22, "Sightseeing": 18}
    assert budget["remainingBudget"] == 960
    assert budget["overBudget"] is False
    assert budget["tripDays"] == 10
    assert budget["dailyBudget"] == 100


def test_budget_without_amount(client, auth_headers, louvre):
    trip = _trip(client, auth_headers)
    _place(client, auth_headers, trip["id"], louvre.id)

    budget = client.get(f"/api/trips/{trip['id']}/budget", headers=auth_headers).json()["data"]["budget"]
    assert budget["totalBudget"] == 0
    assert all(a["amount"] == 0 for a in budget["allocations"])
    assert budget["overBudget"] is True
    assert budget["tripDays"] is None
    assert budget["dailyBudget"] is None


def test_calendar(client, auth_headers, louvre, cruise):
    trip = _trip(client, auth_headers, startDate="2026-06-01", endDate="2026-06-03")
    _place(client, auth_headers, trip["id"], louvre.id, "2026-06-02")
    _place(client, auth_headers, trip["id"], cruise.id)

    calendar = client.get(f"/api/trips/{trip['id']}/calendar", headers=auth_headers).json()["data"]["calendar"]
    assert [d["date"] for d in calendar["days"]] == ["2026-06-01", "2026-06-02", "2026-06-03"]
    assert calendar["days"][0]["activities"] == []
    assert calendar["days"][1]["activities"][0]["activity"]["name"] == "Louvre Museum"
    assert all(d["inTripRange"] for d in calendar["days"])
    assert [p["activityId"] for p in calendar["unscheduled"]] == [cruise.id]


def test_calendar_activity_outside_range(client, auth_headers, louvre):
    trip = _trip(client, auth_headers, startDate="2026-06-01", endDate="2026-06-02")
    _place(client, auth_headers, trip["id"], louvre.id, "2026-07-01")

    calendar = client.get(f"/api/trips/{trip['id']}/calendar", headers=auth_headers).json()["data"]["calendar"]
    assert calendar["days"][-1]["date"] == "2026-07-01"
    assert calendar["days"][-1]["inTripRange"] is False


def test_itinerary(client, auth_headers, db_session, louvre):
    rome = City(name="Rome", country="Italy", popularity=94)
    tokyo = City(name="Tokyo", country="Japan", popularity=96)
    db_session.add_all([rome, tokyo])
    db_session.flush()
    temple = Activity(name="Senso-ji Temple", category="Culture", estimated_cost=0, city_id=tokyo.id)
    db_session.add(temple)
    db_session.commit()

    trip = _trip(client, auth_headers, destinations=["paris", "Rome", "Atlantis"])
    _place(client, auth_headers, trip["id"], louvre.id, "2026-06-02")
    _place(client, auth_headers, trip["id"], temple.id, "2026-06-20")

    response = client.get(f"/api/trips/{trip['id']}/itinerary", headers=auth_headers)
    assert response.status_code == 200
    stops = response.json()["data"]["itinerary"]["stops"]

    assert [(s["order"], s["cityName"], s["listed"]) for s in stops] == [
        (1, "paris", True),
        (2, "Rome", True),
        (3, "Atlantis", True),
        (4, "Tokyo", False),
    ]
    assert stops[0]["country"] == "France"
    assert stops[0]["startDate"] == "2026-06-02"
    assert [p["activity"]["name"] for p in stops[0]["activities"]] == ["Louvre Museum"]
    assert stops[1]["activities"] == []
    assert stops[2]["cityId"] is None
    assert stops[3]["activities"][0]["activity"]["name"] == "Senso-ji Temple"


def test_views_of_public_trip(client, auth_headers, other_headers):
    public = _trip(client, other_headers, isPublic=True)
    private = _trip(client, other_headers)
    for view in ("itinerary", "budget", "calendar"):
        assert client.get(f"/api/trips/{public['id']}/{view}", headers=auth_headers).status_code == 200
        assert client.get(f"/api/trips/{private['id']}/{view}", headers=auth_headers).status_code == 404
