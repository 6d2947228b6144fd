from pymongo.errors import PyMongoError

from conftest import make_trip
from repository import Repository


def test_create_trip_applies_defaults(client, ctx):
    make_trip(client, estimatedFare=0, maxCompanions=0)

    [trip] = ctx.trips.find()
    assert trip["genderRestriction"] == "any"
    assert trip["estimatedFare"] == 0
    assert trip["maxCompanions"] == 3
    assert trip["ownerEmail"] == "a@x.com"


def test_create_trip_keeps_given_values(client, ctx):
    make_trip(client, genderRestriction="female", estimatedFare=450, maxCompanions=2)

    [trip] = ctx.trips.find()
    assert trip["genderRestriction"] == "female"
    assert trip["estimatedFare"] == 450
    assert trip["maxCompanions"] == 2


def test_create_trip_with_unknown_restriction_fails(client, ctx):
    res = client.post("/createTrip", json={
        "ownerEmail": "a@x.com",
        "fromLocation": "Pune",
        "toLocation": "Mumbai",
        "travelDate": "2026-11-02",
        "travelTime": "08:30",
        "genderRestriction": "robots",
    })
    assert res.status_code == 500
    assert res.json() == {"serverMsg": "Trip creation error", "flag": False}
    assert len(ctx.trips.find()) == 0


def test_search_without_filters_returns_everything(client):
    make_trip(client)
    make_trip(client, genderRestriction="male", toLocation="Goa")
    make_trip(client, genderRestriction="female", fromLocation="Nashik")

    res = client.get("/searchTrips")
    assert res.status_code == 200
    trips = res.json()
    assert len(trips) == 3
    assert all(isinstance(t["_id"], str) for t in trips)


def test_search_by_gender(client):
    make_trip(client)
    make_trip(client, genderRestriction="male")
    make_trip(client, genderRestriction="female")

    female = client.get("/searchTrips", params={"gender": "female"}).json()
    assert sorted(t["genderRestriction"] for t in female) == ["any", "female"]

    male = client.get("/searchTrips", params={"gender": "male"}).json()
    assert sorted(t["genderRestriction"] for t in male) == ["any", "male"]

    assert len(client.get("/searchTrips", params={"gender": "any"}).json()) == 3


def test_search_by_locations(client):
    make_trip(client)
    make_trip(client, toLocation="Goa")
    make_trip(client, fromLocation="Nashik", toLocation="Goa")

    res = client.get("/searchTrips", params={"fromLocation": "Pune"}).json()
    assert len(res) == 2

    res = client.get("/searchTrips", params={"fromLocation": "Pune", "toLocation": "Goa"}).json()
    assert len(res) == 1
    assert res[0]["fromLocation"] == "Pune"
    assert res[0]["toLocation"] == "Goa"

    # exact match only
    assert client.get("/searchTrips", params={"fromLocation": "pune"}).json() == []


def test_create_trip_store_failure(client, monkeypatch):
    def boom(self, data):
        raise PyMongoError("not primary")

    monkeypatch.setattr(Repository, "insert", boom)
    res = client.post("/createTrip", json={
        "ownerEmail": "a@x.com",
        "fromLocation": "Pune",
        "toLocation": "Mumbai",
        "travelDate": "2026-11-02",
        "travelTime": "08:30",
    })
    assert res.status_code == 500
    assert res.json() == {"serverMsg": "Trip creation error", "flag": False}


def test_search_store_failure(client, monkeypatch):
    def boom(self, filter_dict=None):
        raise PyMongoError("cursor killed")

    monkeypatch.setattr(Repository, "find", boom)
    res = client.get("/searchTrips", params={"fromLocation": "Pune"})
    assert res.status_code == 500
    assert res.json() == {"serverMsg": "Search trips error"}
