import mongomock
import pytest
from fastapi.testclient import TestClient

from context import AppContext, current_context
from main import app


@pytest.fixture
def database():
    return mongomock.MongoClient()["travelbuddy_test"]


@pytest.fixture
def ctx(database):
    return AppContext(database=database)


@pytest.fixture
def client(ctx):
    app.dependency_overrides[current_context] = lambda: ctx
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def rider_payload():
    return {
        "fullName": "Asha Rao",
        "phone": "9876543210",
        "email": "a@x.com",
        "pwd": "pw1",
        "gender": "female",
    }


def make_trip(client, **overrides):
    body = {
        "ownerEmail": "a@x.com",
        "fromLocation": "Pune",
        "toLocation": "Mumbai",
        "travelDate": "2026-11-02",
        "travelTime": "08:30",
    }
    body.update(overrides)
    res = client.post("/createTrip", json=body)
    assert res.status_code == 200
    assert res.json() == {"serverMsg": "Trip created", "flag": True}
