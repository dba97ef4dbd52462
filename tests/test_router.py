#!/usr/bin/env python3
"""
Collection endpoint tests, with the Mongo store swapped for an in-memory one.
"""

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.router import get_store
from fake_store import FakeDocumentStore
from main import app
from mongo import registry

OID = ObjectId("65a1b2c3d4e5f60718293a4b")


@pytest.fixture
def client():
    store = FakeDocumentStore([
        {"_id": OID, "name": "ann", "password": "x", "ssn": "1", "createdAt": 1, "owner": {"name": "o"}},
        {"_id": 2, "name": "ben", "createdAt": 2},
        {"_id": 3, "name": "cat", "createdAt": 3},
    ])
    app.dependency_overrides[get_store] = lambda: store
    registry.register_collection("people", fields={"ssn": {"private": True}})
    yield TestClient(app)
    app.dependency_overrides.clear()
    registry.clear_registry()


class TestListDocuments:

    def test_paginates(self, client):
        resp = client.get("/api/collections/people", params={"page": 1, "limit": 2, "sortBy": "date"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["totalResults"] == 3
        assert body["totalPages"] == 2
        assert body["limit"] == 2
        assert [d["name"] for d in body["results"]] == ["ann", "ben"]
        assert body["results"][0]["id"] == str(OID)

    def test_get_all(self, client):
        body = client.get("/api/collections/people", params={"page": -1}).json()
        assert body["page"] == 1
        assert body["totalPages"] == 1
        assert body["limit"] == 3

    def test_bad_page_values_fall_back(self, client):
        body = client.get("/api/collections/people", params={"page": "x", "limit": "0"}).json()
        assert body["page"] == 1
        assert body["limit"] == 10

    def test_invalid_sort_is_400(self, client):
        resp = client.get("/api/collections/people", params={"sortBy": ":desc"})
        assert resp.status_code == 400

    def test_extra_params_filter_by_equality(self, client):
        body = client.get("/api/collections/people", params={"name": "ben", "limit": 5}).json()
        assert body["totalResults"] == 1
        assert [d["name"] for d in body["results"]] == ["ben"]

        body = client.get("/api/collections/people", params={"name": "nobody"}).json()
        assert body["totalResults"] == 0
        assert body["results"] == []


class TestGetDocument:

    def test_serializes_with_privacy_and_alias(self, client):
        resp = client.get(f"/api/collections/people/{OID}", params={"alias": "owner.name::ownerName"})
        assert resp.status_code == 200
        assert resp.json() == {"id": str(OID), "name": "ann", "owner": {}, "ownerName": "o"}

    def test_timestamps_opt_in(self, client):
        body = client.get(f"/api/collections/people/{OID}", params={"includeTimeStamps": True}).json()
        assert body["createdAt"] == 1

    def test_not_found(self, client):
        resp = client.get("/api/collections/people/nope")
        assert resp.status_code == 404


def test_health_reports_connection_state():
    resp = TestClient(app).get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
