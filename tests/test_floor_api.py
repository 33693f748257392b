import pytest


@pytest.fixture
def table(client):
    response = client.post("/api/tables", json={"name": "T1", "capacity": 4, "location": "Patio"})
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_tables_crud(client, table):
    client.post("/api/tables", json={"name": "A2"})
    assert [t["name"] for t in client.get("/api/tables").json()] == ["A2", "T1"]

    response = client.patch(f"/api/tables/{table['id']}", json={"status": "reserved", "notes": "Anniversary"})
    assert response.status_code == 200
    assert response.json()["status"] == "reserved"
    assert response.json()["notes"] == "Anniversary"

    assert client.delete(f"/api/tables/{table['id']}").status_code == 204
    assert client.get(f"/api/tables/{table['id']}").status_code == 404


def test_table_capacity_is_validated(client):
    assert client.post("/api/tables", json={"name": "Huge", "capacity": 40}).status_code == 400


def test_seating_marks_table_occupied_until_cleared(client, table, api_customer):
    response = client.post(
        "/api/table-sessions",
        json={"tableId": table["id"], "customerId": api_customer["id"], "partySize": 3},
    )
    assert response.status_code == 201
    session = response.json()
    assert session["status"] == "seated"
    assert session["endedAt"] is None

    seated = client.get(f"/api/tables/{table['id']}").json()
    assert seated["status"] == "occupied"
    assert seated["currentCustomerId"] == api_customer["id"]

    again = client.post("/api/table-sessions", json={"tableId": table["id"]})
    assert again.status_code == 409

    assert [s["id"] for s in client.get("/api/table-sessions", params={"active": True}).json()] == [session["id"]]

    cleared = client.patch(f"/api/table-sessions/{session['id']}", json={"status": "cleared"})
    assert cleared.status_code == 200
    assert cleared.json()["endedAt"] is not None

    freed = client.get(f"/api/tables/{table['id']}").json()
    assert freed["status"] == "available"
    assert freed["currentCustomerId"] is None
    assert client.get("/api/table-sessions", params={"active": True}).json() == []
    assert len(client.get("/api/table-sessions").json()) == 1


def test_seating_unknown_table_is_404(client):
    assert client.post("/api/table-sessions", json={"tableId": 42}).status_code == 404
    assert client.patch("/api/table-sessions/42", json={"status": "cleared"}).status_code == 404


def test_tiers(client):
    client.post(
        "/api/tiers",
        json={"name": "Gold", "requirement": "Spend $500+", "threshold": 500, "benefits": ["Priority Seating"]},
    )
    response = client.post("/api/tiers", json={"name": "Silver", "requirement": "Join", "threshold": 0})
    assert response.status_code == 201
    silver = response.json()
    assert silver["benefits"] == []

    assert [t["name"] for t in client.get("/api/tiers").json()] == ["Silver", "Gold"]

    updated = client.patch(f"/api/tiers/{silver['id']}", json={"benefits": ["5% Cashback"]})
    assert updated.json()["benefits"] == ["5% Cashback"]
    assert client.patch("/api/tiers/99", json={"name": "Bronze"}).status_code == 404


def test_feedback_stats(client, api_customer):
    for rating, channel in [(5, "in-app"), (4, "google"), (2, "in-app"), (5, "in-app")]:
        response = client.post(
            "/api/feedback",
            json={"customerId": api_customer["id"], "rating": rating, "channel": channel},
        )
        assert response.status_code == 201

    stats = client.get("/api/feedback/stats").json()
    assert stats["totalReviews"] == 4
    assert stats["avgRating"] == pytest.approx(4.0)
    assert stats["positivePercent"] == 75
    assert stats["byChannel"] == [{"channel": "google", "count": 1}, {"channel": "in-app", "count": 3}]
    assert stats["byRating"] == [
        {"rating": 2, "count": 1},
        {"rating": 4, "count": 1},
        {"rating": 5, "count": 2},
    ]
    assert len(client.get("/api/feedback").json()) == 4


def test_feedback_stats_when_empty(client):
    stats = client.get("/api/feedback/stats").json()
    assert stats["totalReviews"] == 0
    assert stats["positivePercent"] == 0
    assert stats["byChannel"] == []


def test_feedback_rating_range(client):
    assert client.post("/api/feedback", json={"rating": 6}).status_code == 400


def test_dashboard_stats(client):
    client.post("/api/customers", json={"name": "Sofia Rodriguez", "email": "s@example.com", "visits": 4, "spend": 300})
    customer = client.post("/api/customers", json={"name": "David Kim", "email": "d@example.com", "spend": "50.25"}).json()
    client.post("/api/activities", json={"customerId": customer["id"], "type": "visit", "amount": 20})
    client.post("/api/activities", json={"customerId": customer["id"], "type": "reward", "rewardUsed": "Free Drink"})

    stats = client.get("/api/dashboard/stats").json()
    assert stats["totalRevenue"] == pytest.approx(370.25)
    assert stats["activeMembers"] == 2
    assert stats["loyaltyVisits"] == 5
    assert stats["rewardsRedeemed"] == 1


def _seat(client, table_id: int, **extra):
    return client.post("/api/table-sessions", json={"tableId": table_id, **extra})


def test_clearing_a_finished_session_leaves_the_next_party_seated(client, table):
    first = _seat(client, table["id"]).json()
    client.patch(f"/api/table-sessions/{first['id']}", json={"status": "cleared"})
    first_ended = client.get("/api/table-sessions").json()[0]["endedAt"]
    second = _seat(client, table["id"], partySize=5).json()

    again = client.patch(f"/api/table-sessions/{first['id']}", json={"status": "cleared"})
    assert again.status_code == 200
    assert again.json()["endedAt"] == first_ended

    assert client.get(f"/api/tables/{table['id']}").json()["status"] == "occupied"
    assert _seat(client, table["id"]).status_code == 409
    assert [s["id"] for s in client.get("/api/table-sessions", params={"active": True}).json()] == [second["id"]]


def test_cleared_session_cannot_be_reopened(client, table):
    session = _seat(client, table["id"]).json()
    client.patch(f"/api/table-sessions/{session['id']}", json={"status": "cleared"})

    response = client.patch(f"/api/table-sessions/{session['id']}", json={"status": "seated"})
    assert response.status_code == 409
    assert client.get(f"/api/tables/{table['id']}").json()["status"] == "available"


def test_seated_session_blocks_seating_even_if_table_was_marked_available(client, table):
    _seat(client, table["id"])
    client.patch(f"/api/tables/{table['id']}", json={"status": "available"})

    assert _seat(client, table["id"]).status_code == 409


def test_occupied_table_cannot_be_deleted(client, table):
    session = _seat(client, table["id"]).json()
    assert client.delete(f"/api/tables/{table['id']}").status_code == 409

    client.patch(f"/api/table-sessions/{session['id']}", json={"status": "cleared"})
    assert client.delete(f"/api/tables/{table['id']}").status_code == 204
    assert client.get("/api/table-sessions").json() == []


def test_unknown_customer_references_are_404(client, table):
    assert _seat(client, table["id"], customerId=999).status_code == 404
    assert client.get(f"/api/tables/{table['id']}").json()["status"] == "available"
    assert client.post("/api/feedback", json={"customerId": 999, "rating": 5}).status_code == 404
    assert client.patch(f"/api/tables/{table['id']}", json={"currentCustomerId": 999}).status_code == 404
    assert client.post("/api/tables", json={"name": "B1", "currentCustomerId": 999}).status_code == 404
