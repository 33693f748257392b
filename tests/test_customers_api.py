from decimal import Decimal


def test_create_customer_derives_avatar(client):
    response = client.post(
        "/api/customers",
        json={"name": "sofia rodriguez", "email": "sofia.r@example.com", "tier": "Platinum", "visits": 3},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["avatar"] == "SR"
    assert body["tier"] == "Platinum"
    assert body["visits"] == 3
    assert body["lastVisit"] is None

    assert client.get(f"/api/customers/{body['id']}").json()["email"] == "sofia.r@example.com"


def test_customers_are_listed_newest_first(client, api_customer):
    second = client.post("/api/customers", json={"name": "Emily Watson", "email": "emily.w@example.com"}).json()
    assert [c["id"] for c in client.get("/api/customers").json()] == [second["id"], api_customer["id"]]


def test_duplicate_email_is_409(client, api_customer):
    response = client.post("/api/customers", json={"name": "Someone Else", "email": api_customer["email"]})
    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}


def test_invalid_customer_body_is_400(client):
    response = client.post("/api/customers", json={"name": "", "email": "not-an-email"})
    assert response.status_code == 400
    locations = {tuple(error["loc"]) for error in response.json()["error"]}
    assert ("body", "name") in locations
    assert ("body", "email") in locations


def test_update_customer(client, api_customer):
    response = client.patch(
        f"/api/customers/{api_customer['id']}",
        json={"segment": "Regular", "phone": "+1 555 0100"},
    )
    assert response.status_code == 200
    assert response.json()["segment"] == "Regular"
    assert response.json()["phone"] == "+1 555 0100"
    assert response.json()["name"] == "James Chen"

    response = client.patch(f"/api/customers/{api_customer['id']}", json={"phone": None})
    assert response.json()["phone"] is None

    assert client.patch("/api/customers/999", json={"segment": "VIP"}).status_code == 404


def test_update_to_taken_email_is_409(client, api_customer):
    other = client.post("/api/customers", json={"name": "David Kim", "email": "david.k@example.com"}).json()
    response = client.patch(f"/api/customers/{other['id']}", json={"email": api_customer["email"]})
    assert response.status_code == 409


def test_delete_customer(client, api_customer):
    client.post("/api/activities", json={"customerId": api_customer["id"], "type": "signup"})

    assert client.delete(f"/api/customers/{api_customer['id']}").status_code == 204
    assert client.get(f"/api/customers/{api_customer['id']}").status_code == 404
    assert client.delete(f"/api/customers/{api_customer['id']}").status_code == 404


def test_customer_with_wallet_cannot_be_deleted(client, api_customer):
    client.post("/api/wallets", json={"customerId": api_customer["id"], "balance": 0})

    response = client.delete(f"/api/customers/{api_customer['id']}")
    assert response.status_code == 409
    assert client.get(f"/api/customers/{api_customer['id']}").status_code == 200


def test_visit_activity_updates_customer(client, api_customer):
    response = client.post(
        "/api/activities",
        json={"customerId": api_customer["id"], "type": "visit", "amount": "120.50", "rewardUsed": "Free Dessert"},
    )
    assert response.status_code == 201
    assert response.json()["rewardUsed"] == "Free Dessert"

    customer = client.get(f"/api/customers/{api_customer['id']}").json()
    assert customer["visits"] == 1
    assert Decimal(str(customer["spend"])) == Decimal("120.50")
    assert customer["lastVisit"] is not None


def test_reward_activity_leaves_visits_alone(client, api_customer):
    client.post("/api/activities", json={"customerId": api_customer["id"], "type": "reward", "rewardUsed": "Birthday"})

    customer = client.get(f"/api/customers/{api_customer['id']}").json()
    assert customer["visits"] == 0
    assert [a["type"] for a in client.get(f"/api/customers/{api_customer['id']}/activities").json()] == ["reward"]


def test_activity_feed_is_limited_and_newest_first(client, api_customer):
    for _ in range(12):
        client.post("/api/activities", json={"customerId": api_customer["id"], "type": "signup"})

    feed = client.get("/api/activities").json()
    assert len(feed) == 10
    assert feed[0]["id"] > feed[-1]["id"]
    assert len(client.get("/api/activities", params={"limit": 3}).json()) == 3
    assert client.get("/api/activities", params={"limit": 0}).status_code == 400


def test_activity_for_unknown_customer_is_404(client):
    response = client.post("/api/activities", json={"customerId": 999, "type": "visit", "amount": 10})
    assert response.status_code == 404


def test_unknown_activity_type_is_400(client, api_customer):
    response = client.post("/api/activities", json={"customerId": api_customer["id"], "type": "refund"})
    assert response.status_code == 400


def test_deleting_customer_detaches_feedback_and_seating(client, api_customer):
    table = client.post("/api/tables", json={"name": "T9"}).json()
    client.post("/api/table-sessions", json={"tableId": table["id"], "customerId": api_customer["id"]})
    client.post("/api/feedback", json={"customerId": api_customer["id"], "rating": 5, "comment": "Lovely"})

    assert client.delete(f"/api/customers/{api_customer['id']}").status_code == 204

    feedback = client.get("/api/feedback").json()
    assert [(f["customerId"], f["comment"]) for f in feedback] == [(None, "Lovely")]
    assert client.get("/api/table-sessions").json()[0]["customerId"] is None
    seated = client.get(f"/api/tables/{table['id']}").json()
    assert seated["status"] == "occupied"
    assert seated["currentCustomerId"] is None
