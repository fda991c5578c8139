from donation_admin.extensions import db
from donation_admin.models import Expense

FOOD = {"description": "Food", "amount": 500, "category": "Food"}


def test_create_then_list_returns_the_record(client, auth_headers):
    resp = client.post("/api/expenses", json=FOOD, headers=auth_headers)
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["id"]
    assert created["createdAt"] and created["updatedAt"]
    assert (created["description"], created["amount"], created["category"]) == ("Food", 500, "Food")
    assert created["campaignId"] is None

    listed = client.get("/api/expenses", headers=auth_headers).get_json()
    assert [e["id"] for e in listed] == [created["id"]]
    assert listed[0]["campaign"] is None


def test_expense_lists_its_campaign(client, auth_headers, make):
    campaign = make("campaigns", {"name": "Winter Meals"})
    make("expenses", dict(FOOD, campaignId=campaign["id"]))

    listed = client.get("/api/expenses", headers=auth_headers).get_json()
    assert listed[0]["campaignId"] == campaign["id"]
    assert listed[0]["campaign"]["name"] == "Winter Meals"


def test_non_positive_amount_persists_nothing(app, client, auth_headers):
    for amount in (0, -10):
        resp = client.post("/api/expenses", json=dict(FOOD, amount=amount), headers=auth_headers)
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["error"] == "Invalid expense data"
        assert body["details"][0]["path"] == ["amount"]
    with app.app_context():
        assert Expense.query.count() == 0


def test_unknown_campaign_is_a_store_failure(app, client, auth_headers):
    resp = client.post("/api/expenses", json=dict(FOOD, campaignId="missing"), headers=auth_headers)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to create expense"}
    with app.app_context():
        assert Expense.query.count() == 0


def test_update_overwrites_fields_but_keeps_id_and_created_at(client, auth_headers, make):
    campaign = make("campaigns", {"name": "Clinic"})
    original = make("expenses", dict(FOOD, campaignId=campaign["id"]))

    resp = client.put(
        f"/api/expenses/{original['id']}",
        json={"description": "Medicine", "amount": 120.5, "category": "Medical"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    updated = resp.get_json()
    assert updated["id"] == original["id"]
    assert updated["createdAt"] == original["createdAt"]
    assert updated["updatedAt"] >= original["updatedAt"]
    assert (updated["description"], updated["amount"], updated["category"]) == ("Medicine", 120.5, "Medical")
    # a full-record update without campaignId detaches the campaign
    assert updated["campaignId"] is None


def test_update_validates_input(client, auth_headers, make):
    original = make("expenses", FOOD)
    resp = client.put(f"/api/expenses/{original['id']}", json={"amount": -1}, headers=auth_headers)
    assert resp.status_code == 400
    listed = client.get("/api/expenses", headers=auth_headers).get_json()
    assert listed[0]["amount"] == 500


def test_update_unknown_id_is_404(client, auth_headers):
    resp = client.put("/api/expenses/does-not-exist", json=FOOD, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Expense not found"}


def test_delete_removes_the_record(app, client, auth_headers, make):
    keep = make("expenses", FOOD)
    gone = make("expenses", dict(FOOD, description="Transport"))

    resp = client.delete(f"/api/expenses/{gone['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["id"] == gone["id"]

    listed = client.get("/api/expenses", headers=auth_headers).get_json()
    assert [e["id"] for e in listed] == [keep["id"]]
    with app.app_context():
        assert db.session.get(Expense, gone["id"]) is None


def test_delete_unknown_id_is_404(client, auth_headers):
    resp = client.delete("/api/expenses/does-not-exist", headers=auth_headers)
    assert resp.status_code == 404


def test_other_collections_do_not_expose_update_or_delete(client, auth_headers, make):
    campaign = make("campaigns", {"name": "Winter"})
    assert client.delete(f"/api/campaigns/{campaign['id']}", headers=auth_headers).status_code == 404
    assert client.put("/api/donors", json={}, headers=auth_headers).status_code == 405
