from datetime import datetime, timedelta

from donation_admin.extensions import db
from donation_admin.models import Campaign, Donation, Donor, Expense
from donation_admin.services import stats


def _stats(client, auth_headers):
    resp = client.get("/api/dashboard/stats", headers=auth_headers)
    assert resp.status_code == 200
    return resp.get_json()


def test_empty_store_gives_zero_totals(client, auth_headers):
    body = _stats(client, auth_headers)
    assert body == {"totalDonations": 0, "totalExpenses": 0, "activeCampaigns": 0, "recentDonors": []}


def test_totals_and_active_campaign_count(client, auth_headers, make):
    donor = make("donors", {"name": "Asha"})
    make("campaigns", {"name": "A"})
    make("campaigns", {"name": "B", "status": "ACTIVE"})
    make("campaigns", {"name": "C", "status": "PAUSED"})
    make("campaigns", {"name": "D", "status": "COMPLETED"})
    for amount in (100, 250.5, 49.5):
        make("donations", {"amount": amount, "donorId": donor["id"]})
    for amount in (20, 30):
        make("expenses", {"description": "x", "amount": amount, "category": "Misc"})

    body = _stats(client, auth_headers)
    assert body["totalDonations"] == 400
    assert body["totalExpenses"] == 50
    assert body["activeCampaigns"] == 2


def test_recent_donors_are_the_five_newest(app, client, auth_headers):
    base = datetime(2025, 3, 1)
    with app.app_context():
        donor = Donor(name="Asha")
        campaign = Campaign(name="Winter")
        db.session.add_all([donor, campaign])
        db.session.flush()
        for i in range(7):
            db.session.add(Donation(
                amount=i + 1,
                donor_id=donor.id,
                campaign_id=campaign.id if i % 2 else None,
                created_at=base + timedelta(hours=i),
            ))
        db.session.commit()

    recent = _stats(client, auth_headers)["recentDonors"]
    assert [d["amount"] for d in recent] == [7, 6, 5, 4, 3]
    assert all(d["donor"]["name"] == "Asha" for d in recent)
    assert recent[0]["campaign"] is None
    assert recent[1]["campaign"]["name"] == "Winter"


def test_recent_donors_shorter_than_five(client, auth_headers, make):
    donor = make("donors", {"name": "Asha"})
    make("donations", {"amount": 5, "donorId": donor["id"]})
    make("donations", {"amount": 6, "donorId": donor["id"]})
    assert len(_stats(client, auth_headers)["recentDonors"]) == 2


def test_any_failing_query_fails_the_whole_call(client, auth_headers, monkeypatch):
    def broken():
        raise RuntimeError("db went away")

    monkeypatch.setitem(stats.QUERIES, "activeCampaigns", broken)
    resp = client.get("/api/dashboard/stats", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to fetch dashboard statistics"}


def test_failing_query_is_logged(client, auth_headers, monkeypatch, caplog):
    def broken():
        raise RuntimeError("db went away")

    monkeypatch.setitem(stats.QUERIES, "totalExpenses", broken)
    with caplog.at_level("WARNING", logger="donation_admin.services.stats"):
        assert client.get("/api/dashboard/stats", headers=auth_headers).status_code == 500
    assert "db went away" in caplog.text


def test_stats_run_on_worker_threads(app, client, auth_headers, monkeypatch):
    import threading

    seen = []
    original = stats.QUERIES["totalDonations"]

    def spy():
        seen.append(threading.current_thread().name)
        return original()

    monkeypatch.setitem(stats.QUERIES, "totalDonations", spy)
    _stats(client, auth_headers)
    assert seen and seen[0].startswith("stats")


def test_stats_require_token(client):
    assert client.get("/api/dashboard/stats").status_code == 401


def test_monthly_analytics(app, client, auth_headers):
    with app.app_context():
        donor = Donor(name="Asha")
        db.session.add(donor)
        db.session.flush()
        db.session.add_all([
            Donation(amount=100, donor_id=donor.id, created_at=datetime(2025, 1, 5)),
            Donation(amount=50, donor_id=donor.id, created_at=datetime(2025, 1, 20)),
            Donation(amount=10, donor_id=donor.id, created_at=datetime(2025, 3, 1)),
            Expense(description="Rice", amount=30, category="Food", created_at=datetime(2025, 2, 14)),
        ])
        db.session.commit()

    resp = client.get("/api/analytics/monthly", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json() == [
        {"month": "2025-01", "donations": 150, "expenses": 0},
        {"month": "2025-02", "donations": 0, "expenses": 30},
        {"month": "2025-03", "donations": 10, "expenses": 0},
    ]
