from donation_admin.extensions import db
from donation_admin.models import Beneficiary, Campaign, Donation, Donor, Expense

MODELS = (Campaign, Donor, Donation, Expense, Beneficiary)


def _counts(app):
    with app.app_context():
        return {model.__name__: model.query.count() for model in MODELS}


def test_init_db_creates_tables(app):
    with app.app_context():
        db.drop_all()

    result = app.test_cli_runner().invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "Database tables created." in result.output
    assert set(_counts(app).values()) == {0}


def test_seed_demo_runs_once(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-demo"])
    assert result.exit_code == 0
    assert "Seeded demo data" in result.output
    assert _counts(app) == {name: 1 for name in ("Campaign", "Donor", "Donation", "Expense", "Beneficiary")}

    result = runner.invoke(args=["seed-demo"])
    assert result.exit_code == 0
    assert "skipping seed" in result.output
    assert set(_counts(app).values()) == {1}


def test_seeded_records_are_linked(app):
    app.test_cli_runner().invoke(args=["seed-demo"])
    with app.app_context():
        campaign = Campaign.query.one()
        donation = Donation.query.one()
        assert donation.campaign_id == campaign.id
        assert donation.donor_id == Donor.query.one().id
        assert Expense.query.one().campaign_id == campaign.id
