import click

from .extensions import db
from .models import Beneficiary, Campaign, Donation, Donor, Expense


def seed_demo_data():
    """Insert one record of each kind, linked together. Returns the campaign."""
    campaign = Campaign(
        name="Winter Meals",
        description="Hot meals for families through the winter",
        target_amount=50000.0,
    )
    donor = Donor(name="Asha Rao", email="asha@example.org", phone="+91 98450 00000")
    db.session.add_all([campaign, donor])
    db.session.flush()

    db.session.add_all([
        Donation(amount=2500.0, donor_id=donor.id, campaign_id=campaign.id),
        Expense(description="Rice and lentils", amount=1800.0, category="Food", campaign_id=campaign.id),
        Beneficiary(name="Shanti Nagar shelter", contact_info="shelter@example.org"),
    ])
    db.session.commit()
    return campaign


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables (use `flask db upgrade` for managed schemas)."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed-demo")
    def seed_demo():
        """Load a small demo data set."""
        if Campaign.query.first() is not None:
            click.echo("Database already has campaigns; skipping seed.")
            return
        campaign = seed_demo_data()
        click.echo(f"Seeded demo data (campaign {campaign.id}).")
