"""Dashboard aggregation.

The four dashboard reads do not depend on each other, so they run on a small
thread pool. Each worker pushes its own application context, which gives it a
private SQLAlchemy session; results are turned into plain values before the
context (and its session) is torn down.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from flask import current_app
from sqlalchemy import func
from sqlalchemy.orm import joinedload

from ..errors import StatsUnavailable
from ..extensions import db
from ..models import Campaign, Donation, Expense

logger = logging.getLogger(__name__)

RECENT_DONATIONS = 5


def total_donations():
    return float(db.session.query(func.coalesce(func.sum(Donation.amount), 0)).scalar())


def total_expenses():
    return float(db.session.query(func.coalesce(func.sum(Expense.amount), 0)).scalar())


def active_campaigns():
    return db.session.query(func.count(Campaign.id)).filter(Campaign.status == "ACTIVE").scalar() or 0


def recent_donations(limit=RECENT_DONATIONS):
    rows = (
        Donation.query.options(joinedload(Donation.donor), joinedload(Donation.campaign))
        .order_by(Donation.created_at.desc())
        .limit(limit)
        .all()
    )
    return [d.serialize(include_related=True) for d in rows]


QUERIES = {
    "totalDonations": total_donations,
    "totalExpenses": total_expenses,
    "activeCampaigns": active_campaigns,
    "recentDonors": recent_donations,
}


def _run_in_context(app, query):
    with app.app_context():
        return query()


def get_stats():
    """Run every dashboard query concurrently; any failure fails the whole call."""
    app = current_app._get_current_object()
    workers = max(1, min(app.config.get("STATS_MAX_WORKERS", 4), len(QUERIES)))

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="stats") as pool:
        futures = {key: pool.submit(_run_in_context, app, QUERIES[key]) for key in QUERIES}
        try:
            return {key: future.result() for key, future in futures.items()}
        except Exception as exc:
            logger.warning("Dashboard query failed: %s", exc)
            for future in futures.values():
                future.cancel()
            raise StatsUnavailable() from exc
