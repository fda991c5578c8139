from collections import defaultdict

from ..extensions import db
from ..models import Donation, Expense


def _month(ts):
    return ts.strftime("%Y-%m")


def monthly_totals():
    """Donation and expense sums per calendar month, oldest month first.

    Grouping happens in Python so the same code runs on SQLite and Postgres.
    """
    buckets = defaultdict(lambda: {"donations": 0.0, "expenses": 0.0})
    for created_at, amount in db.session.query(Donation.created_at, Donation.amount):
        buckets[_month(created_at)]["donations"] += amount
    for created_at, amount in db.session.query(Expense.created_at, Expense.amount):
        buckets[_month(created_at)]["expenses"] += amount
    return [{"month": month, **buckets[month]} for month in sorted(buckets)]
