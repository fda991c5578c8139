from donation_admin.extensions import db

from .base import RecordMixin, commit
from .campaign import Campaign, CAMPAIGN_STATUSES
from .donor import Donor
from .beneficiary import Beneficiary
from .donation import Donation
from .expense import Expense, NO_CAMPAIGN

__all__ = [
    "db",
    "RecordMixin",
    "commit",
    "Campaign",
    "CAMPAIGN_STATUSES",
    "Donor",
    "Beneficiary",
    "Donation",
    "Expense",
    "NO_CAMPAIGN",
]
