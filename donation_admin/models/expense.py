from ..extensions import db
from .base import RecordMixin

NO_CAMPAIGN = "N/A"


class Expense(RecordMixin, db.Model):
    __tablename__ = "expenses"

    description = db.Column(db.Text, nullable=False)
    amount = db.Column(db.Float, nullable=False)
    category = db.Column(db.String(120), nullable=False)
    campaign_id = db.Column(
        db.String(36), db.ForeignKey("campaigns.id", ondelete="SET NULL"), nullable=True, index=True
    )

    campaign = db.relationship("Campaign", back_populates="expenses")

    def __repr__(self):
        return f"<Expense {self.id}: {self.description} {self.amount}>"

    @property
    def campaign_name(self):
        return self.campaign.name if self.campaign else NO_CAMPAIGN

    def apply(self, description, amount, category, campaign_id=None):
        """Overwrite every editable field; id and created_at are left alone."""
        self.description = description
        self.amount = amount
        self.category = category
        self.campaign_id = campaign_id

    def serialize(self, include_related=False):
        data = {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "category": self.category,
            "campaignId": self.campaign_id,
            **self.timestamps(),
        }
        if include_related:
            data["campaign"] = self.campaign.serialize() if self.campaign else None
        return data
