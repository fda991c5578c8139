from ..extensions import db
from .base import RecordMixin

CAMPAIGN_STATUSES = ("ACTIVE", "COMPLETED", "PAUSED")


class Campaign(RecordMixin, db.Model):
    __tablename__ = "campaigns"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    target_amount = db.Column(db.Float, nullable=True)
    status = db.Column(
        db.Enum(*CAMPAIGN_STATUSES, name="campaign_status"),
        nullable=False,
        default="ACTIVE",
        index=True,
    )

    # Deleting a campaign only detaches its donations/expenses (ON DELETE SET NULL)
    donations = db.relationship("Donation", back_populates="campaign", passive_deletes=True)
    expenses = db.relationship("Expense", back_populates="campaign", passive_deletes=True)

    def __repr__(self):
        return f"<Campaign {self.id}: {self.name} ({self.status})>"

    def summary(self):
        return {"id": self.id, "name": self.name, "status": self.status}

    def serialize(self, counts=None):
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "targetAmount": self.target_amount,
            "status": self.status,
            **self.timestamps(),
        }
        if counts is not None:
            data["_count"] = counts
        return data
