from ..extensions import db
from .base import RecordMixin


class Donation(RecordMixin, db.Model):
    __tablename__ = "donations"

    amount = db.Column(db.Float, nullable=False)
    donor_id = db.Column(
        db.String(36), db.ForeignKey("donors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    campaign_id = db.Column(
        db.String(36), db.ForeignKey("campaigns.id", ondelete="SET NULL"), nullable=True, index=True
    )

    donor = db.relationship("Donor", back_populates="donations")
    campaign = db.relationship("Campaign", back_populates="donations")

    def __repr__(self):
        return f"<Donation {self.id}: {self.amount} from {self.donor_id}>"

    def serialize(self, include_related=False):
        data = {
            "id": self.id,
            "amount": self.amount,
            "donorId": self.donor_id,
            "campaignId": self.campaign_id,
            **self.timestamps(),
        }
        if include_related:
            data["donor"] = self.donor.serialize() if self.donor else None
            data["campaign"] = self.campaign.serialize() if self.campaign else None
        return data
