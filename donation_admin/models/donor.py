from ..extensions import db
from .base import RecordMixin


class Donor(RecordMixin, db.Model):
    __tablename__ = "donors"

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    address = db.Column(db.Text, nullable=True)

    donations = db.relationship(
        "Donation",
        back_populates="donor",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Donor {self.id}: {self.name}>"

    def serialize(self, counts=None):
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            **self.timestamps(),
        }
        if counts is not None:
            data["_count"] = counts
        return data
