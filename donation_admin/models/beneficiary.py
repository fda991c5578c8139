from ..extensions import db
from .base import RecordMixin


class Beneficiary(RecordMixin, db.Model):
    __tablename__ = "beneficiaries"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    contact_info = db.Column(db.String(255), nullable=True)

    def __repr__(self):
        return f"<Beneficiary {self.id}: {self.name}>"

    def serialize(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "contactInfo": self.contact_info,
            **self.timestamps(),
        }
