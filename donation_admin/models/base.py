import uuid
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from ..errors import NotFound, PersistenceError
from ..extensions import db


def new_id():
    return str(uuid.uuid4())


def iso(value):
    return value.isoformat(timespec="milliseconds") + "Z" if value else None


class RecordMixin:
    """Generated id, timestamps and the create/find helpers shared by every table."""

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def timestamps(self):
        return {"createdAt": iso(self.created_at), "updatedAt": iso(self.updated_at)}

    @classmethod
    def create(cls, failure_message="Failed to create record", **fields):
        record = cls(**fields)
        db.session.add(record)
        commit(failure_message)
        return record

    @classmethod
    def newest_first(cls, *options):
        query = cls.query
        if options:
            query = query.options(*options)
        return query.order_by(cls.created_at.desc()).all()

    @classmethod
    def get_or_raise(cls, record_id, message=None):
        record = db.session.get(cls, record_id)
        if record is None:
            raise NotFound(message or f"{cls.__name__} not found")
        return record


def commit(failure_message):
    """Commit the session; on a store failure roll back and raise PersistenceError."""
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise PersistenceError(failure_message) from exc
