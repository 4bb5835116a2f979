from datetime import datetime
from external.database import db


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class ActiveMixin:
    """Soft visibility flag shared by every catalog record"""

    is_active = db.Column(db.Boolean, default=True, nullable=False, index=True)
    featured = db.Column(db.Boolean, default=False, nullable=False)


class BaseModel(db.Model, TimestampMixin):
    __abstract__ = True

    def update(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)

    def to_dict(self):
        data = {c.name: getattr(self, c.name) for c in self.__table__.columns}
        # Keep records JSON friendly for the search payload
        for key in ("created_at", "updated_at"):
            if isinstance(data.get(key), datetime):
                data[key] = data[key].isoformat()
        return data
