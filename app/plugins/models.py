from external.database import db
from app.libs.models import BaseModel, ActiveMixin


class Plugin(BaseModel, ActiveMixin):
    """Downloadable add-on plugin sold alongside the service packages"""

    __tablename__ = "plugins"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    slug = db.Column(db.String(170), unique=True, nullable=False)
    short_description = db.Column(db.String(255))
    description = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(100))
    version = db.Column(db.String(20), default="1.0.0")
    price = db.Column(db.String(50))
    is_premium = db.Column(db.Boolean, default=False, nullable=False)
    downloads = db.Column(db.Integer, default=0, nullable=False)
    tags = db.Column(db.JSON, default=list)

    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), index=True)
    category = db.relationship("Category", back_populates="plugins")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    def __repr__(self):
        return f"<Plugin {self.name}>"
