from external.database import db
from app.libs.models import BaseModel, ActiveMixin


class Package(BaseModel, ActiveMixin):
    """A fixed-scope service offering (logo design, website build, ...)"""

    __tablename__ = "packages"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(150), nullable=False)
    subtitle = db.Column(db.String(255))
    price = db.Column(db.String(50), nullable=False)  # display string, e.g. "From: 150.00 USD"
    image_url = db.Column(db.String(255))
    description = db.Column(db.Text, nullable=False)
    long_description = db.Column(db.Text)
    features = db.Column(db.JSON, default=list)

    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), index=True)
    category = db.relationship("Category", back_populates="packages")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    def __repr__(self):
        return f"<Package {self.title}>"
