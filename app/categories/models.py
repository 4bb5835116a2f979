from external.database import db
from app.libs.models import BaseModel, ActiveMixin


class Category(BaseModel, ActiveMixin):
    """
    Service category shared by packages and plugins.

    Categories form a two-level hierarchy: top-level groups such as
    "Design Services" with sub-categories such as "Logo Design". Both levels
    are searchable on their own.
    """
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), unique=True, nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text)
    parent_id = db.Column(db.Integer, db.ForeignKey("categories.id"))

    # Relationships
    parent = db.relationship("Category", remote_side=[id], back_populates="children")
    children = db.relationship("Category", back_populates="parent")
    packages = db.relationship("Package", back_populates="category")
    plugins = db.relationship("Plugin", back_populates="category")

    @property
    def has_subcategories(self):
        return any(child.is_active for child in self.children)

    def __repr__(self):
        return f"<Category {self.name}>"
