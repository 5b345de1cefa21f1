from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from datetime import datetime
import uuid


class Rating(Base):
    """Client feedback for a vendor. Immutable once written."""

    __tablename__ = "ratings"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    vendor_id = Column(String, ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False)
    client_name = Column(String(255), nullable=False)
    project_name = Column(String(255), nullable=False)
    rating = Column(Integer, nullable=False)
    comments = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    vendor = relationship("Vendor", back_populates="ratings")

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_ratings_rating_range"),
        Index("idx_ratings_vendor_created", "vendor_id", "created_at"),
    )
