from sqlalchemy import Column, String, Integer, Text, DateTime, Numeric, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from datetime import datetime
import uuid


class Vendor(Base):
    __tablename__ = "vendors"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    vendor_name = Column(String(255), nullable=False)
    owner_name = Column(String(255), nullable=False)
    contact_number = Column(String(20), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    business_category = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    logo_url = Column(String(500), nullable=True)
    password_hash = Column(String(255), nullable=False)

    # Derived from ratings; only the rating aggregator writes these
    avg_rating = Column(Numeric(3, 2), nullable=False, default=0)
    total_reviews = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    products = relationship("Product", back_populates="vendor", cascade="all, delete-orphan", passive_deletes=True)
    ratings = relationship("Rating", back_populates="vendor", cascade="all, delete-orphan", passive_deletes=True)
    sessions = relationship("VendorSession", back_populates="vendor", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        Index("idx_vendors_created_at", "created_at"),
    )
