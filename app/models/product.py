from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from datetime import datetime
import uuid


class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    vendor_id = Column(String, ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    image_url = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    price_range = Column(String(100), nullable=True)  # free-text label, e.g. "₹500 - ₹2000"
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    vendor = relationship("Vendor", back_populates="products")

    __table_args__ = (
        Index("idx_products_vendor_created", "vendor_id", "created_at"),
    )
