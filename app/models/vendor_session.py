# app/models/vendor_session.py
from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.models.base import Base
from datetime import datetime


class VendorSession(Base):
    __tablename__ = "vendor_sessions"

    sid = Column(String(64), primary_key=True)
    vendor_id = Column(String, ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    expires_at = Column(DateTime, nullable=False)

    vendor = relationship("Vendor", back_populates="sessions")

    __table_args__ = (
        Index("idx_vendor_sessions_expires", "expires_at"),
    )
