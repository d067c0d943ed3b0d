from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from nurse_connect.db.base import BaseModel
from nurse_connect.models.shared.enums import ApplicationStatus

class Application(BaseModel):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("shift_id", "user_id", name="uq_applications_shift_user"),
    )

    shift_id = Column(Integer, ForeignKey("shifts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value)
    notes = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    shift = relationship("Shift", back_populates="applications")
    user = relationship("User", back_populates="applications")
