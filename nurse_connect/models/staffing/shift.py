from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from nurse_connect.db.base import BaseModel
from nurse_connect.models.shared.enums import ShiftStatus

class Shift(BaseModel):
    __tablename__ = "shifts"

    # RESTRICT: a facility that still owns shifts cannot be removed
    facility_id = Column(Integer, ForeignKey("facilities.id", ondelete="RESTRICT"), nullable=False, index=True)
    unit = Column(String(100), nullable=False)
    shift_type = Column(String(50), nullable=False)
    start_time = Column(DateTime(timezone=True), nullable=False, index=True)
    end_time = Column(DateTime(timezone=True), nullable=False)
    hourly_rate = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default=ShiftStatus.OPEN.value, index=True)
    requirements = Column(JSON, nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    facility = relationship("Facility", back_populates="shifts")
    applications = relationship("Application", back_populates="shift", passive_deletes=True)

    def __repr__(self):
        return f"<Shift {self.id} {self.unit} {self.status}>"
