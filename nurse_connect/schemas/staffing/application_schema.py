from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from nurse_connect.models.shared.enums import ApplicationStatus


class ApplicationCreate(BaseModel):
    shift_id: int
    user_id: int
    notes: Optional[str] = None

class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus

class ApplicationResponse(BaseModel):
    id: int
    shift_id: int
    user_id: int
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ApplicationListItem(ApplicationResponse):
    """Application joined with the shift it targets"""
    unit: Optional[str] = None
    shift_start_time: Optional[datetime] = None
    facility_name: Optional[str] = None
