from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, validator


class FacilityBase(BaseModel):
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_email: EmailStr

class FacilityRegister(FacilityBase):
    password: str

    @validator('name')
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('Facility name is required')
        return v.strip()

    @validator('password')
    def validate_password(cls, v):
        if not v:
            raise ValueError('Password is required')
        return v

class FacilityResponse(FacilityBase):
    """Public view of a facility; never carries the password hash"""
    id: int
    contact_email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class FacilityAuthResponse(BaseModel):
    facility: FacilityResponse
    token: str
