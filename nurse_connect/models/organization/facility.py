from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from nurse_connect.db.base import BaseModel

class Facility(BaseModel):
    __tablename__ = "facilities"

    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip_code = Column(String(20), nullable=True)
    contact_name = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    contact_email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    shifts = relationship("Shift", back_populates="facility", passive_deletes="all")

    def __repr__(self):
        return f"<Facility {self.name}>"
