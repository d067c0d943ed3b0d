from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from nurse_connect.db.base import BaseModel
from nurse_connect.models.shared.enums import UserRole

class User(BaseModel):
    """Worker account; facilities authenticate separately."""
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    role = Column(String(50), nullable=False, default=UserRole.NURSE.value)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    applications = relationship("Application", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.email}>"
