from enum import Enum


class ShiftStatus(str, Enum):
    OPEN = "open"
    FILLED = "filled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"

class UserRole(str, Enum):
    NURSE = "nurse"
    ADMIN = "admin"
