from fastapi import APIRouter
from nurse_connect.api.v1.endpoints.auth import facility_auth, login
from nurse_connect.api.v1.endpoints.organization import facilities
from nurse_connect.api.v1.endpoints.staffing import applications, shifts

api_router = APIRouter()

# Authentication routes
api_router.include_router(login.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(facility_auth.router, prefix="/facility-auth", tags=["Facility Authentication"])

# Organization routes
api_router.include_router(facilities.router, prefix="/facilities", tags=["Facilities"])

# Staffing routes
api_router.include_router(shifts.router, prefix="/shifts", tags=["Shifts"])
api_router.include_router(applications.router, prefix="/applications", tags=["Applications"])
