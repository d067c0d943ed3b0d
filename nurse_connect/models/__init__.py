from nurse_connect.models.auth.user import User
from nurse_connect.models.organization.facility import Facility
from nurse_connect.models.staffing.shift import Shift
from nurse_connect.models.staffing.application import Application
