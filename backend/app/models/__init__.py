from backend.app.models.user import User
from backend.app.models.profile import Profile
