from .authentication_service import AuthenticationService
from .user_management_service import UserManagementService
from .user_profile_service import UserProfileService

__all__ = ["AuthenticationService", "UserManagementService", "UserProfileService"]
