from accounts.services.user_service import UserService
