from accounts.auth import HashPassword
from accounts.models import Account
from accounts.schemas import (
    SUserRegister,
    SUserAuth,
    SUserUpdate,
    SUser,
    SOrganization,
    SUserWithOrganizations,
)
from accounts.services import UserService
from accounts.utils import (
    AccountException,
    SignupValidationException,
    InvalidEmailException,
    PasswordTooShortException,
    PasswordMismatchException,
    EmptyNamesException,
    IncorrectEmailOrPasswordException,
    setup_logging,
)
