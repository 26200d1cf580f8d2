from accounts.utils.exceptions import (
    AccountException,
    SignupValidationException,
    InvalidEmailException,
    PasswordTooShortException,
    PasswordMismatchException,
    EmptyNamesException,
    IncorrectEmailOrPasswordException,
)
from accounts.utils.logger import setup_logging
