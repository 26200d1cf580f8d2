# Базовый класс для исключений, которые связаны с учётными записями
class AccountException(Exception):
    detail = ""

    def __init__(self) -> None:
        super().__init__(self.detail)


# Ошибки валидации регистрации
class SignupValidationException(AccountException):
    detail = "invalid signup"

class InvalidEmailException(SignupValidationException):
    detail = "invalid email"

class PasswordTooShortException(SignupValidationException):
    detail = "password too short"

class PasswordMismatchException(SignupValidationException):
    detail = "password/confirmation mismatch"


# Ошибки обновления профиля
class EmptyNamesException(AccountException):
    detail = "names cannot both be empty"


# Исключения для аутентификации
class IncorrectEmailOrPasswordException(AccountException):
    detail = "incorrect email or password"
