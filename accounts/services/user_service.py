import logging
from datetime import date
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from accounts.auth.hash_password import HashPassword
from accounts.config import settings
from accounts.models import Account
from accounts.schemas import SUserRegister, SUserUpdate
from accounts.utils import (
    InvalidEmailException,
    PasswordTooShortException,
    PasswordMismatchException,
    IncorrectEmailOrPasswordException,
    AccountException,
)

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, hasher: Optional[HashPassword] = None):
        self.hasher = hasher or HashPassword()

    def validate_signup(self, signup: SUserRegister) -> None:
        """
        Проверить данные регистрации.

        Правила проверяются по порядку, возвращается первая ошибка.

        Args:
            signup: Данные регистрации

        Raises:
            InvalidEmailException: Если email не разбирается как адрес
            PasswordTooShortException: Если пароль короче минимальной длины
            PasswordMismatchException: Если пароль и подтверждение различаются
        """
        # Проверяется только синтаксис адреса, без правил доставляемости
        try:
            validate_email(
                signup.email,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True,
                allow_quoted_local=True,
                allow_domain_literal=True,
                allow_display_name=True,
            )
        except EmailNotValidError:
            raise InvalidEmailException

        # Длина считается в байтах UTF-8, а не в символах
        if len(signup.password.encode("utf-8")) < settings.auth.PASSWORD_MIN_LENGTH:
            raise PasswordTooShortException

        if signup.password != signup.password_conf:
            raise PasswordMismatchException

    def to_account(self, signup: SUserRegister) -> Account:
        """
        Создать учётную запись из данных регистрации.

        ID не назначается, это делает слой хранения.

        Args:
            signup: Данные регистрации

        Returns:
            Новый объект Account с хешем пароля

        Raises:
            SignupValidationException: Если данные не прошли проверку
            ValueError: Если bcrypt отклонил пароль (длиннее 72 байт)
        """
        try:
            self.validate_signup(signup)
        except AccountException as e:
            logger.warning(f"Signup rejected: {e.detail}")
            raise

        account = Account(
            email=signup.email,
            first_name=signup.first_name,
            last_name=signup.last_name,
            join_date=date.today().strftime(settings.app.JOIN_DATE_FORMAT),
        )
        self.set_password(account, signup.password)
        logger.info("Account created")
        return account

    def set_password(self, account: Account, password: str) -> None:
        """Захешировать пароль и сохранить хеш, старый хеш перезаписывается."""
        account.pass_hash = self.hasher.create_hash(password)
        logger.info(f"Password set for account {account.id} (cost {self.hasher.cost})")

    def authenticate(self, account: Optional[Account], password: str) -> Account:
        """
        Проверить пароль пользователя.

        Неизвестный пользователь и неверный пароль дают одну и ту же ошибку.

        Args:
            account: Найденная по email учётная запись или None
            password: Пароль для проверки

        Returns:
            Тот же объект Account при успешной проверке

        Raises:
            IncorrectEmailOrPasswordException: Если пароль не подходит
        """
        if not account or not self.hasher.verify_hash(password, account.pass_hash):
            logger.warning("Authentication failed")
            raise IncorrectEmailOrPasswordException

        return account

    def apply_updates(self, account: Account, updates: SUserUpdate) -> Account:
        try:
            account.apply_updates(updates)
        except AccountException as e:
            logger.warning(f"Profile update rejected for account {account.id}: {e.detail}")
            raise
        return account
