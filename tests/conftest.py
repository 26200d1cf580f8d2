import os

# Устанавливаем режим тестирования и дешевый bcrypt до загрузки пакета
os.environ["APP__MODE"] = "TEST"
os.environ["AUTH__BCRYPT_COST"] = "4"

import pytest
from accounts.auth import HashPassword
from accounts.services import UserService
from accounts.schemas import SUserRegister


@pytest.fixture(scope="session")
def hasher():
    return HashPassword(cost=4)


@pytest.fixture(scope="function")
def user_service(hasher):
    return UserService(hasher)


@pytest.fixture(scope="function")
def signup_data():
    return SUserRegister(
        email="test_user@example.com",
        password="password",
        password_conf="password",
        first_name="Test",
        last_name="User",
    )


@pytest.fixture(scope="function")
def test_account(user_service, signup_data):
    """Фикстура для создания тестовой учётной записи."""
    account = user_service.to_account(signup_data)
    account.id = 1
    return account
