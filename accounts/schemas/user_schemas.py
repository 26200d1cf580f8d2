from typing import Optional, TYPE_CHECKING

from pydantic import Field

from accounts.schemas.base_schema import SBase

if TYPE_CHECKING:
    from accounts.models import Account


# Отсутствующие во входных данных поля считаются пустыми строками,
# проверку содержимого делает UserService.validate_signup


class SUserRegister(SBase):
    email: str = Field("", description="Электронная почта")
    password: str = Field("", description="Пароль, не короче 6 знаков")
    password_conf: str = Field("", description="Подтверждение пароля")
    first_name: str = Field("", description="Имя")
    last_name: str = Field("", description="Фамилия")


class SUserAuth(SBase):
    email: str = Field("", description="Электронная почта")
    password: str = Field("", description="Пароль")


class SUserUpdate(SBase):
    first_name: str = Field("", description="Имя")
    last_name: str = Field("", description="Фамилия")


class SUser(SBase):
    """Публичное представление учётной записи: без email и хеша пароля."""
    id: Optional[int] = None
    first_name: str
    last_name: str
    join_date: str

    @classmethod
    def from_account(cls, account: "Account") -> "SUser":
        return cls(
            id=account.id,
            first_name=account.first_name,
            last_name=account.last_name,
            join_date=account.join_date,
        )
