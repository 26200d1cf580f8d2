from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from accounts.utils import EmptyNamesException

if TYPE_CHECKING:
    from accounts.schemas import SUserUpdate


@dataclass
class Account:
    """Учётная запись пользователя.

    id назначает слой хранения, поэтому до сохранения он равен None.
    email и pass_hash наружу не сериализуются (см. SUser).
    """
    email: str
    first_name: str = ""
    last_name: str = ""
    join_date: str = ""
    pass_hash: Optional[bytes] = field(default=None, repr=False)
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        if not self.first_name and not self.last_name:
            return ""
        if not self.first_name:
            return self.last_name
        if not self.last_name:
            return self.first_name
        return f"{self.first_name} {self.last_name}"

    def apply_updates(self, updates: "SUserUpdate") -> None:
        """
        Применить изменения профиля.

        Оба имени перезаписываются: если передано только одно,
        второе станет пустым.

        Raises:
            EmptyNamesException: Если оба имени пустые
        """
        if not updates.first_name and not updates.last_name:
            raise EmptyNamesException
        self.first_name = updates.first_name
        self.last_name = updates.last_name
