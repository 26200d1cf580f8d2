from typing import Optional

import bcrypt

from accounts.config import settings


class HashPassword:
    """
    Хеширование паролей через bcrypt.

    Стоимость (work factor) передаётся явно; если не передана,
    берётся из настроек settings.auth.BCRYPT_COST.
    """

    def __init__(self, cost: Optional[int] = None) -> None:
        self.cost = settings.auth.BCRYPT_COST if cost is None else cost

    def create_hash(self, password: str) -> bytes:
        """
        Посчитать соленый хеш пароля.

        Raises:
            ValueError: Если bcrypt отклонил стоимость или пароль длиннее 72 байт
        """
        salt = bcrypt.gensalt(rounds=self.cost)
        return bcrypt.hashpw(password.encode("utf-8"), salt)

    def verify_hash(self, password: str, hashed_password: Optional[bytes]) -> bool:
        """
        Сравнение пароля с хешем за постоянное время.

        Пароль длиннее 72 байт или испорченный хеш считаются
        несовпадением, а не внутренней ошибкой.
        """
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed_password)
        except ValueError:
            return False
