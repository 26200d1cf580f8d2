import logging
import sys
from typing import Optional

from accounts.config import settings

PACKAGE_LOGGER = "accounts"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Настройка логирования для пакета accounts.

    Формат берётся из settings.logging, уровень выставляется только
    логгеру пакета, корневой логгер вызывающего приложения не трогаем.

    Args:
        level: Уровень логирования, по умолчанию settings.logging.LEVEL

    Returns:
        Логгер пакета
    """
    logging.basicConfig(
        format=settings.logging.FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel((level or settings.logging.LEVEL).upper())
    return package_logger
