"""
Logging setup для приложений, встраивающих PixelForge.

Библиотечные модули только создают logger = logging.getLogger(__name__);
обработчики настраивает приложение через setup_logging().
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = "[%(levelname)s] %(name)s - %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Настройка логгера пакета pixelforge.

    - Консольный обработчик (stderr)
    - Опционально ротируемый файл (~1 MB, 3 backup)

    Повторный вызов заменяет ранее установленные обработчики.

    Args:
        debug: DEBUG вместо INFO (включает лог каждого розыгрыша)
        log_file: Путь к файлу лога (optional)

    Returns:
        Настроенный logger "pixelforge"
    """
    level = logging.DEBUG if debug else logging.INFO

    package_logger = logging.getLogger("pixelforge")
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(level)
    package_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=1_000_000,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(level)
        package_logger.addHandler(file_handler)

    package_logger.info("Logging initialized")
    return package_logger
