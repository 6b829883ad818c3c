"""
Пакет генератора линейных штрихкодов
====================================

Кодирует текст в одномерный штрихкод и растеризует его в монохромное
изображение PIL.

Этот пакет предоставляет:
    - Проверку содержимого по алфавиту символики
    - Вычисление контрольных символов (mod 43, mod 47, mod 103, mod 10)
    - Сборку символа: начальный шаблон + тело + конечный шаблон
    - Растеризацию без сглаживания (1 px на модуль, высота 28 px)
    - Масштабирование без интерполяции
    - Сопоставление 2D-символик с внешними генераторами

Пример базового использования:
    >>> from src import get_logger
    >>> from src.barcodegen import generate_code
    >>> from src.model.enums import Symbology
    >>>
    >>> logger = get_logger(__name__)
    >>> img = generate_code("400638133393", Symbology.EAN13)
    >>> logger.info("Штрихкод %dx%d", *img.size)

Управление логированием:
    >>> import os
    >>> os.environ['BARCODEGEN_LOG_LEVEL'] = 'DEBUG'

Версия: 0.1.0
Лицензия: MIT
Python: 3.9+
"""

import logging
import os
import sys
from typing import Dict

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "Barcodegen Development Team"
__description__ = "Linear barcode encoder and monochrome rasterizer"
__license__ = "MIT"
__python_requires__ = ">=3.9"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

LOGGER_NAMESPACE = __name__

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 9):
    raise RuntimeError(
        f"barcodegen требует Python 3.9 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================


def _setup_logging() -> None:
    """
    Инициализировать логгер пакета.

    Настраивает логгер пакета ("src") с консольным обработчиком (stderr) и
    структурированным форматом. Уровень берётся из переменной окружения
    BARCODEGEN_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL), по
    умолчанию WARNING.

    Идемпотентна - повторные вызовы не имеют дополнительного эффекта.
    """
    log_level_str = os.environ.get("BARCODEGEN_LOG_LEVEL", "WARNING").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.WARNING)

    # Избегаем дублирования конфигурации
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if package_logger.handlers:
        return

    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён пакета.

    Логгеры именуются как 'src.<module_name>' и наследуют
    обработчик и уровень логгера пакета.

    Аргументы:
        module_name: Имя модуля, обычно `__name__`.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Символ собран: %d модулей", 95)
    """
    if module_name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{clean_name}")


def check_dependencies() -> Dict[str, bool]:
    """
    Проверить, установлены ли зависимости.

    Обязательные: pillow. Для 2D-кодов: qrcode, pdf417gen, treepoem.
    Не вызывает исключений - возвращает словарь состояний.

    Пример:
        >>> deps = check_dependencies()
        >>> if not deps["treepoem"]:
        ...     print("Aztec/DataMatrix недоступны.")
    """
    dependencies: Dict[str, bool] = {}
    for name, module in (
        ("pillow", "PIL"),
        ("qrcode", "qrcode"),
        ("pdf417gen", "pdf417gen"),
        ("treepoem", "treepoem"),
    ):
        try:
            __import__(module)
            dependencies[name] = True
        except ImportError:
            dependencies[name] = False
    return dependencies


_setup_logging()

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "LOGGER_NAMESPACE",
    "get_logger",
    "check_dependencies",
]
