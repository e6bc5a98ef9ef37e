"""Иерархия ошибок декодирования PPM.

Все ошибки наследуют `PpmError`, чтобы вызывающий код (CLI, контроллер)
мог перехватить их одним `except`, не задевая чужие исключения.
"""
from __future__ import annotations


class PpmError(Exception):
    """Базовая ошибка чтения PPM-файла."""


class PpmIoError(PpmError):
    """Файл отсутствует, недоступен или не читается."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Не удалось прочитать файл {path}: {reason}")
        self.path = path
        self.reason = reason


class UnsupportedFormatError(PpmError):
    """Магическое число не входит в {"P3", "P6"}."""

    def __init__(self, magic_number: str) -> None:
        super().__init__(f"Неподдерживаемый формат PPM: {magic_number!r}")
        self.magic_number = magic_number


class MissingFieldError(PpmError):
    """В заголовке меньше четырёх токенов."""

    def __init__(self, field: str) -> None:
        super().__init__(f"В заголовке отсутствует поле: {field}")
        self.field = field


class MalformedHeaderFieldError(PpmError):
    """Поле заголовка не разбирается как требуемое число."""

    def __init__(self, field: str, token: str) -> None:
        super().__init__(f"Некорректное значение поля {field}: {token!r}")
        self.field = field
        self.token = token


class TruncatedPayloadError(PpmError):
    """Данных пикселей меньше, чем требуют размеры из заголовка."""

    def __init__(self, expected: int, available: int, unit: str = "байт") -> None:
        super().__init__(f"Недостаточно данных пикселей: ожидалось {expected} {unit}, получено {available}")
        self.expected = expected
        self.available = available


class TrailingDataError(PpmError):
    """ASCII-токенов пикселей больше, чем требуют размеры из заголовка."""

    def __init__(self, expected: int, available: int) -> None:
        super().__init__(f"Лишние данные пикселей: ожидалось {expected} значений, получено {available}")
        self.expected = expected
        self.available = available


class InvalidPixelValueError(PpmError):
    """ASCII-токен не является целым числом в диапазоне [0, 255]."""

    def __init__(self, index: int, token: str) -> None:
        super().__init__(f"Некорректное значение канала #{index}: {token!r}")
        self.index = index
        self.token = token
