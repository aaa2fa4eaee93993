# Файл: pets_client/pets_service/errors.py

"""
Исключения клиента сервиса потерянных животных.

Все ошибки валидации выбрасываются до сетевого запроса.
Ошибки транспорта (httpx) не оборачиваются и доходят до вызывающего кода как есть.
"""


class PetsClientError(Exception):
    """Базовое исключение клиента."""


class UndefinedRequiredData(PetsClientError, ValueError):
    """Не переданы обязательные данные."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class MissingRequiredValue(UndefinedRequiredData):
    """Значение не передано, а значения по умолчанию нет."""


class InvalidType(PetsClientError, TypeError):
    """Тип значения не совпадает с ожидаемым."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"Expected type '{expected}', got '{actual}'")
        self.expected = expected
        self.actual = actual


class InvalidFile(PetsClientError, ValueError):
    """Недопустимый тип файла (разрешены только jpeg и png)."""


class InvalidCoordinates(PetsClientError, ValueError):
    """Строка координат не соответствует формату 'lat,lon'."""


class InvalidDate(PetsClientError, ValueError):
    """Некорректная дата/время."""


class InvalidPhone(PetsClientError, ValueError):
    """Некорректный телефон, список телефонов или идентификатор телефона."""


class InvalidEmail(PetsClientError, ValueError):
    """Некорректный адрес электронной почты."""


__all__ = [
    "InvalidCoordinates",
    "InvalidDate",
    "InvalidEmail",
    "InvalidFile",
    "InvalidPhone",
    "InvalidType",
    "MissingRequiredValue",
    "PetsClientError",
    "UndefinedRequiredData",
]
