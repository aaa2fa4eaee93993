# Файл: pets_client/pets_service/validators.py

"""
Валидаторы доменных значений: координаты, дата/время, телефон, идентификатор,
email и файлы изображений.

Каждый тип значения имеет конструктор parse(), который либо возвращает значение,
либо выбрасывает соответствующую доменную ошибку. Повторный parse() уже
проверенного значения возвращает то же самое значение.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from pets_client.pets_service.common import TYPE_OBJECT, TYPE_STRING, photo_attr, verify
from pets_client.pets_service.errors import (
    InvalidCoordinates,
    InvalidDate,
    InvalidEmail,
    InvalidFile,
    InvalidPhone,
)


logger = logging.getLogger(__name__)

# re.ASCII: \d и \w только в ASCII, цифры других алфавитов на сервер не уходят
COORDINATES_RE = re.compile(
    r"^([-+]?\d+(?:\.\d+)?), *([-+]?\d+(?:\.\d+)?)\Z", re.ASCII
)

DATETIME_RE = re.compile(
    r"^(\d{4}|\d{2})[^\w\r\n:](0?[1-9]|1[0-2])[^\w\r\n:](0?[1-9]|[12]\d|30|31)"
    r"T([01]?\d|2[0-3]):([0-5]?\d)"
    r"(?::[0-5]\d(?:\.\d+)?)?"
    r"(?:Z|[+-]\d{2}:?\d{2})?\Z",
    re.ASCII,
)

PHONE_RE = re.compile(r"^\+?[0-9 ().-]+\Z")
PHONE_MIN_DIGITS = 3
PHONE_MAX_DIGITS = 15  # E.164
ASCII_DIGITS = "0123456789"

ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}\Z", re.ASCII)

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png")


@dataclass(frozen=True)
class Coordinates:
    """Пара координат 'lat,lon' в том виде, в котором она уходит на сервер."""

    raw: str

    @classmethod
    def parse(cls, raw: Any) -> "Coordinates":
        if isinstance(raw, cls):
            return raw
        raw = verify(raw, TYPE_STRING)
        if not COORDINATES_RE.match(raw):
            raise InvalidCoordinates(f"Invalid coordinates: {raw!r}")
        return cls(raw)

    @property
    def latitude(self) -> float:
        return float(COORDINATES_RE.match(self.raw).group(1))

    @property
    def longitude(self) -> float:
        return float(COORDINATES_RE.match(self.raw).group(2))

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class DateTime:
    """Дата и время в формате 'YYYY-MM-DDTHH:MM'."""

    raw: str

    @classmethod
    def parse(cls, raw: Any) -> "DateTime":
        if isinstance(raw, cls):
            return raw
        raw = verify(raw, TYPE_STRING)
        if not DATETIME_RE.match(raw):
            raise InvalidDate(f"Invalid date: {raw!r}")
        return cls(raw)

    def __str__(self) -> str:
        return self.raw


def is_valid_phone(value: Any) -> bool:
    """Похоже ли значение на телефонный номер: цифры и знаки препинания, 3-15 цифр."""
    if not isinstance(value, str) or not PHONE_RE.match(value):
        return False
    digits = sum(ch in ASCII_DIGITS for ch in value)
    return PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS


def is_valid_id(value: Any) -> bool:
    """Короткий непустой идентификатор из букв, цифр, '_' и '-'."""
    return isinstance(value, str) and bool(ID_RE.match(value))


@dataclass(frozen=True)
class PhoneNumber:
    raw: str

    @classmethod
    def parse(cls, raw: Any) -> "PhoneNumber":
        if isinstance(raw, cls):
            return raw
        raw = verify(raw, TYPE_STRING)
        if not is_valid_phone(raw):
            raise InvalidPhone(f"Invalid phone: {raw!r}")
        return cls(raw)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class OpaqueId:
    raw: str

    @classmethod
    def parse(cls, raw: Any) -> "OpaqueId":
        if isinstance(raw, cls):
            return raw
        raw = verify(raw, TYPE_STRING)
        if not is_valid_id(raw):
            raise InvalidPhone(f"Invalid phone id: {raw!r}")
        return cls(raw)

    def __str__(self) -> str:
        return self.raw


def validate_email_address(raw: Any) -> str:
    """Проверяет синтаксис email. Возвращает исходную строку без нормализации."""
    raw = verify(raw, TYPE_STRING)
    try:
        validate_email(raw, check_deliverability=False)
    except EmailNotValidError as e:
        raise InvalidEmail(f"Invalid email address: {e}") from e
    return raw


@dataclass(frozen=True)
class PetPhoto:
    """Фотография для загрузки: имя файла, содержимое и mime-тип."""

    name: str
    content: bytes
    type: str


def verify_photo(value: Any) -> Any:
    """Проверяет, что файл - изображение jpeg или png. Возвращает сам объект."""
    value = verify(value, TYPE_OBJECT)
    mime = photo_attr(value, "type")
    if mime not in ALLOWED_IMAGE_TYPES:
        logger.debug(f"Отклонен файл с типом {mime!r}")
        raise InvalidFile("Only jpeg and png files are allowed")
    return value
