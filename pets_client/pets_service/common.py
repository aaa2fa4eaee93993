# Файл: pets_client/pets_service/common.py

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from pets_client.pets_service.errors import (
    InvalidType,
    MissingRequiredValue,
    UndefinedRequiredData,
)


logger = logging.getLogger(__name__)


class _Unset(enum.Enum):
    """Маркер отсутствующего значения (поле не передано вызывающим кодом)."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET

# Маркер "значение по умолчанию не задано" (None - это допустимое значение по умолчанию)
_NO_DEFAULT = object()

TYPE_STRING = "string"
TYPE_NUMBER = "number"
TYPE_BOOLEAN = "boolean"
TYPE_OBJECT = "object"


def only_setted(value: Any) -> bool:
    """Проверяет, что значение передано (не UNSET и не None)."""
    return value is not UNSET and value is not None


def _type_name(value: Any) -> str:
    if isinstance(value, str):
        return TYPE_STRING
    if isinstance(value, bool):
        return TYPE_BOOLEAN
    if isinstance(value, (int, float)):
        return TYPE_NUMBER
    return type(value).__name__


def _matches(value: Any, expected: str) -> bool:
    if expected == TYPE_STRING:
        return isinstance(value, str)
    if expected == TYPE_NUMBER:
        # bool - подкласс int, но числом не считается
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if expected == TYPE_BOOLEAN:
        return isinstance(value, bool)
    if expected == TYPE_OBJECT:
        return not isinstance(value, (str, int, float, bool))
    raise ValueError(f"Unknown expected type: {expected}")


def verify(value: Any, expected: str, default: Any = _NO_DEFAULT) -> Any:
    """
    Проверяет значение на соответствие ожидаемому типу.

    Если значение не передано и задан default (в том числе None) - возвращает default,
    не проверяя значение. Если значение не передано и default не задан -
    выбрасывает MissingRequiredValue. Переданное значение возвращается без изменений,
    преобразование между типами не выполняется ("5" не станет 5).

    Args:
        value: Проверяемое значение.
        expected: Ожидаемый тип: "string", "number", "boolean" или "object".
        default: Значение по умолчанию для отсутствующего значения.

    Returns:
        Исходное значение или default.
    """
    if not only_setted(value):
        if default is not _NO_DEFAULT:
            return default
        raise MissingRequiredValue(
            f"Required value of type '{expected}' is not declared"
        )

    if not _matches(value, expected):
        raise InvalidType(expected, _type_name(value))
    return value


def is_set(**fields: Any) -> None:
    """
    Пакетная проверка наличия обязательных полей.

    Проверяет все поля за один проход и выбрасывает одно исключение
    со списком всех недостающих полей.
    """
    missing = [name for name, value in fields.items() if not only_setted(value)]
    if missing:
        raise UndefinedRequiredData(
            f"There are required data not declared ({', '.join(missing)})",
            fields=missing,
        )


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def url(path: str, params: Mapping[str, Any] | None = None) -> str:
    """Формирует URL с query-строкой, пропуская отсутствующие параметры."""
    if not params:
        return path
    present = {
        key: _query_value(value)
        for key, value in params.items()
        if only_setted(value)
    }
    if not present:
        return path
    return f"{path}?{urlencode(present)}"


def photo_attr(photo: Any, name: str, default: Any = None) -> Any:
    """Достает атрибут файла: поддерживаются и объекты, и словари."""
    if isinstance(photo, Mapping):
        return photo.get(name, default)
    return getattr(photo, name, default)


@dataclass(frozen=True)
class FormBody:
    """Multipart-тело запроса: текстовые поля и файлы в формате httpx."""

    data: dict[str, str] = field(default_factory=dict)
    files: dict[str, tuple[str, Any, str]] = field(default_factory=dict)


def form_parse(fields: Mapping[str, Any]) -> FormBody:
    """
    Сериализует нормализованные поля в multipart-тело.

    Строки, числа и булевы значения попадают в data, файлы - в files
    как кортеж (имя файла, содержимое, mime-тип).
    """
    data: dict[str, str] = {}
    files: dict[str, tuple[str, Any, str]] = {}

    for name, value in fields.items():
        if not only_setted(value):
            continue
        if isinstance(value, bool):
            data[name] = "true" if value else "false"
        elif isinstance(value, (str, int, float)):
            data[name] = str(value)
        else:
            files[name] = (
                photo_attr(value, "name") or name,
                photo_attr(value, "content", b""),
                photo_attr(value, "type"),
            )

    logger.debug(f"Сформировано тело формы: поля={list(data)}, файлы={list(files)}")
    return FormBody(data=data, files=files)
