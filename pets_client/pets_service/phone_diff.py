# Файл: pets_client/pets_service/phone_diff.py

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pets_client.pets_service.errors import (
    InvalidPhone,
    InvalidType,
    UndefinedRequiredData,
)
from pets_client.pets_service.validators import OpaqueId, PhoneNumber


logger = logging.getLogger(__name__)

DIFF_KEYS = ("unset", "replace", "add")


@dataclass(frozen=True)
class PhoneDiff:
    """
    Изменение списка телефонов владельца при редактировании публикации.

    Три независимые операции, которые можно передавать одновременно:
    - unset: идентификаторы телефонов, которые нужно удалить;
    - replace: идентификатор -> новый номер;
    - add: новые номера.

    Телефоны адресуются по идентификатору, а не заменяются целым списком.
    """

    unset: tuple[str, ...] | None = None
    replace: dict[str, str] | None = None
    add: tuple[str, ...] | None = None

    @classmethod
    def build(cls, value: Any) -> "PhoneDiff":
        """
        Строит и валидирует diff из PhoneDiff, словаря или JSON-строки.

        Проверка атомарна: любой некорректный идентификатор или номер
        отклоняет весь diff целиком (InvalidPhone).
        """
        if isinstance(value, cls):
            raw = value.as_dict()
        elif isinstance(value, str):
            raw = _parse_text(value)
        elif isinstance(value, Mapping):
            raw = dict(value)
        else:
            raise InvalidPhone(
                f"Phone diff must be a mapping or JSON string, got {type(value).__name__}"
            )

        unknown = set(raw) - set(DIFF_KEYS)
        if unknown:
            raise InvalidPhone(f"Unknown phone diff operations: {sorted(unknown)}")

        unset = _build_unset(raw.get("unset"))
        replace = _build_replace(raw.get("replace"))
        add = _build_add(raw.get("add"))

        logger.debug(
            f"Diff телефонов проверен: unset={unset}, replace={replace}, add={add}"
        )
        return cls(unset=unset, replace=replace, add=add)

    def as_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.unset is not None:
            result["unset"] = list(self.unset)
        if self.replace is not None:
            result["replace"] = dict(self.replace)
        if self.add is not None:
            result["add"] = list(self.add)
        return result

    def serialize(self) -> str:
        """Текстовая форма diff для тела запроса (JSON)."""
        return json.dumps(self.as_dict(), ensure_ascii=False, separators=(",", ":"))


def _parse_text(value: str) -> dict[str, Any]:
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise InvalidPhone(f"Phone diff is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise InvalidPhone("Phone diff must be a JSON object")
    return parsed


def _as_sequence(value: Any, name: str) -> list[Any]:
    if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__iter__"):
        raise InvalidPhone(f"Phone diff '{name}' must be a list")
    return list(value)


def _phone_id(value: Any) -> str:
    try:
        return OpaqueId.parse(value).raw
    except (InvalidType, UndefinedRequiredData) as e:
        raise InvalidPhone(f"Invalid phone id: {value!r}") from e


def _phone_number(value: Any) -> str:
    try:
        return PhoneNumber.parse(value).raw
    except (InvalidType, UndefinedRequiredData) as e:
        raise InvalidPhone(f"Invalid phone: {value!r}") from e


def _build_unset(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(_phone_id(phone_id) for phone_id in _as_sequence(value, "unset"))


def _build_replace(value: Any) -> dict[str, str] | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        pairs = list(value.items())
    else:
        # Допускается и список пар [[id, номер], ...]
        pairs = []
        for pair in _as_sequence(value, "replace"):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise InvalidPhone("Phone diff 'replace' pairs must be [id, number]")
            pairs.append(tuple(pair))

    return {
        _phone_id(phone_id): _phone_number(number)
        for phone_id, number in pairs
    }


def _build_add(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    return tuple(_phone_number(number) for number in _as_sequence(value, "add"))
