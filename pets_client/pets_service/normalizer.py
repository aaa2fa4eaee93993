# Файл: pets_client/pets_service/normalizer.py

"""
Нормализация запросов к API публикаций.

Для каждой операции своя функция: она проверяет обязательные поля, валидирует
значения и собирает новый неизменяемый PetsRequest. Входные данные вызывающего
кода не изменяются. Любая ошибка валидации выбрасывается до сетевого запроса.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import quote

from pets_client.pets_service.common import (
    TYPE_BOOLEAN,
    TYPE_NUMBER,
    TYPE_STRING,
    UNSET,
    FormBody,
    form_parse,
    is_set,
    only_setted,
    url,
    verify,
)
from pets_client.pets_service.errors import InvalidPhone, UndefinedRequiredData
from pets_client.pets_service.phone_diff import PhoneDiff
from pets_client.pets_service.schemas import (
    ListOptions,
    PetEditInput,
    PetPostInput,
    SearchOptions,
)
from pets_client.pets_service.validators import (
    Coordinates,
    DateTime,
    is_valid_phone,
    validate_email_address,
    verify_photo,
)


logger = logging.getLogger(__name__)

# Значение для удаления поля при редактировании ($unset на сервере)
REMOVE = "unset"

SEARCH_DEFAULT_LIMIT = 10
SEARCH_DEFAULT_PAGE = 1

OPTIONAL_PHOTOS = ("pet_photo_1", "pet_photo_2", "pet_photo_3", "pet_photo_4")


@dataclass(frozen=True)
class PetsRequest:
    """Готовый к отправке запрос: метод, URL и (для POST/PUT) multipart-тело."""

    method: str
    url: str
    body: FormBody | None = None


def _required(name: str, value: Any) -> Any:
    """Обязательная непустая строка (пустая строка или пробелы считаются отсутствием)."""
    if only_setted(value):
        value = verify(value, TYPE_STRING)
    if not only_setted(value) or not value.strip():
        raise UndefinedRequiredData(
            f"There are required data not declared ({name})", fields=[name]
        )
    return value


def _path_id(value: Any) -> str:
    return quote(_required("id", value), safe="")


def normalize_nearby(opt: ListOptions) -> PetsRequest:
    params = {
        "limit": verify(opt.limit, TYPE_NUMBER, None),
        "origin": verify(opt.origin, TYPE_STRING, None),
        "radius": verify(opt.radius, TYPE_NUMBER, None),
        "page": verify(opt.page, TYPE_NUMBER, None),
        "ip": verify(opt.ip, TYPE_STRING, None),
    }
    return PetsRequest("GET", url("/pets", params))


def normalize_view(pet_id: Any, format: Any = UNSET) -> PetsRequest:
    pet_id = _path_id(pet_id)
    data_format = verify(format, TYPE_STRING, None)
    return PetsRequest("GET", url(f"/pets/single/{pet_id}", {"format": data_format}))


def normalize_search(query: Any, opt: SearchOptions) -> PetsRequest:
    search = _required("query", query)
    limit = verify(opt.limit, TYPE_NUMBER, SEARCH_DEFAULT_LIMIT)
    page = verify(opt.page, TYPE_NUMBER, SEARCH_DEFAULT_PAGE)
    return PetsRequest(
        "GET", url("/pets/search", {"q": search, "limit": limit, "page": page})
    )


def normalize_owner_phones(value: Any) -> str:
    """
    Нормализует список телефонов при создании публикации.

    Принимает строку с номерами через запятую или список строк. Некорректные
    номера отбрасываются, ошибка InvalidPhone - только если не осталось ни одного.
    """
    if isinstance(value, (list, tuple)):
        entries = list(value)
    else:
        entries = verify(value, TYPE_STRING).split(",")

    valid = []
    for entry in entries:
        phone = verify(entry, TYPE_STRING).strip()
        if is_valid_phone(phone):
            valid.append(phone)
        else:
            logger.warning(f"Некорректный телефон {phone!r} исключен из списка")

    if not valid:
        raise InvalidPhone("There are no valid phone in array")
    return ",".join(valid)


def normalize_add(pet: PetPostInput) -> PetsRequest:
    is_set(
        pet_animal=pet.pet_animal,
        pet_name=pet.pet_name,
        disappearance_date=pet.disappearance_date,
        disappearance_place=pet.disappearance_place,
        details=pet.details,
        pet_photo_0=pet.pet_photo_0,
        owner_name=pet.owner_name,
        owner_phone=pet.owner_phone,
        owner_email=pet.owner_email,
    )

    fields: dict[str, Any] = {
        "pet_animal": verify(pet.pet_animal, TYPE_STRING),
        "pet_race": verify(pet.pet_race, TYPE_STRING, None),
        "pet_name": verify(pet.pet_name, TYPE_STRING),
        "details": verify(pet.details, TYPE_STRING),
        "owner_name": verify(pet.owner_name, TYPE_STRING),
        "reward": verify(pet.reward, TYPE_STRING, None),
    }

    # Изображения: первое обязательно, остальные проверяются, только если переданы
    fields["pet_photo_0"] = verify_photo(pet.pet_photo_0)
    for slot in OPTIONAL_PHOTOS:
        photo = getattr(pet, slot)
        if only_setted(photo):
            fields[slot] = verify_photo(photo)

    # Координаты
    fields["disappearance_place"] = str(Coordinates.parse(pet.disappearance_place))
    if only_setted(pet.owner_address):
        fields["owner_address"] = str(Coordinates.parse(pet.owner_address))

    fields["disappearance_date"] = str(DateTime.parse(pet.disappearance_date))

    # Контакты
    fields["owner_phone"] = normalize_owner_phones(pet.owner_phone)
    fields["owner_email"] = validate_email_address(pet.owner_email)

    return PetsRequest("POST", url("/pets"), form_parse(fields))


def _removable(value: Any, validate: Callable[[str], Any] | None = None) -> Any:
    """Поле, которое можно удалить: '' и 'unset' превращаются в REMOVE."""
    value = verify(value, TYPE_STRING)
    if value in ("", REMOVE):
        return REMOVE
    return str(validate(value)) if validate else value


def normalize_edit(pet_id: Any, changes: PetEditInput) -> PetsRequest:
    pet_id = _path_id(pet_id)

    fields: dict[str, Any] = {}
    if only_setted(changes.pet_race):
        fields["pet_race"] = _removable(changes.pet_race)
    if only_setted(changes.details):
        fields["details"] = verify(changes.details, TYPE_STRING)
    if only_setted(changes.reward):
        fields["reward"] = _removable(changes.reward)
    if only_setted(changes.found):
        fields["found"] = verify(changes.found, TYPE_BOOLEAN)

    # Координаты
    if only_setted(changes.disappearance_place):
        fields["disappearance_place"] = str(
            Coordinates.parse(changes.disappearance_place)
        )
    if only_setted(changes.owner_address):
        fields["owner_address"] = _removable(changes.owner_address, Coordinates.parse)

    # Контакты
    if only_setted(changes.owner_phone):
        fields["owner_phone"] = PhoneDiff.build(changes.owner_phone).serialize()

    if not fields:
        logger.debug(f"Редактирование {pet_id} без изменяемых полей")
    return PetsRequest("PUT", url(f"/pets/{pet_id}"), form_parse(fields))


def normalize_delete(pet_id: Any) -> PetsRequest:
    return PetsRequest("DELETE", url(f"/pets/{_path_id(pet_id)}"))
