# Файл: pets_client/pets_service/schemas.py

"""
Схемы клиента сервиса потерянных животных.

Входные данные операций описаны неизменяемыми dataclass-ами: каждое поле либо
передано, либо имеет значение UNSET. Ответы сервера описаны Pydantic-моделями.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pets_client.pets_service.common import UNSET


# --- Входные данные операций ---


@dataclass(frozen=True)
class ListOptions:
    """Параметры списка животных поблизости. Отсутствующие поля не попадают в запрос."""

    limit: Any = UNSET
    origin: Any = UNSET  # координаты 'lat,lon'
    radius: Any = UNSET  # в метрах
    page: Any = UNSET
    ip: Any = UNSET


@dataclass(frozen=True)
class SearchOptions:
    limit: Any = UNSET
    page: Any = UNSET


@dataclass(frozen=True)
class PetPostInput:
    """Данные для создания новой публикации."""

    pet_animal: Any = UNSET
    pet_name: Any = UNSET
    disappearance_date: Any = UNSET
    disappearance_place: Any = UNSET
    details: Any = UNSET
    pet_photo_0: Any = UNSET
    owner_name: Any = UNSET
    owner_phone: Any = UNSET
    owner_email: Any = UNSET
    pet_race: Any = UNSET
    pet_photo_1: Any = UNSET
    pet_photo_2: Any = UNSET
    pet_photo_3: Any = UNSET
    pet_photo_4: Any = UNSET
    owner_address: Any = UNSET
    reward: Any = UNSET


@dataclass(frozen=True)
class PetEditInput:
    """
    Частичное обновление публикации: отсутствующее поле не меняется.
    pet_race, owner_address и reward можно удалить значением REMOVE ('unset').
    """

    pet_race: Any = UNSET
    disappearance_place: Any = UNSET
    details: Any = UNSET
    owner_phone: Any = UNSET  # PhoneDiff, словарь или JSON-строка
    owner_address: Any = UNSET
    reward: Any = UNSET
    found: Any = UNSET


# --- Ответы сервера ---


class BaseSchema(BaseModel):
    """Базовая модель для игнорирования лишних полей от API."""

    model_config = ConfigDict(extra="ignore")


class Place(BaseSchema):
    coordinates: list[float] = Field(default_factory=list, description="[lat, lon]")
    address: Optional[str] = None


class PetSummary(BaseSchema):
    """Краткая информация о животном в списках. Контактов владельца не содержит."""

    id: str
    pet_name: str
    pet_animal: str
    pet_race: Optional[str] = None
    disappearance_date: Optional[datetime] = None
    disappearance_place: Optional[Place] = None
    details: Optional[str] = None
    picture: Optional[str] = None


class PagedResult(BaseSchema):
    """Страница результатов. next - номер следующей страницы или False, если страниц больше нет."""

    results: list[PetSummary] = Field(default_factory=list)
    next: int | bool = False

    @field_validator("next")
    @classmethod
    def check_next(cls, v):
        if v is True:
            raise ValueError("next must be a page number or False")
        return v


class PetPostInformation(BaseSchema):
    """
    Информация о публикации.
    В формате 'template' сервер возвращает только pet_name, owner_name и owner_email.
    """

    pet_name: str
    owner_name: str
    owner_email: str
    pet_animal: Optional[str] = None
    pet_race: Optional[str] = None
    owner_phone: Optional[str | list[str]] = None
    disappearance_date: Optional[datetime] = None
    disappearance_place: Optional[Place] = None
    details: Optional[str] = None
    pictures: list[str] = Field(default_factory=list)
    reward: Optional[str] = None
    found: Optional[bool] = None
    owner_home: Optional[Place] = None


class CreatedPet(BaseSchema):
    edit_id: str = Field(description="ID для редактирования")
    view_id: str = Field(description="ID для публичного просмотра")


class EditResult(BaseModel):
    """Успешно измененные параметры публикации."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    unset: dict[str, Any] = Field(default_factory=dict, alias="$unset")
    owner_phone: Optional[Any] = None
    owner_home: Optional[Place] = None
    pet_race: Optional[str] = None
    disappearance_place: Optional[Place] = None
    details: Optional[str] = None
    reward: Optional[str] = None
    found: Optional[bool] = None


__all__ = [
    "CreatedPet",
    "EditResult",
    "ListOptions",
    "PagedResult",
    "PetEditInput",
    "PetPostInformation",
    "PetPostInput",
    "PetSummary",
    "Place",
    "SearchOptions",
]
