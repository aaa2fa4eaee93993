# Файл: pets_client/pets_service/pets_client.py

import dataclasses
import logging
from typing import Any, TypeVar

from pets_client.config.config import EnvSettings, get_env_settings
from pets_client.pets_service.common import UNSET
from pets_client.pets_service.normalizer import (
    PetsRequest,
    normalize_add,
    normalize_delete,
    normalize_edit,
    normalize_nearby,
    normalize_search,
    normalize_view,
)
from pets_client.pets_service.schemas import (
    CreatedPet,
    EditResult,
    ListOptions,
    PagedResult,
    PetEditInput,
    PetPostInformation,
    PetPostInput,
    SearchOptions,
)
from pets_client.pets_service.transport import HttpxTransport, Transport


logger = logging.getLogger(__name__)

_Options = TypeVar("_Options")


def _options(cls: type[_Options], opt: _Options | None, fields: dict[str, Any]) -> _Options:
    """Собирает объект параметров из готового объекта и/или именованных аргументов."""
    base = opt if opt is not None else cls()
    return dataclasses.replace(base, **fields) if fields else base


def _details(envelope: dict[str, Any]) -> Any:
    return (envelope or {}).get("details")


def _paged(details: dict[str, Any]) -> PagedResult:
    """Разворачивает список: отсутствие следующей страницы всегда False (0 - валидная страница)."""
    details = details or {}
    page_details = details.get("page_details")
    next_page = False if page_details is None or page_details is False else page_details
    return PagedResult.model_validate(
        {"results": details.get("items") or [], "next": next_page}
    )


class PetsClient:
    """
    Клиент API публикаций о потерянных животных.

    Хранит только токен авторизации и ссылку на транспорт. Каждый метод:
    нормализация входных данных -> один запрос через транспорт -> разбор ответа.
    Ошибки валидации выбрасываются до запроса, ошибки транспорта пробрасываются как есть.
    """

    def __init__(
        self,
        token: str | None = None,
        transport: Transport | None = None,
        settings: EnvSettings | None = None,
    ):
        self.auth_token = token
        if transport is None:
            settings = settings or get_env_settings()
            transport = HttpxTransport(
                base_url=settings.PETS_API_BASE_URL,
                token=token or settings.PETS_API_TOKEN,
                timeout=settings.PETS_API_TIMEOUT,
            )
        self._transport = transport

    async def _send(self, request: PetsRequest) -> dict[str, Any]:
        if request.method == "GET":
            return await self._transport.get(request.url)
        if request.method == "POST":
            return await self._transport.post(request.url, request.body)
        if request.method == "PUT":
            return await self._transport.put(request.url, request.body)
        if request.method == "DELETE":
            return await self._transport.delete(request.url)
        raise ValueError(f"Unsupported method: {request.method}")

    async def nearby(self, opt: ListOptions | None = None, **fields: Any) -> PagedResult:
        """
        Список животных поблизости.

        Args:
            limit (int, optional): Ограничение количества записей на странице.
            origin (str, optional): Точка отсчета в координатах 'lat,lon'.
            radius (int, optional): Радиус поиска в метрах.
            page (int, optional): Номер страницы.
            ip (str, optional): IP, с которого выполняется запрос.

        Returns:
            PagedResult: Результаты и номер следующей страницы (или False).
        """
        request = normalize_nearby(_options(ListOptions, opt, fields))
        res = await self._send(request)
        return _paged(_details(res))

    async def view(self, pet_id: Any = UNSET, format: Any = UNSET) -> PetPostInformation:
        """
        Информация о публикации по ViewID или EditID.

        Args:
            pet_id (str): ViewID или EditID публикации.
            format (str, optional): Формат данных (например, 'template').
        """
        request = normalize_view(pet_id, format)
        res = await self._send(request)
        return PetPostInformation.model_validate((_details(res) or {}).get("items"))

    async def search(
        self, query: Any = UNSET, opt: SearchOptions | None = None, **fields: Any
    ) -> PagedResult:
        """Поиск публикаций по строке. По умолчанию limit=10, page=1."""
        request = normalize_search(query, _options(SearchOptions, opt, fields))
        res = await self._send(request)
        return _paged(_details(res))

    async def add(self, pet: PetPostInput | None = None, **fields: Any) -> CreatedPet:
        """
        Создает новую публикацию.

        Поля передаются объектом PetPostInput и/или именованными аргументами.
        owner_phone - строка с номерами через запятую или список строк.

        Returns:
            CreatedPet: edit_id и view_id новой публикации.
        """
        request = normalize_add(_options(PetPostInput, pet, fields))
        res = await self._send(request)
        created = CreatedPet.model_validate(_details(res))
        logger.info(f"Создана публикация view_id={created.view_id}")
        return created

    async def edit(
        self, pet_id: Any = UNSET, changes: PetEditInput | None = None, **fields: Any
    ) -> EditResult:
        """
        Редактирует публикацию по EditID. Передаются только изменяемые поля.

        owner_phone задается diff-ом: {"unset": [id], "replace": {id: номер}, "add": [номер]}.
        """
        request = normalize_edit(pet_id, _options(PetEditInput, changes, fields))
        res = await self._send(request)
        logger.info(f"Публикация {pet_id} отредактирована")
        return EditResult.model_validate(_details(res) or {})

    async def delete(self, pet_id: Any = UNSET) -> bool:
        """Удаляет публикацию по EditID."""
        request = normalize_delete(pet_id)
        await self._send(request)
        logger.info(f"Публикация {pet_id} удалена")
        return True

    async def close(self):
        """Закрывает транспорт, если он это поддерживает."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()
