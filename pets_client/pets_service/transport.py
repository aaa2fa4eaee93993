# Файл: pets_client/pets_service/transport.py

import logging
from typing import Any, Protocol

import httpx

from pets_client.pets_service.common import FormBody


logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Транспорт до API: каждый метод возвращает JSON-конверт ответа."""

    async def get(self, url: str) -> dict[str, Any]: ...

    async def post(self, url: str, body: FormBody) -> dict[str, Any]: ...

    async def put(self, url: str, body: FormBody) -> dict[str, Any]: ...

    async def delete(self, url: str) -> dict[str, Any]: ...


class HttpxTransport:
    """
    HTTP-транспорт на httpx.AsyncClient.

    Один запрос на вызов, без повторов. Таймауты задает httpx.
    Ошибки HTTP и сети логируются и пробрасываются вызывающему коду без обертки.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._auth_token = token
        # Позволяет подменить сетевой слой (например, httpx.MockTransport в тестах)
        self._transport = transport
        self._client_session: httpx.AsyncClient | None = None

    async def _get_client_session(self) -> httpx.AsyncClient:
        if self._client_session is None or self._client_session.is_closed:
            headers = {"Accept": "application/json"}
            if self._auth_token:
                headers["Authorization"] = f"Bearer {self._auth_token}"
            self._client_session = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client_session

    async def _request(
        self, method: str, url: str, body: FormBody | None = None
    ) -> dict[str, Any]:
        session = await self._get_client_session()
        data = body.data if body else None
        files = body.files if body and body.files else None

        # Значения полей не логируются: в них контакты владельца
        logger.debug(
            f"Выполнение запроса: {method} {url}, поля={list(data or {})}, файлы={list(files or {})}"
        )
        try:
            response = await session.request(method, url, data=data, files=files)
            response.raise_for_status()
            if not response.content:
                return {}
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Ошибка HTTP при запросе к {url}: {e.response.status_code} - {e.response.text}"
            )
            raise
        except httpx.RequestError as e:
            logger.error(f"Ошибка запроса к {url}: {e}")
            raise

    async def get(self, url: str) -> dict[str, Any]:
        return await self._request("GET", url)

    async def post(self, url: str, body: FormBody) -> dict[str, Any]:
        return await self._request("POST", url, body)

    async def put(self, url: str, body: FormBody) -> dict[str, Any]:
        return await self._request("PUT", url, body)

    async def delete(self, url: str) -> dict[str, Any]:
        return await self._request("DELETE", url)

    async def close(self):
        """Закрывает сессию httpx.AsyncClient."""
        if self._client_session and not self._client_session.is_closed:
            await self._client_session.aclose()
            self._client_session = None
            logger.info("Сессия HttpxTransport закрыта.")
