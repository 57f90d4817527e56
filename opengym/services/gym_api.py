"""REST client for the place API and the use cases built on top of it."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from opengym.config import ApiSettings
from opengym.domain.models import GymEntity
from opengym.logging import logger
from opengym.services.exceptions import GymApiError

_GYM_LIST = TypeAdapter(list[GymEntity])


class GymApiClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ApiSettings()

    async def fetch_all(self) -> list[GymEntity]:
        return await self._get_gyms("gyms")

    async def search(self, query: str) -> list[GymEntity]:
        return await self._get_gyms("gyms/search", params={"query": query})

    def _url(self, path: str) -> str:
        return f"{str(self._settings.base_url).rstrip('/')}/{path}"

    async def _get_gyms(self, path: str, params: dict[str, Any] | None = None) -> list[GymEntity]:
        url = self._url(path)
        try:
            response = await self._client.get(
                url,
                params=params,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("gym_api_status_error", url=url, status_code=status_code)
            raise GymApiError(
                f"Place API request failed ({status_code})", status_code=status_code
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("gym_api_request_error", url=url, error=str(exc))
            raise GymApiError(f"Place API request failed: {exc}") from exc

        try:
            return _GYM_LIST.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("gym_api_invalid_payload", url=url, error=str(exc))
            raise GymApiError(f"Place API returned an invalid payload: {exc}") from exc


class FetchAllGymData:
    def __init__(self, api: GymApiClient) -> None:
        self._api = api

    async def execute(self) -> list[GymEntity]:
        return await self._api.fetch_all()


class SearchGymData:
    def __init__(self, api: GymApiClient) -> None:
        self._api = api

    async def execute(self, query: str) -> list[GymEntity]:
        return await self._api.search(query)


__all__ = ["FetchAllGymData", "GymApiClient", "SearchGymData"]
