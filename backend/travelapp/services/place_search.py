"""Longdo Map POI search proxy."""

import logging

import httpx

from travelapp.config import settings
from travelapp.errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)


class PlaceSearchClient:
    """Passes nearby-place searches through to Longdo Map and returns its JSON untouched."""

    def __init__(self):
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=15.0,
                headers={"User-Agent": settings.http_user_agent},
            )
        return self._client

    async def search_nearby(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        radius: str | int | None = None,
        postcode: str | None = None,
        limit: int = 20,
    ) -> dict:
        params: dict = {
            "key": settings.longdo_api_key,
            "span": radius or settings.place_search_default_radius,
            "limit": limit,
        }
        if latitude is not None and longitude is not None:
            params["lat"] = latitude
            params["lon"] = longitude
        elif postcode:
            # location permission denied in the app; search by postcode instead
            params["keyword"] = postcode
        else:
            raise ValidationError("latitude and longitude, or postcode, are required")

        try:
            client = await self._get_client()
            resp = await client.get(settings.place_search_url, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Longdo search returned {e.response.status_code}: {e.response.text[:200]}")
            raise UpstreamError("Place search failed", error=e.response.text[:500])
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Longdo search failed: {e}")
            raise UpstreamError("Place search failed", error=str(e))

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


place_search_client = PlaceSearchClient()
