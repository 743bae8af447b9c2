"""Wikimedia Commons photo lookup for generated place names."""

import logging
import os

import httpx

from travelapp.config import settings
from travelapp.services.llm_client import llm_client

logger = logging.getLogger(__name__)

TRANSLATE_PROMPT = """Translate the given place name into English as it would appear
in a Wikimedia Commons file name. Reply with the translated name only, no
quotes, no explanation."""


class ImageResolver:
    """Finds a representative photo URL for a place, or the placeholder URL."""

    def __init__(self):
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=15.0,
                headers={"User-Agent": settings.http_user_agent},
            )
        return self._client

    async def translate_name(self, name: str) -> str:
        """Best effort: English name for searching, the original on any failure."""
        try:
            translated = await llm_client.complete(
                system=TRANSLATE_PROMPT, user=name, max_tokens=60, temperature=0
            )
        except Exception as e:
            logger.warning(f"Name translation failed for {name!r}, searching as-is: {e}")
            return name
        translated = translated.strip().strip('"').strip()
        return translated or name

    @staticmethod
    def search_terms(name: str, attempt: int = 0) -> list[str]:
        terms = [f"{name} {q}" for q in settings.image_search_qualifier_list] + [name]
        if attempt:
            terms = [f"{t} {attempt}" for t in terms]
        return terms

    @staticmethod
    def filename(title: str) -> str:
        """'File:Wat_Arun.jpg' -> 'Wat Arun'."""
        if title.lower().startswith("file:"):
            title = title[5:]
        stem, _ = os.path.splitext(title)
        return stem.replace("_", " ").strip()

    @staticmethod
    def matches(filename: str, name: str) -> bool:
        a, b = filename.lower().strip(), name.lower().strip()
        if not a or not b:
            return False
        return b in a or a in b

    async def _search_files(self, term: str) -> list[str]:
        client = await self._get_client()
        resp = await client.get(
            settings.wikimedia_api_url,
            params={
                "action": "query",
                "list": "search",
                "srsearch": term,
                "srnamespace": 6,
                "srlimit": 10,
                "format": "json",
            },
        )
        resp.raise_for_status()
        results = resp.json().get("query", {}).get("search", [])
        return [r["title"] for r in results if r.get("title")]

    async def _file_url(self, title: str) -> str | None:
        client = await self._get_client()
        resp = await client.get(
            settings.wikimedia_api_url,
            params={
                "action": "query",
                "titles": title,
                "prop": "imageinfo",
                "iiprop": "url",
                "format": "json",
            },
        )
        resp.raise_for_status()
        pages = resp.json().get("query", {}).get("pages", {})
        for page in pages.values():
            info = page.get("imageinfo") or []
            if info and info[0].get("url"):
                return info[0]["url"]
        return None

    async def resolve(self, name: str, attempt: int = 0, english: str | None = None) -> str:
        """Photo URL for `name`; `attempt` > 0 mutates the search terms for dedup retries.

        Pass `english` when the name is already translated to skip the LLM call.
        """
        if english is None:
            english = await self.translate_name(name)

        for term in self.search_terms(english, attempt):
            try:
                titles = await self._search_files(term)
                for title in titles:
                    if not self.matches(self.filename(title), english):
                        continue
                    url = await self._file_url(title)
                    if url:
                        return url
            except (httpx.HTTPError, ValueError) as e:
                logger.warning(f"Commons search failed for {term!r}: {e}")

        logger.info(f"No Commons photo for {name!r}, using placeholder")
        return settings.image_placeholder_url

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


image_resolver = ImageResolver()
