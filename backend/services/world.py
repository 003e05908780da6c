"""Country, city and news lookups proxied from public APIs"""

import logging
from typing import Any

import httpx
from fastapi import HTTPException, Request
from sqlmodel import Session

import settings
from services.api_retry import api_retry, exception_from_response
from services.country_language import get_country_and_language
from services.errors import InvalidRequestError, ServiceError
from services.users import get_user

logger = logging.getLogger("dailyverse.world")

MIN_COUNTRY_SEARCH = 3


class WorldApi:
    """Shared HTTP client for the third-party data sources"""

    def __init__(self):
        self.client = httpx.AsyncClient(
            verify=settings.HTTPS_VERIFY,
            timeout=30.0,
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
        )

    async def close(self):
        await self.client.aclose()

    @api_retry()
    async def _request(self, method: str, url: str, **kwargs) -> Any:
        response = await self.client.request(method, url, **kwargs)
        if response.status_code != 200:
            raise exception_from_response(response, f"{method} {url} failed")
        return response.json()

    async def search_countries(self, search: str) -> list[dict[str, str]]:
        prefix = (search or "").strip().lower()
        if len(prefix) < MIN_COUNTRY_SEARCH:
            return []
        try:
            countries = await self._request(
                "GET", settings.COUNTRIES_API_URL, params={"fields": "name,cca2"}
            )
        except (HTTPException, httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching countries: {e}")
            raise ServiceError("Error fetching countries") from e
        if not isinstance(countries, list):
            logger.error(f"Unexpected countries payload: {countries!r:.200}")
            raise ServiceError("Error fetching countries")

        matches = []
        for country in countries:
            if not isinstance(country, dict):
                continue
            name = (country.get("name") or {}).get("common", "")
            if name.lower().startswith(prefix):
                matches.append({"name": name, "code": country.get("cca2", "")})
        return sorted(matches, key=lambda c: c["name"])

    async def get_cities(self, country: str) -> list[str]:
        try:
            payload = await self._request(
                "POST", settings.CITIES_API_URL, json={"country": country}
            )
        except (HTTPException, httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching cities of {country}: {e}")
            raise ServiceError("Error fetching cities") from e
        if not isinstance(payload, dict):
            logger.error(f"Unexpected cities payload: {payload!r:.200}")
            raise ServiceError("Error fetching cities")
        if payload.get("error"):
            logger.warning(f"Cities API refused {country}: {payload.get('msg')}")
            raise ServiceError("Error fetching cities")
        return payload.get("data") or []

    async def fetch_news(
        self, *, local_country: str | None = None, query: str | None = None
    ) -> list[dict]:
        """General news in English, or the news of a country in its language"""
        params = {"apikey": settings.NEWS_API_KEY}
        if local_country:
            try:
                country_code, language_code = get_country_and_language(local_country)
            except KeyError:
                raise InvalidRequestError("Invalid country for local news")
            params.update(country=country_code, language=language_code)
        else:
            params["language"] = "en"
        if query:
            params["q"] = query

        try:
            payload = await self._request("GET", settings.NEWS_API_URL, params=params)
        except (HTTPException, httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch news: {e}")
            raise ServiceError("Failed to fetch news") from e
        if not isinstance(payload, dict):
            logger.error(f"Unexpected news payload: {payload!r:.200}")
            raise ServiceError("Failed to fetch news")
        return payload.get("results") or []


def news_country(session: Session, email: str, mode: str, country: str | None):
    """The country local news are about, None for general news"""
    if mode != "local":
        return None
    if country:
        return country
    user = get_user(session, email)
    if user is None:
        raise ServiceError("Failed to fetch user profile")
    if not user.country:
        raise InvalidRequestError("Country not found in user profile")
    return user.country


def get_world_api(request: Request) -> WorldApi:
    return request.app.state.world
