"""Catalog clients that supply food records by id."""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Iterable, Protocol

import httpx

from food_details.config import API_BASE_URL, API_TIMEOUT_SECONDS
from food_details.models import Extra, FoodItem

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """A food could not be fetched or decoded."""


class FoodNotFoundError(CatalogError):
    """The catalog has no food with the requested id."""


class Catalog(Protocol):
    async def fetch_food(self, food_id: int) -> FoodItem: ...


def extra_from_payload(payload: dict[str, Any]) -> Extra:
    return Extra(
        id=payload["id"],
        name=str(payload.get("name") or ""),
        value=payload.get("value"),
        quantity=payload.get("quantity"),
    )


def food_from_payload(payload: Any) -> FoodItem:
    """Build a FoodItem from the ``/foods/{id}`` JSON shape.

    Missing text fields become empty strings and a missing ``extras`` list
    becomes empty. Numeric fields are kept as received; invalid ones are
    normalized when totals are computed.
    """
    if not isinstance(payload, dict) or "id" not in payload:
        raise CatalogError(f"Malformed food payload: {payload!r}")

    raw_extras = payload.get("extras") or []
    try:
        extras = tuple(extra_from_payload(extra) for extra in raw_extras)
    except (KeyError, TypeError, AttributeError) as exc:
        raise CatalogError(f"Malformed extras for food {payload['id']}: {exc}") from exc

    return FoodItem(
        id=payload["id"],
        name=str(payload.get("name") or ""),
        description=str(payload.get("description") or ""),
        price=payload.get("price"),
        image_url=str(payload.get("image_url") or ""),
        extras=extras,
    )


class HttpCatalog:
    """Fetches foods from the REST API with one best-effort request."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout_seconds: float = API_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def fetch_food(self, food_id: int) -> FoodItem:
        url = f"{self.base_url}/foods/{food_id}"
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout_seconds),
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("fetch_failed food_id=%s error=%r", food_id, exc)
            raise CatalogError(f"Could not reach catalog for food {food_id}: {exc}") from exc

        if response.status_code == 404:
            logger.warning("fetch_not_found food_id=%s", food_id)
            raise FoodNotFoundError(f"Food {food_id} not found")
        if response.status_code >= 400:
            logger.warning("fetch_failed food_id=%s status=%s", food_id, response.status_code)
            raise CatalogError(f"Catalog error {response.status_code} for food {food_id}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise CatalogError(f"Invalid JSON for food {food_id}") from exc

        food = food_from_payload(payload)
        logger.info("fetch_ok food_id=%s name=%r", food_id, food.name)
        return food


class InMemoryCatalog:
    """Serves foods from in-process payloads, decoded fresh on every fetch."""

    def __init__(self, payloads: Iterable[dict[str, Any]]) -> None:
        self._payloads: dict[int, dict[str, Any]] = {payload["id"]: payload for payload in payloads}

    async def fetch_food(self, food_id: int) -> FoodItem:
        payload = self._payloads.get(food_id)
        if payload is None:
            raise FoodNotFoundError(f"Food {food_id} not found")
        return food_from_payload(deepcopy(payload))
