"""Domain models for food-details."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FavoriteIcon(str, Enum):
    """Icon names for the favorite toggle."""

    FILLED = "favorite"
    OUTLINE = "favorite-border"


@dataclass(frozen=True)
class Extra:
    """An optional add-on for a food, with its selected quantity."""

    id: int
    name: str
    value: Any = 0
    quantity: Any = 0


@dataclass(frozen=True)
class FoodItem:
    """A food record as served by the catalog."""

    id: int
    name: str
    description: str = ""
    price: Any = 0
    image_url: str = ""
    extras: tuple[Extra, ...] = field(default_factory=tuple)
