"""Order composition: quantities, favorite flag and the running total."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from decimal import Decimal, localcontext
from typing import TYPE_CHECKING, Any, Callable

from food_details.models import Extra, FavoriteIcon, FoodItem
from food_details.rendering import format_value

if TYPE_CHECKING:
    from food_details.catalog import Catalog

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)


def safe(value: Any) -> Decimal:
    """Return ``value`` as a Decimal, or 0 when it is not a usable amount.

    Only finite, non-negative ints, floats and Decimals count. Anything else
    (None, strings, bools, NaN, infinities, negatives) degrades to 0.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return _ZERO
    if isinstance(value, float):
        if not math.isfinite(value):
            return _ZERO
        value = Decimal(str(value))
    elif isinstance(value, Decimal) and not value.is_finite():
        return _ZERO
    amount = Decimal(value)
    if amount < 0:
        return _ZERO
    return amount


def safe_quantity(value: Any) -> int:
    """Return a selection count, 0 for anything that is not a usable number."""
    return int(safe(value))


def _exact_precision(amounts: list[Decimal]) -> int:
    """Precision that keeps sums and products of ``amounts`` unrounded."""
    digits = 0
    for amount in amounts:
        _, mantissa, exponent = amount.as_tuple()
        digits += len(mantissa) + abs(exponent)
    return digits + 2


def extras_total(extras: tuple[Extra, ...]) -> Decimal:
    terms = [(safe(extra.value), Decimal(safe_quantity(extra.quantity))) for extra in extras]
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _exact_precision([amount for term in terms for amount in term]))
        return sum((value * quantity for value, quantity in terms), _ZERO)


def grand_total(unit_price: Any, food_quantity: int, extras: tuple[Extra, ...]) -> Decimal:
    """Compute the order total for one food line and its extras."""
    price = safe(unit_price)
    quantity = Decimal(food_quantity)
    extras_sum = extras_total(extras)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _exact_precision([price, quantity, extras_sum]))
        return price * quantity + extras_sum


def favorite_icon(is_favorite: bool) -> FavoriteIcon:
    if is_favorite:
        return FavoriteIcon.FILLED
    return FavoriteIcon.OUTLINE


def copy_extras(extras: tuple[Extra, ...] | list[Extra]) -> tuple[Extra, ...]:
    """Copy fetched extras, normalizing each quantity to a valid count."""
    return tuple(replace(extra, quantity=safe_quantity(extra.quantity)) for extra in extras)


class OrderComposer:
    """Owns the state of one food-details screen.

    Every extra transition builds a new ``extras`` tuple; ``Extra`` values are
    frozen, so nothing here is shared with the catalog that supplied them.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        on_finish: Callable[[], None] | None = None,
    ) -> None:
        self.catalog = catalog
        self.on_finish = on_finish
        self.food: FoodItem | None = None
        self.extras: tuple[Extra, ...] = ()
        self.food_quantity = 1
        self.is_favorite = False
        self._load_generation = 0

    async def load(self, food_id: int) -> OrderComposer:
        """Fetch ``food_id`` from the catalog and make it the current food.

        Catalog errors propagate unchanged and leave the state untouched. When
        loads overlap, only the most recently started one is applied.
        """
        if self.catalog is None:
            raise RuntimeError("OrderComposer has no catalog to load from")

        self._load_generation += 1
        generation = self._load_generation
        food = await self.catalog.fetch_food(food_id)

        if generation != self._load_generation:
            logger.info("load_discarded food_id=%s generation=%s current=%s", food_id, generation, self._load_generation)
            return self

        self.apply_food(food)
        logger.info("load_applied food_id=%s extras=%s", food_id, len(self.extras))
        return self

    def apply_food(self, food: FoodItem) -> None:
        self.food = food
        self.extras = copy_extras(food.extras)

    def increment_extra(self, extra_id: int) -> None:
        self._update_extra(extra_id, lambda quantity: max(0, quantity) + 1)

    def decrement_extra(self, extra_id: int) -> None:
        self._update_extra(extra_id, lambda quantity: quantity - 1 if quantity > 0 else quantity)

    def increment_food(self) -> None:
        self.food_quantity += 1
        logger.debug("food_quantity=%s", self.food_quantity)

    def decrement_food(self) -> None:
        if self.food_quantity > 1:
            self.food_quantity -= 1
        logger.debug("food_quantity=%s", self.food_quantity)

    def toggle_favorite(self) -> None:
        self.is_favorite = not self.is_favorite

    def finish_order(self) -> None:
        """Hand off to the orders destination. No order record is built."""
        logger.info("finish_order food_id=%s", self.food.id if self.food else None)
        if self.on_finish is not None:
            self.on_finish()

    @property
    def favorite_icon(self) -> FavoriteIcon:
        return favorite_icon(self.is_favorite)

    @property
    def total(self) -> Decimal:
        unit_price = self.food.price if self.food is not None else 0
        return grand_total(unit_price, self.food_quantity, self.extras)

    @property
    def cart_total(self) -> str:
        return format_value(self.total)

    @property
    def formatted_price(self) -> str:
        return format_value(safe(self.food.price) if self.food is not None else 0)

    def extra_by_id(self, extra_id: int) -> Extra | None:
        for extra in self.extras:
            if extra.id == extra_id:
                return extra
        return None

    def _update_extra(self, extra_id: int, change: Callable[[int], int]) -> None:
        current = self.extra_by_id(extra_id)
        if current is None:
            return

        stored = safe_quantity(current.quantity)
        quantity = change(stored)
        if quantity == stored:
            return

        self.extras = tuple(replace(extra, quantity=quantity) if extra.id == extra_id else extra for extra in self.extras)
        logger.debug("extra_id=%s quantity=%s", extra_id, quantity)
