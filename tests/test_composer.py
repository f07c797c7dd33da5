import asyncio
import math
from decimal import Decimal

import pytest

from food_details.catalog import FoodNotFoundError, InMemoryCatalog
from food_details.composer import OrderComposer, copy_extras, favorite_icon, grand_total, safe, safe_quantity
from food_details.models import Extra, FavoriteIcon, FoodItem


def _food(price=10, extras=()) -> FoodItem:
    return FoodItem(id=1, name="Ao molho", price=price, extras=tuple(extras))


def _composer_with(food: FoodItem) -> OrderComposer:
    composer = OrderComposer()
    composer.apply_food(food)
    return composer


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (3, Decimal(3)),
        (1.5, Decimal("1.5")),
        (Decimal("2.25"), Decimal("2.25")),
        (None, Decimal(0)),
        ("3", Decimal(0)),
        (True, Decimal(0)),
        (math.nan, Decimal(0)),
        (math.inf, Decimal(0)),
        (-4, Decimal(0)),
    ],
)
def test_safe_degrades_invalid_values_to_zero(raw, expected):
    assert safe(raw) == expected


def test_safe_quantity_is_integral():
    assert safe_quantity(2) == 2
    assert safe_quantity(2.9) == 2
    assert safe_quantity(None) == 0
    assert safe_quantity("two") == 0


def test_total_for_documented_example():
    composer = _composer_with(_food(price=10, extras=[Extra(id=1, name="Bacon", value=3, quantity=2)]))
    composer.increment_food()

    assert composer.food_quantity == 2
    assert composer.total == Decimal(26)
    assert composer.cart_total == "R$ 26,00"


def test_total_is_stable_across_reads():
    composer = _composer_with(_food(price=19.9, extras=[Extra(id=1, name="Bacon", value=1.5, quantity=1)]))

    assert composer.cart_total == composer.cart_total == "R$ 21,40"


def test_total_with_invalid_extra_fields_stays_finite():
    extras = (
        Extra(id=1, name="Broken value", value=None, quantity=3),
        Extra(id=2, name="Broken quantity", value=2, quantity="lots"),
        Extra(id=3, name="Fine", value=1, quantity=1),
    )

    assert grand_total(5, 1, extras) == Decimal(6)


def test_total_before_load_is_zero():
    composer = OrderComposer()

    assert composer.food is None
    assert composer.cart_total == "R$ 0,00"


def test_total_tracks_every_change():
    composer = _composer_with(_food(price=10, extras=[Extra(id=7, name="Queijo", value=2)]))
    assert composer.total == Decimal(10)

    composer.increment_extra(7)
    assert composer.total == Decimal(12)

    composer.increment_food()
    assert composer.total == Decimal(22)

    composer.decrement_extra(7)
    assert composer.total == Decimal(20)


def test_food_quantity_never_drops_below_one():
    composer = OrderComposer()

    composer.decrement_food()
    assert composer.food_quantity == 1

    for _ in range(3):
        composer.increment_food()
    for _ in range(10):
        composer.decrement_food()
    assert composer.food_quantity == 1


def test_extra_quantity_never_drops_below_zero():
    composer = _composer_with(_food(extras=[Extra(id=1, name="Bacon", value=1.5)]))

    composer.decrement_extra(1)
    assert composer.extra_by_id(1).quantity == 0

    composer.increment_extra(1)
    composer.increment_extra(1)
    for _ in range(5):
        composer.decrement_extra(1)
    assert composer.extra_by_id(1).quantity == 0


def test_unknown_extra_id_is_a_no_op():
    composer = _composer_with(_food(extras=[Extra(id=1, name="Bacon", value=1.5, quantity=2)]))
    before = composer.extras

    composer.increment_extra(99)
    composer.decrement_extra(99)

    assert composer.extras is before


def test_increment_extra_with_invalid_quantity_starts_from_zero():
    composer = OrderComposer()
    composer.extras = (Extra(id=1, name="Bacon", value=1.5, quantity=None),)

    composer.increment_extra(1)

    assert composer.extra_by_id(1).quantity == 1


def test_extra_updates_produce_new_collections():
    original = Extra(id=1, name="Bacon", value=1.5, quantity=0)
    composer = _composer_with(_food(extras=[original, Extra(id=2, name="Frango", value=2)]))
    before = composer.extras

    composer.increment_extra(1)

    assert composer.extras is not before
    assert before[0].quantity == 0
    assert original.quantity == 0
    assert composer.extras[1] is before[1]


def test_copy_extras_normalizes_quantities():
    extras = copy_extras([Extra(id=1, name="a", value=1), Extra(id=2, name="b", value=1, quantity=math.nan)])

    assert [extra.quantity for extra in extras] == [0, 0]


def test_toggle_favorite_round_trip():
    composer = OrderComposer()
    assert composer.favorite_icon is FavoriteIcon.OUTLINE

    composer.toggle_favorite()
    assert composer.is_favorite is True
    assert composer.favorite_icon is FavoriteIcon.FILLED

    composer.toggle_favorite()
    assert composer.is_favorite is False
    assert composer.favorite_icon is FavoriteIcon.OUTLINE


def test_favorite_icon_names():
    assert favorite_icon(True).value == "favorite"
    assert favorite_icon(False).value == "favorite-border"


def test_finish_order_signals_navigation():
    calls = []
    composer = OrderComposer(on_finish=lambda: calls.append("orders"))

    composer.finish_order()

    assert calls == ["orders"]


async def test_load_copies_extras_and_keeps_quantity_and_favorite():
    payload = {
        "id": 4,
        "name": "Veggie",
        "price": 21.9,
        "extras": [{"id": 1, "name": "Bacon", "value": 1.5, "quantity": 2}, {"id": 2, "name": "Ovo", "value": 1}],
    }
    catalog = InMemoryCatalog([payload])
    composer = OrderComposer(catalog=catalog)
    composer.increment_food()
    composer.toggle_favorite()

    await composer.load(4)

    assert composer.food.name == "Veggie"
    assert [(extra.id, extra.quantity) for extra in composer.extras] == [(1, 2), (2, 0)]
    assert composer.food_quantity == 2
    assert composer.is_favorite is True

    composer.increment_extra(1)
    assert payload["extras"][0]["quantity"] == 2
    refetched = await catalog.fetch_food(4)
    assert refetched.extras[0].quantity == 2


async def test_load_failure_leaves_state_untouched():
    composer = OrderComposer(catalog=InMemoryCatalog([]))

    with pytest.raises(FoodNotFoundError):
        await composer.load(1)

    assert composer.food is None
    assert composer.extras == ()


async def test_late_result_of_older_load_is_discarded():
    release_first = asyncio.Event()

    class SlowFirstCatalog:
        def __init__(self):
            self.inner = InMemoryCatalog([{"id": 1, "name": "Old", "price": 1}, {"id": 2, "name": "New", "price": 2}])

        async def fetch_food(self, food_id):
            if food_id == 1:
                await release_first.wait()
            return await self.inner.fetch_food(food_id)

    composer = OrderComposer(catalog=SlowFirstCatalog())

    first = asyncio.create_task(composer.load(1))
    await asyncio.sleep(0)
    await composer.load(2)
    release_first.set()
    await first

    assert composer.food.name == "New"


def test_total_of_huge_amounts_is_exact_and_formats():
    composer = _composer_with(_food(price=1e30, extras=[Extra(id=1, name="Bacon", value=1, quantity=10**40)]))
    composer.increment_food()

    assert composer.total == Decimal(10**40 + 2 * 10**30)
    assert composer.cart_total == "R$ 10.000.000.002" + ".000" * 10 + ",00"


def test_grand_total_keeps_cents_on_large_totals():
    extras = (Extra(id=1, name="Bacon", value=Decimal("0.01"), quantity=1),)

    assert grand_total(10**30, 3, extras) == Decimal("3" + "0" * 30 + ".01")
