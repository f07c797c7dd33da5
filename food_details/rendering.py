"""Price formatting and rich rendering helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from rich.text import Text

from food_details.config import CURRENCY_SYMBOL
from food_details.models import Extra, FavoriteIcon, FoodItem

_CENTS = Decimal("0.01")

FAVORITE_GLYPHS: dict[FavoriteIcon, str] = {
    FavoriteIcon.FILLED: "♥",
    FavoriteIcon.OUTLINE: "♡",
}


def format_value(amount: Any) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,50``."""
    value = Decimal(str(amount))
    with localcontext() as ctx:
        # Room for every integer digit plus the cents.
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        # en-US grouping first, then swap the separators to pt-BR.
        grouped = f"{abs(value):,.2f}".translate(str.maketrans({",": ".", ".": ","}))
    return f"{sign}{CURRENCY_SYMBOL} {grouped}"


def favorite_style(icon: FavoriteIcon) -> str:
    if icon is FavoriteIcon.FILLED:
        return "bold #ffb84d"
    return "#6c6c80"


def format_favorite(icon: FavoriteIcon) -> Text:
    """Render the favorite toggle as a colored heart."""
    return Text(FAVORITE_GLYPHS[icon], style=favorite_style(icon))


def format_food_card(food: FoodItem, formatted_price: str) -> Text:
    text = Text()
    text.append(food.name, style="bold")
    if food.description:
        text.append(f"\n{food.description}")
    text.append(f"\n{formatted_price}", style="bold #39b100")
    if food.image_url:
        text.append(f"\n{food.image_url}", style="dim")
    return text


def format_extra_row(extra: Extra, formatted_value: str, selected: bool) -> Text:
    """Render one extra as ``➤ name  value   - qty +``."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(extra.name, style="bold" if selected else "")
    text.append(f"  {formatted_value}", style="dim")
    text.append("   - ", style="#6c6c80")
    text.append(str(extra.quantity), style="bold")
    text.append(" +", style="#6c6c80")
    return text
