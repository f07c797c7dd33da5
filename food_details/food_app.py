"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from food_details.catalog import Catalog, CatalogError
from food_details.composer import OrderComposer, safe
from food_details.orders_screen import OrdersScreen
from food_details.rendering import format_extra_row, format_favorite, format_food_card, format_value

logger = logging.getLogger(__name__)


class FoodDetailsApp(App):
    """A Textual app for composing an order of one food and its extras."""

    TITLE = "Food Details"
    SUB_TITLE = "Extras / Order total"

    CSS = """
    Screen {
        layout: vertical;
    }

    #food-pane {
        height: auto;
        border: round $primary;
        padding: 1;
    }

    #favorite {
        width: 3;
    }

    #food-card {
        width: 1fr;
    }

    #extras-pane {
        height: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #extras-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #total-pane {
        height: auto;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    extra_cursor = reactive(0)

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous extra"),
        ("down", "move_cursor(1)", "Next extra"),
        ("right", "increment_extra", "Add extra"),
        ("left", "decrement_extra", "Remove extra"),
        Binding("ctrl+s", "finish_order", "Confirm order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, food_id: int, catalog: Catalog) -> None:
        super().__init__()
        self.food_id = food_id
        self.composer = OrderComposer(catalog=catalog, on_finish=self._show_orders)
        self.system_status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="food-pane"):
            yield Static(id="food-card")
            yield Static(id="favorite")
        with Vertical(id="extras-pane"):
            yield Static("Extras", classes="pane-title")
            yield Static("(no extras)", id="extras-list")
        with Vertical(id="total-pane"):
            yield Static("Order total", classes="pane-title")
            yield Static(id="cart-total")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self.load_food(self.food_id)

    def load_food(self, food_id: int) -> None:
        """Start loading ``food_id``; a newer load replaces an in-flight one."""
        self.food_id = food_id
        self.system_status = "Loading..."
        self._refresh_all()
        self.run_worker(self._load_food(food_id), exclusive=True, group="load-food")

    async def _load_food(self, food_id: int) -> None:
        try:
            await self.composer.load(food_id)
        except CatalogError as exc:
            logger.warning("load_failed food_id=%s error=%s", food_id, exc)
            self.system_status = str(exc)
        else:
            self.system_status = ""
            self.extra_cursor = 0
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, OrdersScreen):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key in {"+", "="}:
            self.action_increment_food()
        elif key == "-":
            self.action_decrement_food()
        elif key == "f":
            self.action_toggle_favorite()
        elif key == "j":
            self.action_move_cursor(1)
        elif key == "k":
            self.action_move_cursor(-1)
        elif key == "l":
            self.action_increment_extra()
        elif key == "h":
            self.action_decrement_extra()
        else:
            return
        event.stop()

    def action_increment_food(self) -> None:
        self.composer.increment_food()
        self._refresh_total()

    def action_decrement_food(self) -> None:
        self.composer.decrement_food()
        self._refresh_total()

    def action_toggle_favorite(self) -> None:
        self.composer.toggle_favorite()
        self._refresh_favorite()

    def action_move_cursor(self, delta: int) -> None:
        if isinstance(self.screen, OrdersScreen):
            return
        extras = self.composer.extras
        if not extras:
            return
        self.extra_cursor = (self.extra_cursor + delta) % len(extras)
        self._refresh_extras()

    def action_increment_extra(self) -> None:
        if isinstance(self.screen, OrdersScreen):
            return
        extra_id = self._selected_extra_id()
        if extra_id is None:
            return
        self.composer.increment_extra(extra_id)
        self._refresh_extras()
        self._refresh_total()

    def action_decrement_extra(self) -> None:
        if isinstance(self.screen, OrdersScreen):
            return
        extra_id = self._selected_extra_id()
        if extra_id is None:
            return
        self.composer.decrement_extra(extra_id)
        self._refresh_extras()
        self._refresh_total()

    def action_finish_order(self) -> None:
        if isinstance(self.screen, OrdersScreen):
            return
        self.composer.finish_order()

    def _show_orders(self) -> None:
        food = self.composer.food
        self.push_screen(OrdersScreen(food.name if food is not None else ""))

    def _selected_extra_id(self) -> int | None:
        extras = self.composer.extras
        if not (0 <= self.extra_cursor < len(extras)):
            return None
        return extras[self.extra_cursor].id

    def _refresh_all(self) -> None:
        self._refresh_food()
        self._refresh_favorite()
        self._refresh_extras()
        self._refresh_total()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_food(self) -> None:
        try:
            card = self.query_one("#food-card", Static)
        except NoMatches:
            return
        food = self.composer.food
        if food is None:
            card.update(self.system_status or "(no food)")
            return
        card.update(format_food_card(food, self.composer.formatted_price))

    def _refresh_favorite(self) -> None:
        try:
            favorite = self.query_one("#favorite", Static)
        except NoMatches:
            return
        favorite.update(format_favorite(self.composer.favorite_icon))

    def _refresh_extras(self) -> None:
        try:
            extras_widget = self.query_one("#extras-list", Static)
        except NoMatches:
            return
        extras = self.composer.extras
        if not extras:
            extras_widget.update("(no extras)")
            return

        if self.extra_cursor >= len(extras):
            self.extra_cursor = len(extras) - 1

        start, end = self._window_bounds(len(extras), self._visible_rows(extras_widget), self.extra_cursor)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            extra = extras[idx]
            lines.append_text(format_extra_row(extra, format_value(safe(extra.value)), idx == self.extra_cursor))

        if end < len(extras):
            lines.append("\n⋮", style="dim")

        extras_widget.update(lines)

    def _refresh_total(self) -> None:
        try:
            total_widget = self.query_one("#cart-total", Static)
            status_bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return

        text = Text()
        text.append(self.composer.cart_total, style="bold")
        text.append(f"   - {self.composer.food_quantity} +", style="#6c6c80")
        total_widget.update(text)

        status = self.system_status or "Ready"
        status_bar.update(f"+/- quantity, J/K/H/L extras, F favorite, Ctrl+S confirm order.\n{status}")
