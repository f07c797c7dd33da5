"""Orders screen shown after an order is confirmed."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


class OrdersScreen(ModalScreen[None]):
    """Centered confirmation that the order was handed off."""

    BINDINGS = [
        ("escape", "close", "Back"),
        ("q", "close", "Back"),
        ("ctrl+c", "close", "Back"),
    ]

    CSS = """
    OrdersScreen {
        align: center middle;
        background: $background 60%;
    }

    #orders-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #orders-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #orders-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, food_name: str = "") -> None:
        super().__init__()
        self.food_name = food_name

    def compose(self) -> ComposeResult:
        with Container(id="orders-dialog"):
            yield Static("Orders", id="orders-title")
            yield Static(id="orders-body")
            yield Static("Esc / q / Ctrl+C to go back", id="orders-help")

    def on_mount(self) -> None:
        body = self.query_one("#orders-body", Static)
        if self.food_name:
            body.update(f"Order confirmed: {self.food_name}")
        else:
            body.update("Order confirmed")

    def action_close(self) -> None:
        self.dismiss()
