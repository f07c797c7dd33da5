"""Entry point for the food-details Textual app."""

from __future__ import annotations

import argparse
from typing import Sequence

from food_details.catalog import Catalog, HttpCatalog, InMemoryCatalog
from food_details.config import API_BASE_URL, OFFLINE
from food_details.data import SAMPLE_FOODS
from food_details.food_app import FoodDetailsApp
from food_details.logs import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="food-details", description="Compose an order for one food.")
    parser.add_argument("food_id", type=int, help="id of the food to open")
    parser.add_argument("--api-url", default=API_BASE_URL, help="catalog API base URL")
    parser.add_argument(
        "--offline",
        action="store_true",
        default=OFFLINE,
        help="serve foods from the bundled sample data",
    )
    return parser


def build_catalog(args: argparse.Namespace) -> Catalog:
    if args.offline:
        return InMemoryCatalog(SAMPLE_FOODS)
    return HttpCatalog(base_url=args.api_url)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    configure_logging()
    FoodDetailsApp(args.food_id, build_catalog(args)).run()


if __name__ == "__main__":
    main()
