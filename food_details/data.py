"""Sample food payloads for offline use."""

from __future__ import annotations

from typing import Any

SAMPLE_FOODS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Ao molho",
        "description": "Macarrão ao molho branco, fughi e cheiro verde das montanhas.",
        "price": 19.9,
        "category": 1,
        "image_url": "https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/ao_molho.png",
        "thumbnail_url": "https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/ao_molho.png",
        "extras": [
            {"id": 1, "name": "Bacon", "value": 1.5},
            {"id": 2, "name": "Frango", "value": 2},
        ],
    },
    {
        "id": 2,
        "name": "Veggie",
        "description": "Macarrão com pimentão, ervilha e ervas finas colhidas no himalaia.",
        "price": 21.9,
        "category": 1,
        "image_url": "https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/veggie.png",
        "thumbnail_url": "https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/veggie.png",
        "extras": [
            {"id": 3, "name": "Bacon", "value": 1.5},
        ],
    },
    {
        "id": 3,
        "name": "A la Camarón",
        "description": "Macarrão com vegetais de primeira linha e camarão dos 7 mares.",
        "price": 25.9,
        "category": 1,
        "image_url": "https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/camarao.png",
        "thumbnail_url": "https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/camarao.png",
        "extras": [
            {"id": 4, "name": "Bacon", "value": 1.5},
            {"id": 5, "name": "Queijo extra", "value": 3, "quantity": 0},
        ],
    },
]
