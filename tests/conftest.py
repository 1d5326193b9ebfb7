"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Keep tests independent of any local .env vendor credentials
os.environ.setdefault("PRINTIFY_API_KEY", "")
os.environ.setdefault("PRINTFUL_API_KEY", "")
os.environ.setdefault("LOG_JSON", "false")


@pytest.fixture
def printify_product_payload() -> dict:
    """A Printify product as returned by /shops/{id}/products/{id}.json."""
    return {
        "id": "42",
        "title": "Custom Hoodie",
        "description": "Warm and comfortable hoodie with your unique design.",
        "images": [
            {"src": "https://images.printify.com/mock/hoodie-1.jpg", "variant_ids": [5, 6, 7]},
            {"src": "https://images.printify.com/mock/hoodie-2.jpg", "variant_ids": [5]},
        ],
        "variants": [
            {"id": 5, "title": "Small - Black", "price": 4500, "currency": "USD", "is_enabled": True},
            {"id": 7, "title": "Large - Navy Blue", "price": 2500, "currency": "USD", "is_enabled": True},
        ],
        "tags": ["hoodie", "warm", "custom"],
        "is_locked": False,
    }


@pytest.fixture
def printful_list_payload() -> dict:
    """A Printful v2 /products listing."""
    return {
        "data": [
            {
                "id": None,
                "name": "SwingHigh Golf Polo",
                "thumbnail_url": "https://files.printful.com/polo.png",
                "tags": ["golf"],
                "published_to_stores": [
                    {"store_id": 16386751, "sync_product_id": 301, "sync_product_external_id": "ext-301"}
                ],
            },
            {
                "id": None,
                "name": "Plain Tote",
                "thumbnail_url": "https://files.printful.com/tote.png",
                "tags": [],
                "published_to_stores": [
                    {"store_id": 16386751, "sync_product_id": 302}
                ],
            },
            {
                "id": None,
                "name": "Beach Towel",
                "tags": ["SwingHigh"],
                "published_to_stores": [
                    {"store_id": 16386751, "sync_product_id": 303}
                ],
            },
        ],
        "paging": {"total": 3, "offset": 0, "limit": 100},
    }


@pytest.fixture
def printful_v1_payload() -> dict:
    """A Printful v1 /sync/products/{id} body."""
    return {
        "code": 200,
        "result": {
            "sync_product": {
                "id": 301,
                "external_id": "ext-301",
                "name": "SwingHigh Golf Polo",
                "thumbnail_url": "https://files.printful.com/polo.png",
                "variants": 2,
                "synced": 2,
            },
            "sync_variants": [
                {
                    "id": 9001,
                    "name": "SwingHigh Golf Polo / Navy / M",
                    "synced": True,
                    "variant_id": 4012,
                    "retail_price": "45.00",
                    "currency": "USD",
                    "product": {"variant_id": 4012, "product_id": 12, "image": "https://files.printful.com/v/4012.png"},
                    "files": [
                        {"id": 1, "type": "default", "url": "https://files.printful.com/print.png", "visible": True},
                        {"id": 2, "type": "preview", "url": "https://files.printful.com/preview-m.png", "visible": True},
                    ],
                    "options": [
                        {"id": "Color", "value": "Navy"},
                        {"id": "Size", "value": "M"},
                    ],
                },
                {
                    "id": 9002,
                    "name": "SwingHigh Golf Polo / Navy / L",
                    "synced": False,
                    "variant_id": 4013,
                    "retail_price": "47.50",
                    "currency": "USD",
                    "files": [
                        {"id": 3, "type": "preview", "url": "https://files.printful.com/preview-l.png", "visible": False},
                    ],
                    "options": [],
                },
            ],
        },
    }


@pytest.fixture
def printful_v2_product_payload() -> dict:
    """A Printful v2 /products/sp{id} body."""
    return {
        "data": {
            "id": 301,
            "name": "SwingHigh Golf Polo",
            "description": "Breathable polo for the course.",
            "thumbnail_url": "https://files.printful.com/polo.png",
            "tags": ["golf"],
        }
    }
