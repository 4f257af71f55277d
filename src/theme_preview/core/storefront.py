"""Mock storefront objects so themes render without a live shop behind them."""

import copy
from typing import Any

_PLACEHOLDER_IMAGE = "https://via.placeholder.com/{size}?text={text}"

_STOREFRONT: dict[str, Any] = {
    "shop": {
        "name": "Demo Store",
        "email": "example@example.com",
        "url": "#",
        "description": "A demo store for theme preview",
        "currency": "USD",
    },
    "product": {
        "title": "Sample Product",
        "vendor": "Sample Vendor",
        "description": "This is a sample product description.",
        "price": 19.99,
        "compare_at_price": 29.99,
        "featured_image": _PLACEHOLDER_IMAGE.format(size="500x500", text="1"),
        "images": [_PLACEHOLDER_IMAGE.format(size="500x500", text=str(i)) for i in range(1, 4)],
        "tags": ["Sample", "Demo", "Test"],
        "type": "Sample Type",
        "available": True,
    },
    "collections": {
        "all": {
            "title": "All Products",
            "products": [
                {
                    "title": f"Product {i}",
                    "price": round(9.99 + i * 7.5, 2),
                    "featured_image": _PLACEHOLDER_IMAGE.format(size="300x300", text=f"Product{i}"),
                }
                for i in range(1, 11)
            ],
        },
    },
    "cart": {
        "item_count": 2,
        "total_price": 39.98,
        "items": [
            {
                "title": "Sample Product",
                "quantity": 1,
                "price": 19.99,
                "line_price": 19.99,
                "featured_image": _PLACEHOLDER_IMAGE.format(size="100x100", text="1"),
            },
            {
                "title": "Another Product",
                "quantity": 1,
                "price": 19.99,
                "line_price": 19.99,
                "featured_image": _PLACEHOLDER_IMAGE.format(size="100x100", text="2"),
            },
        ],
    },
    "page": {
        "title": "Sample Page",
        "content": "<p>This is a sample page content.</p>",
    },
}


def default_storefront_data() -> dict[str, Any]:
    """Return a fresh deep copy of the mock storefront context."""
    return copy.deepcopy(_STOREFRONT)
