"""
Shared test fixtures and utilities for the test suite.

Helpers and reference records reused across test files.
"""

import uuid
from unittest.mock import Mock


# Helper function to generate unique emails
def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def image_response(content=b"\x89PNG fake image", content_type="image/png"):
    """Successful HTTP response carrying image bytes"""
    response = Mock()
    response.content = content
    response.headers = {"Content-Type": content_type}
    response.raise_for_status = Mock()
    return response


# Two categories, three customizations, one menu item
SMALL_SEED = {
    "categories": [
        {"name": "Burgers", "description": "Juicy grilled burgers"},
        {"name": "Pizzas", "description": "Oven-baked cheesy pizzas"},
    ],
    "customizations": [
        {"name": "Extra Cheese", "price": 25, "type": "topping"},
        {"name": "Fries", "price": 35, "type": "side"},
        {"name": "Thin Crust", "price": 0, "type": "crust"},
    ],
    "menu": [
        {
            "name": "Classic Cheeseburger",
            "description": "Beef patty, cheese, lettuce, tomato",
            "image_url": "https://images.test/burgers/classic.png",
            "price": 25.99,
            "rating": 4.5,
            "calories": 550,
            "protein": 25,
            "category_name": "Burgers",
            "customizations": ["Extra Cheese", "Fries"],
        }
    ],
}


def menu_entry(name, category_name, customizations=(), image_url=None, price=10.0):
    """Seed menu entry with plausible defaults"""
    slug = name.lower().replace(" ", "-")
    return {
        "name": name,
        "description": f"{name} made fresh",
        "image_url": image_url or f"https://images.test/{slug}.png",
        "price": price,
        "rating": 4.0,
        "calories": 500,
        "protein": 20,
        "category_name": category_name,
        "customizations": list(customizations),
    }
