"""Database seeding helpers."""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from eelhouse.models.menu import MenuItem
from eelhouse.services.menu_service import create_menu_item

logger = logging.getLogger(__name__)

DEFAULT_MENU: list[dict[str, str]] = [
    {
        "name": "Smoked Eel",
        "description": "Delicately smoked Potomac eel with herbs and spices",
        "price": "16.99",
        "category": "eel",
        "type": "smoked",
        "image_url": "https://images.unsplash.com/photo-1579584425555-c3ce17fd4351?auto=format&fit=crop&w=800&h=500",
    },
    {
        "name": "Jellied Eel",
        "description": "Traditional jellied eel in clear broth with spices",
        "price": "14.99",
        "category": "eel",
        "type": "jellied",
        "image_url": "https://miro.medium.com/v2/resize:fit:720/format:webp/1*NAh9243Gld1lLlaFGKrOKQ.jpeg",
    },
    {
        "name": "Grilled Eel",
        "description": "Char-grilled eel with sweet soy glaze",
        "price": "17.99",
        "category": "eel",
        "type": "grilled",
        "image_url": "https://images.unsplash.com/photo-1579871494447-9811cf80d66c?auto=format&fit=crop&w=800&h=500",
    },
    {
        "name": "Fried Eel",
        "description": "Crispy fried eel with special house sauce",
        "price": "15.99",
        "category": "eel",
        "type": "fried",
        "image_url": "https://images.unsplash.com/photo-1562967914-608f82629710?auto=format&fit=crop&w=800&h=500",
    },
    {
        "name": "Baked Eel",
        "description": "Slow-baked eel with herbs and seasonal vegetables",
        "price": "18.99",
        "category": "eel",
        "type": "baked",
        "image_url": "https://images.unsplash.com/photo-1432139555190-58524dae6a55?auto=format&fit=crop&w=800&h=500",
    },
    {
        "name": "Eel Sushi",
        "description": "Fresh eel sushi with cucumber and avocado",
        "price": "19.99",
        "category": "eel",
        "type": "sushi",
        "image_url": "https://images.unsplash.com/photo-1579871494447-9811cf80d66c?auto=format&fit=crop&w=800&h=500",
    },
    {
        "name": "Fat Tire Beer",
        "description": "Classic amber ale, perfect with eel dishes",
        "price": "6.99",
        "category": "beverage",
        "type": "beer",
        "image_url": "https://images.unsplash.com/photo-1584225064785-c62a8b43d148?auto=format&fit=crop&w=800&h=500",
    },
    {
        "name": "Hot Sake",
        "description": "Traditional rice wine, served warm",
        "price": "8.99",
        "category": "beverage",
        "type": "sake",
        "image_url": "https://images.unsplash.com/photo-1617196034796-73dfa7b1fd56?auto=format&fit=crop&w=800&h=500",
    },
]


def ensure_menu_seeded(session: Session) -> int:
    """Insert the default menu when the menu table is empty.

    Returns the number of inserted items.
    """
    existing = session.query(MenuItem.id).count()
    if existing > 0:
        logger.info("Menu already contains %s items; skipping seed.", existing)
        return 0

    for entry in DEFAULT_MENU:
        create_menu_item(
            session,
            name=entry["name"],
            description=entry["description"],
            price=Decimal(entry["price"]),
            category=entry["category"],
            type=entry["type"],
            image_url=entry["image_url"],
            commit=False,
        )
    session.commit()
    logger.info("Seeded %s menu items.", len(DEFAULT_MENU))
    return len(DEFAULT_MENU)
