"""Menu catalog lookups."""

from decimal import Decimal

from sqlalchemy.orm import Session

from eelhouse.models.menu import MenuItem


def list_menu_items(db: Session) -> list[MenuItem]:
    """Return the whole menu in catalog order."""
    return db.query(MenuItem).order_by(MenuItem.id.asc()).all()


def list_menu_items_by_category(db: Session, category: str) -> list[MenuItem]:
    """Return menu items of one category."""
    return db.query(MenuItem).filter(MenuItem.category == category).order_by(MenuItem.id.asc()).all()


def get_menu_item(db: Session, menu_item_id: int) -> MenuItem | None:
    return db.get(MenuItem, menu_item_id)


def get_menu_items_by_ids(db: Session, menu_item_ids: set[int]) -> dict[int, MenuItem]:
    """Return the menu items that exist among menu_item_ids, keyed by id."""
    if not menu_item_ids:
        return {}
    rows = db.query(MenuItem).filter(MenuItem.id.in_(menu_item_ids)).all()
    return {row.id: row for row in rows}


def create_menu_item(
    db: Session,
    *,
    name: str,
    description: str,
    price: Decimal,
    category: str,
    type: str,
    image_url: str,
    commit: bool = True,
) -> MenuItem:
    """Create and persist a menu item."""
    item = MenuItem(
        name=name,
        description=description,
        price=price,
        category=category,
        type=type,
        image_url=image_url,
    )
    db.add(item)
    if commit:
        db.commit()
        db.refresh(item)
    return item
