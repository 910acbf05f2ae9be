"""Menu endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eelhouse.db.session import get_db
from eelhouse.models.menu import MenuItem
from eelhouse.schemas.menu import MenuItemResponse
from eelhouse.services.menu_service import get_menu_item, list_menu_items, list_menu_items_by_category

router: APIRouter = APIRouter()


@router.get("", response_model=list[MenuItemResponse])
def get_menu_items(db: Session = Depends(get_db)) -> list[MenuItem]:
    """Return the full menu."""
    return list_menu_items(db)


@router.get("/category/{category}", response_model=list[MenuItemResponse])
def get_menu_items_for_category(category: str, db: Session = Depends(get_db)) -> list[MenuItem]:
    """Return menu items of one category; unknown categories give an empty list."""
    return list_menu_items_by_category(db, category)


@router.get("/{menu_item_id}", response_model=MenuItemResponse)
def get_single_menu_item(menu_item_id: int, db: Session = Depends(get_db)) -> MenuItem:
    item = get_menu_item(db, menu_item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Menu item not found")
    return item
