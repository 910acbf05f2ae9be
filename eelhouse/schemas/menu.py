"""Menu API schemas."""

from eelhouse.schemas.common import CamelModel


class MenuItemResponse(CamelModel):
    """Serialized menu item."""

    id: int
    name: str
    description: str
    price: float
    category: str
    type: str
    image_url: str
