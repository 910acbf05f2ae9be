"""Shared SQLAlchemy base declarative class and model imports."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for ORM models."""


# Import model modules so metadata is populated before create_all.
from eelhouse.models import customer as _customer  # noqa: E402,F401
from eelhouse.models import menu as _menu  # noqa: E402,F401
from eelhouse.models import order as _order  # noqa: E402,F401
