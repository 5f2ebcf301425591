from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import MappedAsDataclass
from sqlalchemy.orm import mapped_column


class Base(MappedAsDataclass, AsyncAttrs, DeclarativeBase, kw_only=True):
    """Base class for all SQLAlchemy declarative models in the application.

    This class combines:
      - `MappedAsDataclass` for dataclass-like behavior
      - `AsyncAttrs` for asynchronous attribute access
      - `DeclarativeBase` to enable declarative mapping of Python classes to database tables.
    """

    pass


class NumericIdMixin(MappedAsDataclass, kw_only=True):
    """A mixin for SQLAlchemy models that provides an auto-incrementing integer primary key.

    The value is generated by the database on insert and never set by the application.
    """

    id: Mapped[int] = mapped_column(
        primary_key=True,
        autoincrement=True,
        sort_order=-100,
        init=False,
    )
