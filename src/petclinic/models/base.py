"""
Base model classes for all SQLAlchemy models in the petclinic package.

Every entity carries a database-assigned integer primary key. ``Person``
adds the first/last name columns shared by owners and vets, and
``NamedModel`` the single ``name`` column used by tag-like entities.

Example:
    >>> from petclinic.models.base import BaseModel
    >>> from sqlalchemy.orm import Mapped, mapped_column
    >>> from sqlalchemy import String

    >>> class MyModel(BaseModel):
    ...     __tablename__ = "my_table"
    ...     name: Mapped[str] = mapped_column(String(100))

    >>> instance = MyModel(name="Test")
    >>> instance.is_new
    True
"""

from datetime import date, datetime
from typing import Any, Dict

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base declarative class for all SQLAlchemy models."""


class BaseModel(Base):
    """
    Abstract base model providing the integer identity and helpers.

    Attributes:
        id (int): Primary key, assigned by the database on first flush
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """
        Return string representation of the model instance.

        Returns:
            String in format: <ModelName(id=...)>
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    @property
    def is_new(self) -> bool:
        """True until the entity has been persisted and given an id."""
        return self.id is None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert column values to a JSON-serializable dictionary.

        Dates and datetimes are rendered in ISO format; relationships are
        not included.
        """
        result: Dict[str, Any] = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, (date, datetime)):
                result[column.key] = value.isoformat()
            else:
                result[column.key] = value
        return result

    def update_fields(self, **kwargs: Any) -> None:
        """
        Update multiple fields on the model instance in a single operation.

        Raises:
            AttributeError: If any field name doesn't exist on the model.

        Note:
            This method only modifies the instance. The caller commits.
        """
        for field, value in kwargs.items():
            if hasattr(self, field):
                setattr(self, field, value)
            else:
                raise AttributeError(
                    f"'{self.__class__.__name__}' has no attribute '{field}'"
                )


class NamedModel(BaseModel):
    """Abstract model for entities identified by a single name."""

    __abstract__ = True

    name: Mapped[str] = mapped_column(String(80), nullable=False)

    def __str__(self) -> str:
        return self.name


class Person(BaseModel):
    """Abstract model for people (owners and vets)."""

    __abstract__ = True

    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    @property
    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name
