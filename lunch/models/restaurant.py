"""Restaurant model."""

from sqlalchemy import Column, String

from lunch.database import Base


class Restaurant(Base):
    """A place to go for lunch."""

    __tablename__ = "restaurants"

    name = Column(String, primary_key=True)
    category = Column(String(20), nullable=False)  # "Cheap" | "Normal"

    def __repr__(self) -> str:
        return f"Restaurant(name={self.name!r}, category={self.category!r})"
