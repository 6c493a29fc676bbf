"""Product model."""
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field

from productlist.domain.types import ProductId, ProductName


def new_product_id() -> ProductId:
    """Generate a fresh, never reused product id."""
    return ProductId(uuid4())


class Product(BaseModel):
    """A named product identified by an immutable id."""
    id: ProductId = Field(default_factory=new_product_id, frozen=True)
    name: ProductName

    # Renames go through the same trimming/non-empty check as creation
    model_config = ConfigDict(validate_assignment=True)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"
