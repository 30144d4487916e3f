# record_export/core/domain/product.py

"""Product record and its export schema"""

# Standard library imports
from decimal import Decimal
from typing import Iterator

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from record_export.core.domain.enums import FieldType
from record_export.core.domain.schema import FieldSpec
from record_export.core.domain.schema import RecordSchema


class Product(BaseModel):
    """A product line with price and stock level

    Identity is the id field. Uniqueness of ids is left to the caller.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal = Field(description="Unit price")
    stock: int = Field(description="Units in stock")

    def __str__(self) -> str:
        return PRODUCT_SCHEMA.describe(self)


PRODUCT_SCHEMA: RecordSchema[Product] = RecordSchema(
    type_name="Product",
    fields=(
        FieldSpec("Id", FieldType.INTEGER, lambda product: product.id),
        FieldSpec("Name", FieldType.TEXT, lambda product: product.name),
        FieldSpec("Price", FieldType.CURRENCY, lambda product: product.price),
        FieldSpec("Stock", FieldType.QUANTITY, lambda product: product.stock),
    ),
)


def generate_sample_products(count: int = 30) -> Iterator[Product]:
    """Yield demo products numbered from 1

    Product ``i`` is named ``"Product i"``, costs ``i + 100`` and has ``i`` units in stock.

    Args:
        count: Number of products to generate

    Yields:
        Product instances in id order
    """
    if count < 0:
        raise ValueError(f"Product count cannot be negative, got {count}")

    for index in range(1, count + 1):
        yield Product(id=index, name=f"Product {index}", price=Decimal(index + 100), stock=index)


__all__ = ["PRODUCT_SCHEMA", "Product", "generate_sample_products"]
