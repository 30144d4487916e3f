# record_export/core/types/aliases.py

"""Type aliases for record values using Python 3.13 type statements."""

# Standard library imports
from decimal import Decimal
from typing import Callable

# Modern type statements (Python 3.13)
type CellValue = int | float | Decimal | str | None  # Anything a field accessor may return
type FieldAccessor[R] = Callable[[R], CellValue]  # Record -> field value

__all__ = [
    "CellValue",
    "FieldAccessor",
]
