# record_export/core/domain/schema.py

"""Statically declared record schemas

A schema is the ordered list of fields a renderer reads from each record.
Renderers never inspect record types at runtime; everything they need
(column names, semantic types, how to read a value) is declared here.
"""

# Standard library imports
from dataclasses import dataclass
from decimal import Decimal

# Local imports
from record_export.core.domain.enums import FieldType
from record_export.core.domain.errors import RenderError
from record_export.core.types.aliases import CellValue
from record_export.core.types.aliases import FieldAccessor

# Python types accepted for each semantic type. bool is rejected separately
# since it is a subclass of int.
_ACCEPTED_TYPES: dict[FieldType, tuple[type, ...]] = {
    FieldType.INTEGER: (int,),
    FieldType.TEXT: (str,),
    FieldType.CURRENCY: (Decimal, int, float),
    FieldType.QUANTITY: (int,),
}


@dataclass(frozen=True, slots=True)
class FieldSpec[R]:
    """One named, typed column of a record schema"""

    name: str
    field_type: FieldType
    accessor: FieldAccessor[R]

    def extract(self, record: R) -> CellValue:
        """Read this field from a record and check it against the semantic type

        Args:
            record: Record to read from

        Returns:
            The field value

        Raises:
            RenderError: If the accessor fails or returns a value of the wrong type
        """
        try:
            value = self.accessor(record)
        except Exception as e:
            raise RenderError(f"Cannot read field '{self.name}' from {record!r}: {e}") from e

        if value is None:
            return None

        accepted = _ACCEPTED_TYPES[self.field_type]
        if isinstance(value, bool) or not isinstance(value, accepted):
            raise RenderError(
                f"Field '{self.name}' expects {self.field_type.value}, "
                f"got {type(value).__name__}: {value!r}"
            )
        return value


@dataclass(frozen=True, slots=True)
class RecordSchema[R]:
    """Ordered field list for one record type

    The type name drives output file names (``Product`` -> ``Product.xlsx``).
    """

    type_name: str
    fields: tuple[FieldSpec[R], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        if not self.type_name:
            raise ValueError("Record schema needs a type name")
        if not self.fields:
            raise ValueError(f"Record schema '{self.type_name}' declares no fields")

        names = [spec.name for spec in self.fields]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"Record schema '{self.type_name}' has duplicate fields: {', '.join(duplicates)}"
            )

    @property
    def field_names(self) -> list[str]:
        """Field names in declared order"""
        return [spec.name for spec in self.fields]

    def values(self, record: R) -> list[CellValue]:
        """Field values of one record in declared order"""
        return [spec.extract(record) for spec in self.fields]

    def describe(self, record: R) -> str:
        """Human-readable multi-line representation, one ``name : value`` line per field"""
        return "\n".join(f"{spec.name} : {spec.extract(record)}" for spec in self.fields)


__all__ = ["FieldSpec", "RecordSchema"]
