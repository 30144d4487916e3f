# record_export/core/domain/__init__.py

"""Core domain models: records, schemas and export errors"""

# Local imports
from record_export.core.domain.enums import FieldType
from record_export.core.domain.enums import OutputFormat
from record_export.core.domain.errors import ArchiveError
from record_export.core.domain.errors import ExportError
from record_export.core.domain.errors import PreconditionError
from record_export.core.domain.errors import RenderError
from record_export.core.domain.product import PRODUCT_SCHEMA
from record_export.core.domain.product import Product
from record_export.core.domain.product import generate_sample_products
from record_export.core.domain.schema import FieldSpec
from record_export.core.domain.schema import RecordSchema

__all__ = [
    "ArchiveError",
    "ExportError",
    "FieldSpec",
    "FieldType",
    "OutputFormat",
    "PRODUCT_SCHEMA",
    "PreconditionError",
    "Product",
    "RecordSchema",
    "RenderError",
    "generate_sample_products",
]
