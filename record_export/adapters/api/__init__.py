# record_export/adapters/api/__init__.py

"""Public API for exporting records"""

# Local imports
from record_export.adapters.api._export import export_records

__all__ = ["export_records"]
