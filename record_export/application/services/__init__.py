# record_export/application/services/__init__.py

"""Application services for orchestration.

This module provides the invoker that runs export commands alone or as
one archived batch.
"""

# Local imports
from record_export.application.services._export_invoker import ExportInvoker

__all__ = ["ExportInvoker"]
