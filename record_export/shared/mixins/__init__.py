# record_export/shared/mixins/__init__.py

"""Shared mixins for cross-cutting concerns"""

# Local imports
from record_export.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
