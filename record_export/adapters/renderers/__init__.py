# record_export/adapters/renderers/__init__.py

"""Renderers turning record sequences into document bytes"""

# Local imports
from record_export.adapters.renderers.base_renderer import BaseRenderer
from record_export.adapters.renderers.pdf_renderer import PDFRenderer
from record_export.adapters.renderers.xlsx_renderer import XLSXRenderer

__all__: list[str] = [
    "BaseRenderer",
    "PDFRenderer",
    "XLSXRenderer",
]
