# record_export/application/commands/__init__.py

"""Export commands and the factories that build them"""

# Local imports
from record_export.application.commands._export_command import ExportCommand
from record_export.application.commands._factories import create_command
from record_export.application.commands._factories import create_pdf_command
from record_export.application.commands._factories import create_xlsx_command

__all__ = [
    "ExportCommand",
    "create_command",
    "create_pdf_command",
    "create_xlsx_command",
]
