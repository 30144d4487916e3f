# record_export/adapters/cli/__init__.py

"""CLI adapter for the record export tool"""

# Local imports
from record_export.adapters.cli.main import main
from record_export.adapters.cli.parser import create_argument_parser

__all__ = [
    "create_argument_parser",
    "main",
]
