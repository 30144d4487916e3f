# record_export/shared/mixins/mixins.py

"""Mixins shared by renderers and the invoker

ConfigurableMixin lets a class take an optional ConfigLoader and fall back
to the process-wide default one.
"""

# Local imports
from record_export.infrastructure.config import ConfigLoader
from record_export.infrastructure.config import get_config


class ConfigurableMixin:
    """Optional-config constructor support (XLSXRenderer, PDFRenderer, ExportInvoker)"""

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """The given loader, or the cached default from get_config()"""
        return config if config is not None else get_config()
