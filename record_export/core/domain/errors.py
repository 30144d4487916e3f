# record_export/core/domain/errors.py

"""Exception hierarchy for export operations

File write failures are not wrapped: they surface as the OSError raised
by the operating system.
"""


class ExportError(Exception):
    """Base class for all export errors"""


class RenderError(ExportError):
    """Record sequence has a shape the renderer cannot turn into a file"""


class ArchiveError(ExportError):
    """Archive entry could not be written (duplicate name, closed or corrupt archive)"""


class PreconditionError(ExportError):
    """Operation invoked before its required setup"""
