# record_export/adapters/renderers/base_renderer.py

"""Base renderer class turning a record sequence into file bytes"""

# Standard library imports
from abc import ABC
from abc import abstractmethod
from typing import ClassVar
from typing import Sequence

# Local imports
from record_export.core.domain.enums import OutputFormat
from record_export.core.domain.schema import RecordSchema
from record_export.core.types.models import RenderedOutput


class BaseRenderer[R](ABC):
    """Base class for renderers driven by a record schema

    Every renderer is a pure function of its input: each ``render`` call
    builds a fresh buffer and nothing is cached between calls. The output
    file name depends only on the schema's type name and the format, so it
    can be queried without rendering.
    """

    output_format: ClassVar[OutputFormat]

    def __init__(self, schema: RecordSchema[R]):
        """Initialize the renderer with the schema of the records it renders

        Args:
            schema: Ordered field declarations for the record type
        """
        self.schema = schema

    @property
    def file_name(self) -> str:
        """Output file name, e.g. ``Product.xlsx``"""
        return f"{self.schema.type_name}.{self.output_format.extension}"

    @abstractmethod
    def render(self, records: Sequence[R]) -> bytes:
        """Render records into the bytes of one file

        This method must be implemented by each renderer subclass.
        """
        pass

    def render_output(self, records: Sequence[R]) -> RenderedOutput:
        """Render records and pair the bytes with the output file name"""
        return RenderedOutput(file_name=self.file_name, content=self.render(records))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.file_name!r})"
