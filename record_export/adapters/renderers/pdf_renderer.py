# record_export/adapters/renderers/pdf_renderer.py

"""PDF rendering of record sequences as a bulleted list"""

# Standard library imports
from io import BytesIO
from logging import getLogger
from typing import Sequence
from xml.sax.saxutils import escape

# Third party imports
from reportlab.lib.pagesizes import A4
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Flowable
from reportlab.platypus import ListFlowable
from reportlab.platypus import ListItem
from reportlab.platypus import Paragraph
from reportlab.platypus import SimpleDocTemplate
from reportlab.platypus import Spacer

# Local imports
from record_export.adapters.renderers.base_renderer import BaseRenderer
from record_export.core.domain.enums import OutputFormat
from record_export.core.domain.schema import RecordSchema
from record_export.infrastructure.config import ConfigLoader
from record_export.shared.mixins import ConfigurableMixin

logger = getLogger(__name__)

PAGE_SIZES = {"A4": A4, "LETTER": LETTER}
BULLET = "•"


class PDFRenderer[R](BaseRenderer[R], ConfigurableMixin):
    """Render records as an unordered list in a PDF document

    Each bullet holds the multi-line description of one record, in input
    order. Page breaks are left to the layout engine. An empty record
    sequence gives a valid document with no bullets.
    """

    output_format = OutputFormat.PDF

    def __init__(self, schema: RecordSchema[R], config: ConfigLoader | None = None):
        """Initialize the renderer

        Args:
            schema: Ordered field declarations for the record type
            config: Optional configuration, default config if None
        """
        super().__init__(schema)
        config = self._init_config(config)
        self.page_size = PAGE_SIZES[config.pdf.page_size]
        self.font_size = config.pdf.font_size
        self.title = config.pdf.title or self.schema.type_name
        self.invariant = config.pdf.invariant

    def list_items(self, records: Sequence[R]) -> list[str]:
        """Bullet texts, one per record in input order"""
        return [self.schema.describe(record) for record in records]

    def render(self, records: Sequence[R]) -> bytes:
        """Render records to PDF bytes

        Raises:
            RenderError: If a field value does not match its declared type
        """
        items = self.list_items(records)

        buffer = BytesIO()
        document = SimpleDocTemplate(
            buffer,
            pagesize=self.page_size,
            title=self.title,
            invariant=int(self.invariant),
        )
        document.build(self._build_story(items))
        content = buffer.getvalue()

        logger.debug(
            f"Rendered {len(items)} list items into {self.file_name} ({len(content):,} bytes)"
        )
        return content

    def _build_story(self, items: list[str]) -> list[Flowable]:
        """Flowables for the document body"""
        if not items:
            return [Spacer(1, 1)]

        style = self._item_style()
        list_items = [ListItem(Paragraph(self._to_markup(text), style)) for text in items]
        return [ListFlowable(list_items, bulletType="bullet", start=BULLET)]

    def _item_style(self) -> ParagraphStyle:
        """Paragraph style for bullet text"""
        base = getSampleStyleSheet()["Normal"]
        return ParagraphStyle(
            "RecordItem",
            parent=base,
            fontSize=self.font_size,
            leading=self.font_size * 1.25,
            spaceAfter=self.font_size,
        )

    @staticmethod
    def _to_markup(text: str) -> str:
        """Escape text for Paragraph markup, keeping line breaks"""
        return "<br/>".join(escape(line) for line in text.split("\n"))
