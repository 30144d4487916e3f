# record_export/core/types/models.py

"""Pydantic models for export result types."""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Base configuration for result models
_RESULT_MODEL_CONFIG = ConfigDict(
    strict=True,
    frozen=True,
    extra="forbid",
    validate_default=True,
)


class RenderedOutput(BaseModel):
    """A named byte buffer produced by one render call

    Produced fresh on every call and owned by the caller; nothing caches it.
    """

    model_config = _RESULT_MODEL_CONFIG

    file_name: str = Field(min_length=1)
    content: bytes

    @property
    def size(self) -> int:
        """Content length in bytes"""
        return len(self.content)


__all__ = ["RenderedOutput"]
