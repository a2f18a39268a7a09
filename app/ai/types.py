from dataclasses import dataclass
from typing import Protocol, Sequence, Union

from pydantic import BaseModel


@dataclass(frozen=True)
class TextFragment:
    text: str


@dataclass(frozen=True)
class BlobFragment:
    """An uploaded document: base64 data and its declared MIME type, untouched."""

    data: str
    mime_type: str


ContentFragment = Union[TextFragment, BlobFragment]


class ModelClient(Protocol):
    async def generate(
        self,
        *,
        fragments: Sequence[ContentFragment],
        schema_model: type[BaseModel],
    ) -> str: ...
