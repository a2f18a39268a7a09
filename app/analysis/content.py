from __future__ import annotations

from app.ai.types import BlobFragment, ContentFragment, TextFragment
from app.schemas.analysis import AnalysisInput


def build_content_part(source: AnalysisInput) -> ContentFragment:
    """Turn a pasted text or an uploaded document into one content fragment.

    Uploads are passed through untouched; the model service is the one that
    rejects unsupported MIME types or oversized files.
    """
    if source.format == "file" and not isinstance(source.content, str):
        return BlobFragment(data=source.content.data, mime_type=source.content.mime_type)
    return TextFragment(text=source.content)
