from __future__ import annotations

import mimetypes
import os
from typing import Any, Optional, Sequence

from openai import APIError, AsyncOpenAI
from pydantic import BaseModel

from app.ai.types import BlobFragment, ContentFragment
from app.analysis.schema_registry import json_schema
from app.core.errors import TransportError


def to_openai_content(fragment: ContentFragment) -> dict[str, Any]:
    if not isinstance(fragment, BlobFragment):
        return {"type": "text", "text": fragment.text}

    data_url = f"data:{fragment.mime_type};base64,{fragment.data}"
    if fragment.mime_type.startswith("image/"):
        return {"type": "image_url", "image_url": {"url": data_url}}
    ext = mimetypes.guess_extension(fragment.mime_type) or ".bin"
    return {"type": "file", "file": {"filename": f"upload{ext}", "file_data": data_url}}


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: float = 0.2,
        client: Optional[AsyncOpenAI] = None,
    ):
        self._model = model
        self._temperature = temperature
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            max_retries=0,
        )

    async def generate(
        self,
        *,
        fragments: Sequence[ContentFragment],
        schema_model: type[BaseModel],
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": [to_openai_content(f) for f in fragments]}],
                temperature=self._temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": schema_model.__name__, "schema": json_schema(schema_model)},
                },
            )
        except APIError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        content = response.choices[0].message.content if response.choices else ""
        return content or ""
