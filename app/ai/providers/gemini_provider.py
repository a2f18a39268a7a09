from __future__ import annotations

import base64
import binascii
from typing import Sequence

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import BaseModel

from app.ai.types import BlobFragment, ContentFragment
from app.analysis.schema_registry import response_schema
from app.core.errors import InvalidPayload, TransportError


def to_gemini_part(fragment: ContentFragment) -> types.Part:
    if isinstance(fragment, BlobFragment):
        try:
            data = base64.b64decode(fragment.data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidPayload("Uploaded file content is not valid base64.") from exc
        return types.Part(inline_data=types.Blob(data=data, mime_type=fragment.mime_type))
    return types.Part(text=fragment.text)


class GeminiProvider:
    def __init__(self, model: str, api_key: str | None = None, client: genai.Client | None = None):
        self._model = model
        self._client = client or genai.Client(api_key=api_key)

    async def generate(
        self,
        *,
        fragments: Sequence[ContentFragment],
        schema_model: type[BaseModel],
    ) -> str:
        contents = [types.Content(role="user", parts=[to_gemini_part(f) for f in fragments])]
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=response_schema(schema_model),
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=config,
            )
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        return response.text or ""
