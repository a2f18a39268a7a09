import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
from openai import APIConnectionError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.ai.config import AIConfig  # noqa: E402
from app.ai.factory import get_ai_client  # noqa: E402
from app.ai.providers.gemini_provider import GeminiProvider  # noqa: E402
from app.ai.providers.openai_provider import OpenAIProvider, to_openai_content  # noqa: E402
from app.ai.types import BlobFragment, TextFragment  # noqa: E402
from app.analysis.schema_registry import response_schema  # noqa: E402
from app.core.errors import ConfigurationError, InvalidPayload, TransportError  # noqa: E402
from app.schemas.results import PreliminaryDecisionResult, RewrittenResumeResult  # noqa: E402

FRAGMENTS = (
    TextFragment("Original Resume:"),
    BlobFragment(data="JVBERi0xLjQK", mime_type="application/pdf"),
)


def _gemini_client(text=None, error=None):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=SimpleNamespace(text=text),
        side_effect=error,
    )
    return client


class GeminiProviderTests(unittest.IsolatedAsyncioTestCase):
    async def test_sends_parts_in_order_with_json_schema(self):
        sdk = _gemini_client(text='{"rewrittenResume": "ok"}')
        provider = GeminiProvider(model="gemini-2.5-flash", client=sdk)

        text = await provider.generate(fragments=FRAGMENTS, schema_model=RewrittenResumeResult)

        self.assertEqual(text, '{"rewrittenResume": "ok"}')
        kwargs = sdk.aio.models.generate_content.await_args.kwargs
        self.assertEqual(kwargs["model"], "gemini-2.5-flash")
        (content,) = kwargs["contents"]
        self.assertEqual(content.role, "user")
        self.assertEqual(content.parts[0].text, "Original Resume:")
        self.assertEqual(content.parts[1].inline_data.data, b"%PDF-1.4\n")
        self.assertEqual(content.parts[1].inline_data.mime_type, "application/pdf")
        self.assertEqual(kwargs["config"].response_mime_type, "application/json")
        self.assertIsNotNone(kwargs["config"].response_schema)

    async def test_missing_text_becomes_empty_string(self):
        provider = GeminiProvider(model="m", client=_gemini_client(text=None))
        self.assertEqual(await provider.generate(fragments=FRAGMENTS, schema_model=RewrittenResumeResult), "")

    async def test_network_failure_is_a_transport_error(self):
        sdk = _gemini_client(error=httpx.ConnectError("connection refused"))
        provider = GeminiProvider(model="m", client=sdk)
        with self.assertRaises(TransportError) as ctx:
            await provider.generate(fragments=FRAGMENTS, schema_model=RewrittenResumeResult)
        self.assertIn("connection refused", str(ctx.exception))

    async def test_undecodable_upload_is_rejected_before_the_call(self):
        sdk = _gemini_client(text="{}")
        provider = GeminiProvider(model="m", client=sdk)
        with self.assertRaises(InvalidPayload):
            await provider.generate(
                fragments=(BlobFragment(data="not base64!", mime_type="application/pdf"),),
                schema_model=RewrittenResumeResult,
            )
        sdk.aio.models.generate_content.assert_not_awaited()


def _openai_client(content=None, error=None):
    client = MagicMock()
    message = SimpleNamespace(content=content)
    client.chat.completions.create = AsyncMock(
        return_value=SimpleNamespace(choices=[SimpleNamespace(message=message)]),
        side_effect=error,
    )
    return client


class OpenAIProviderTests(unittest.IsolatedAsyncioTestCase):
    async def test_requests_json_schema_output(self):
        sdk = _openai_client(content='{"decision": "Not Recommended"}')
        provider = OpenAIProvider(model="gpt-4o-mini", client=sdk)

        text = await provider.generate(fragments=FRAGMENTS, schema_model=PreliminaryDecisionResult)

        self.assertEqual(text, '{"decision": "Not Recommended"}')
        kwargs = sdk.chat.completions.create.await_args.kwargs
        self.assertEqual(kwargs["response_format"]["type"], "json_schema")
        self.assertEqual(kwargs["response_format"]["json_schema"]["name"], "PreliminaryDecisionResult")
        (message,) = kwargs["messages"]
        self.assertEqual(message["content"][0], {"type": "text", "text": "Original Resume:"})
        self.assertEqual(message["content"][1]["type"], "file")

    async def test_connection_error_is_a_transport_error(self):
        error = APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))
        provider = OpenAIProvider(model="m", client=_openai_client(error=error))
        with self.assertRaises(TransportError):
            await provider.generate(fragments=FRAGMENTS, schema_model=PreliminaryDecisionResult)

    def test_images_are_sent_as_data_urls(self):
        part = to_openai_content(BlobFragment(data="iVBORw0KGgo=", mime_type="image/png"))
        self.assertEqual(part, {"type": "image_url", "image_url": {"url": "data:image/png;base64,iVBORw0KGgo="}})


class FactoryTests(unittest.TestCase):
    def test_no_key_means_no_client(self):
        self.assertIsNone(get_ai_client(AIConfig(provider="gemini", model="gemini-2.5-flash", api_key=None)))

    def test_unsupported_provider(self):
        with self.assertRaises(ConfigurationError):
            get_ai_client(AIConfig(provider="claude", model="x", api_key="k"))

    def test_builds_configured_provider(self):
        self.assertIsInstance(get_ai_client(AIConfig(provider="gemini", model="m", api_key="k")), GeminiProvider)
        self.assertIsInstance(get_ai_client(AIConfig(provider="openai", model="m", api_key="k")), OpenAIProvider)

    def test_gemini_schema_is_a_valid_sdk_schema(self):
        from google.genai import types

        schema = types.Schema.model_validate(response_schema(PreliminaryDecisionResult))
        self.assertEqual(schema.type, types.Type.OBJECT)
        self.assertEqual(schema.required, ["decision", "pros", "cons", "explanation"])


if __name__ == "__main__":
    unittest.main()
