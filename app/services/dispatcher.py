from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping

from pydantic import ValidationError

from app.ai.types import ModelClient
from app.analysis import get_operation, validate_result
from app.core.errors import (
    ConfigurationError,
    GenerationError,
    InvalidOperation,
    InvalidPayload,
    ParseError,
    TransportError,
)

logger = logging.getLogger(__name__)


def _payload_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "payload"
    return f"Invalid payload ({location}: {first['msg']})."


def parse_model_output(text: str | None) -> Any:
    raw = (text or "").strip()
    if not raw:
        raise ParseError("The model returned an empty response.")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(f"The model response is not valid JSON: {exc.msg}.") from exc


async def dispatch(
    operation: str,
    payload: Mapping[str, Any] | None,
    *,
    client: ModelClient | None,
    validation: str = "strict",
) -> Any:
    """Run one analysis operation against the model and return its parsed JSON.

    Every check that can fail without the model (credential, operation name,
    payload shape) runs before the single outbound call.
    """
    if client is None:
        raise ConfigurationError("API key is not configured on the server.")

    descriptor = get_operation(operation)
    if descriptor is None:
        raise InvalidOperation("Invalid analysis type")

    try:
        parsed_payload = descriptor.payload_model.model_validate(payload or {})
    except ValidationError as exc:
        raise InvalidPayload(_payload_error(exc)) from exc

    fragments = descriptor.build_prompt(parsed_payload)
    started = time.perf_counter()
    try:
        text = await client.generate(fragments=fragments, schema_model=descriptor.result_model)
    except GenerationError:
        raise
    except Exception as exc:  # noqa: BLE001 - any SDK failure reaches the caller with its message
        raise TransportError(str(exc) or exc.__class__.__name__) from exc
    result = parse_model_output(text)
    if validation == "strict":
        validate_result(descriptor.result_model, text.strip())

    logger.info(
        "generate_ok type=%s fragments=%s response_chars=%s latency_ms=%s",
        operation,
        len(fragments),
        len(text),
        int((time.perf_counter() - started) * 1000),
    )
    return result
