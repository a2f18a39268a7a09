"""Model-facing output schemas derived from the result models.

The result models in ``app.schemas.results`` are the single contract for what
each operation returns. The generative model receives the same contract in the
OpenAPI subset it understands: upper-case ``type`` names, ``properties``,
``items``, ``enum`` and ``required``, with nested definitions inlined.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from app.core.errors import SchemaViolation

_TYPE_NAMES = {
    "object": "OBJECT",
    "string": "STRING",
    "number": "NUMBER",
    "integer": "INTEGER",
    "boolean": "BOOLEAN",
    "array": "ARRAY",
}
_BOUNDS = ("minimum", "maximum")


def _resolve(node: dict[str, Any], defs: dict[str, Any]) -> dict[str, Any]:
    ref = node.get("$ref")
    if ref:
        return _resolve(defs[ref.rsplit("/", 1)[-1]], defs)
    all_of = node.get("allOf")
    if all_of and len(all_of) == 1:
        return _resolve(all_of[0], defs)
    return node


def _convert(node: dict[str, Any], defs: dict[str, Any]) -> dict[str, Any]:
    node = _resolve(node, defs)
    json_type = node.get("type")
    if json_type not in _TYPE_NAMES:
        raise ValueError(f"Unsupported schema node: {node!r}")

    out: dict[str, Any] = {"type": _TYPE_NAMES[json_type]}
    if "enum" in node:
        out["enum"] = list(node["enum"])
    for key in _BOUNDS:
        if key in node:
            out[key] = node[key]

    if json_type == "object":
        properties = node.get("properties", {})
        out["properties"] = {name: _convert(child, defs) for name, child in properties.items()}
        out["required"] = [name for name in node.get("required", []) if name in properties]
    elif json_type == "array":
        out["items"] = _convert(node["items"], defs)
    return out


def json_schema(model: type[BaseModel]) -> dict[str, Any]:
    return model.model_json_schema(by_alias=True)


def response_schema(model: type[BaseModel]) -> dict[str, Any]:
    raw = json_schema(model)
    return _convert(raw, raw.get("$defs", {}))


def validate_result(model: type[BaseModel], raw_text: str) -> None:
    """Raise SchemaViolation unless the JSON in ``raw_text`` satisfies ``model``.

    Validation runs in strict mode so that e.g. ``"87"`` is not accepted for a
    number. The caller keeps its own parsed object; nothing is coerced.
    """
    try:
        model.model_validate_json(raw_text, strict=True)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise SchemaViolation(
            f"Model response does not match the {model.__name__} schema ({location}: {first['msg']})."
        ) from exc
