import json
from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def json_payload(schema: Type[SchemaT]) -> Callable[..., SchemaT]:
    """
    Build a dependency that parses the JSON request body into `schema`.

    Declared body parameters are decoded before any dependency runs. Declare
    the payload through this dependency instead, after the role gate, so the
    body is not read until the caller is authorized. Failures produce the
    usual 422 validation response.
    """
    async def _json_payload(request: Request) -> SchemaT:
        raw = await request.body()
        try:
            data = json.loads(raw) if raw else None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}, "ctx": {"error": str(e)}}]
            ) from e
        if data is None:
            raise RequestValidationError(
                [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
            )
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            errors = [
                {**err, "loc": ("body", *err["loc"])}
                for err in e.errors(include_url=False, include_context=False)
            ]
            raise RequestValidationError(errors) from e

    return _json_payload


def payload_openapi(schema: Type[BaseModel]) -> Dict[str, Any]:
    """OpenAPI request body for a route whose payload comes from json_payload."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema(by_alias=True)}},
        }
    }
