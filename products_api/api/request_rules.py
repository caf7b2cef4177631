"""Rule-chain dependency: runs a route's FieldRules before its handler.

Invariants:
    - The handler only runs when collect_errors() returned nothing
    - The JSON body is read only when the chain has body rules
    - An empty body is an empty object; a non-object JSON body is an empty object

Design Decisions:
    - Dependency factory over middleware: each route declares its own chain next to
      its path, and FastAPI caches the body for later reads
"""

import json
from typing import Any, Awaitable, Callable

from fastapi import Request

from products_api.core.errors import RequestValidationFailed
from products_api.core.validation import FieldRule, collect_errors

INVALID_JSON_MESSAGE = "El cuerpo de la petición no es JSON válido"


def enforce_rules(
    rules: tuple[FieldRule, ...],
) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    """Build a dependency that validates the request and returns its JSON body."""
    param_rules = tuple(rule for rule in rules if rule.location == "params")
    reads_body = len(param_rules) < len(rules)

    async def dependency(request: Request) -> dict[str, Any]:
        # A bad id is reported even when the body is not parseable
        errors = collect_errors(param_rules, request.path_params, {})
        payload: dict[str, Any] = {}
        if not errors and reads_body:
            payload = await read_json_body(request)
            errors = collect_errors(rules, request.path_params, payload)
        if errors:
            raise RequestValidationFailed(errors)
        return payload

    return dependency


async def read_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise RequestValidationFailed([{
            "type": "field",
            "msg": INVALID_JSON_MESSAGE,
            "path": "",
            "location": "body",
        }])
    return payload if isinstance(payload, dict) else {}
