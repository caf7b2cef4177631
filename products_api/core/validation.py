"""Field Rules: ordered predicate chains that run before a route handler.

Invariants:
    - Predicates are pure: value in, bool out, never raise
    - collect_errors() emits exactly one entry per failing rule, in declaration order
    - Path-parameter failures short-circuit: body rules are skipped when any fails
    - "value" is omitted from an entry when the field was absent from the request

Design Decisions:
    - Plain dataclass + functions over Pydantic models: the error count per request
      is part of the public contract and several rules may fail on the same field
    - Values are compared through their JSON text form so "150" and 150 behave alike
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping

Location = Literal["params", "body"]

_MISSING = object()
_INT_RE = re.compile(r"[-+]?(?:0|[1-9][0-9]*)")
_NUMERIC_RE = re.compile(r"[-+]?(?:[0-9]*\.)?[0-9]+")
_TRUE_TEXT = ("true", "1")
_FALSE_TEXT = ("false", "0")


def as_text(value: Any) -> str:
    """Text form used by every predicate. Non-scalars have no text form."""
    if value is None or value is _MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def as_number(value: Any) -> float | None:
    """Finite numeric form of a scalar, None when it has none."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    elif not isinstance(value, (bool, int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    # inf and nan never reach a stored price
    return number if math.isfinite(number) else None


def as_bool(value: Any) -> bool | None:
    """Boolean form of a boolean-like value, None when it is not one."""
    text = as_text(value).lower()
    if text in _TRUE_TEXT:
        return True
    if text in _FALSE_TEXT:
        return False
    return None


# ─── Predicates ─────────────────────────────────────────────────

def is_int(value: Any) -> bool:
    return bool(_INT_RE.fullmatch(as_text(value)))


def is_numeric(value: Any) -> bool:
    return bool(_NUMERIC_RE.fullmatch(as_text(value)))


def not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_positive(value: Any) -> bool:
    number = as_number(value)
    return number is not None and number > 0


def is_boolean(value: Any) -> bool:
    return as_text(value) in _TRUE_TEXT + _FALSE_TEXT


# ─── Rules ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldRule:
    """A single (location, field, predicate, message) check."""
    location: Location
    field: str
    check: Callable[[Any], bool]
    message: str

    def evaluate(self, source: Mapping[str, Any]) -> dict[str, Any] | None:
        """Return an error entry when the check fails, None otherwise."""
        value = source.get(self.field, _MISSING)
        if self.check(value):
            return None
        entry: dict[str, Any] = {"type": "field"}
        if value is not _MISSING:
            entry["value"] = value
        entry.update(msg=self.message, path=self.field, location=self.location)
        return entry


def param(field: str, check: Callable[[Any], bool], message: str) -> FieldRule:
    return FieldRule("params", field, check, message)


def body(field: str, check: Callable[[Any], bool], message: str) -> FieldRule:
    return FieldRule("body", field, check, message)


def collect_errors(
    rules: tuple[FieldRule, ...],
    params: Mapping[str, Any],
    payload: Mapping[str, Any],
) -> list[dict[str, Any]]:
    """Run path rules, then body rules, collecting every failure."""
    errors = _run(rules, "params", params)
    if errors:
        return errors
    return _run(rules, "body", payload)


def _run(
    rules: tuple[FieldRule, ...], location: Location, source: Mapping[str, Any],
) -> list[dict[str, Any]]:
    errors = []
    for rule in rules:
        if rule.location != location:
            continue
        entry = rule.evaluate(source)
        if entry is not None:
            errors.append(entry)
    return errors
