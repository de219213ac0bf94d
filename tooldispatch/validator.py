#!/usr/bin/env python3
"""
Request validation against a tool's declared input schema.

Supports the subset of JSON Schema the tools declare: ``required``, per
property ``type`` and numeric ``minimum``/``maximum``. Validation stops at
the first violation. Properties the schema does not declare are passed
through untouched.
"""

from typing import Any, Dict, Mapping, Optional

from .errors import InvalidParamsError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or (isinstance(value, float) and value.is_integer())


_TYPE_CHECKS = {
    "string": lambda value: isinstance(value, str),
    "number": _is_number,
    "integer": _is_integer,
    "boolean": lambda value: isinstance(value, bool),
    "object": lambda value: isinstance(value, Mapping),
    "array": lambda value: isinstance(value, list),
}


class RequestValidator:
    """Checks invocation arguments before they reach a handler."""

    def validate(self, input_schema: Mapping[str, Any], arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Validate arguments against an input schema.

        Args:
            input_schema: Object schema with ``properties`` and ``required``
            arguments: Raw invocation arguments; ``None`` is treated as empty

        Returns:
            A shallow copy of the arguments, extra fields included

        Raises:
            InvalidParamsError: naming the first offending field
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidParamsError("Arguments must be an object")

        properties = input_schema.get("properties") or {}

        for name in input_schema.get("required") or ():
            if name not in arguments:
                raise InvalidParamsError(f"Missing required argument: {name}", field=name)

        for name, field_schema in properties.items():
            if name not in arguments:
                continue
            self._check_field(name, field_schema, arguments[name])

        return dict(arguments)

    def _check_field(self, name: str, field_schema: Mapping[str, Any], value: Any) -> None:
        expected = field_schema.get("type")
        if expected is not None:
            check = _TYPE_CHECKS.get(expected)
            if check is None:
                raise InvalidParamsError(f"Unsupported schema type {expected!r} for argument: {name}", field=name)
            if not check(value):
                raise InvalidParamsError(
                    f"Invalid argument {name}: expected {expected}, got {type(value).__name__}",
                    field=name,
                )

        if not _is_number(value):
            return

        minimum = field_schema.get("minimum")
        if minimum is not None and value < minimum:
            raise InvalidParamsError(f"Invalid argument {name}: must be >= {minimum}", field=name)

        maximum = field_schema.get("maximum")
        if maximum is not None and value > maximum:
            raise InvalidParamsError(f"Invalid argument {name}: must be <= {maximum}", field=name)
