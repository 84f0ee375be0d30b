"""Metadata fields sent alongside records."""

from __future__ import annotations

import base64
import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

_FIELD_TRANSLATION = str.maketrans({",": "_", "=": ":", "\n": "_"})

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _format_plain_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    point = len(digits) + exponent
    text = "".join(str(digit) for digit in digits).rstrip("0")
    if point <= 0:
        body = "0." + "0" * (-point) + text
    elif point >= len(text):
        body = text + "0" * (point - len(text))
    else:
        body = f"{text[:point]}.{text[point:]}"
    return ("-" if sign else "") + body


def _to_json(value: Any) -> str:
    encoded = json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    for char, escape in _JSON_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    return encoded


def attribute_value_to_string(value: Any) -> str:
    """Render an attribute value as plain text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_plain_float(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (Mapping, list, tuple)):
        return _to_json(value)
    raise TypeError(f"unsupported attribute value type: {type(value).__name__}")


@dataclass
class Fields:
    """Record metadata, rendered as a sorted list of key=value pairs."""

    attributes: dict[str, Any]

    def render(self) -> str:
        """Return the fields as sorted key=value pairs separated by ', '."""
        pairs = sorted(
            f"{self.sanitize_field(key)}={self.sanitize_field(attribute_value_to_string(value))}"
            for key, value in self.attributes.items()
        )
        return ", ".join(pairs)

    def sanitize_field(self, field: str) -> str:
        """Replace characters that break the fields header."""
        return field.translate(_FIELD_TRANSLATION)