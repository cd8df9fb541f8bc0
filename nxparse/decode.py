"""Shared JSON decoding for NX-API responses with lenient value conversion."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "ParseError",
    "Envelope",
    "load_document",
    "as_list",
    "to_int",
    "to_float",
    "to_str",
    "to_bool",
]


class ParseError(ValueError):
    """Raised when a response cannot be decoded."""


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, dict) and not value)


def load_document(source: Any) -> dict:
    """Load a JSON object from a string, bytes or a readable file object."""
    if hasattr(source, "read"):
        text = source.read()
    else:
        if not source:
            raise ParseError("missing result")
        text = source
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"parsing error: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError("parsing error: document is not a JSON object")
    return data


def as_list(value: Any) -> list:
    """Wrap a single item in a list; None becomes an empty list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def to_int(value: Any) -> int:
    """Convert a number or numeric string to int; blanks give 0."""
    if _is_blank(value):
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ParseError(f"parsing error: cannot convert {value!r} to int")


def to_float(value: Any) -> float:
    """Convert a number or numeric string to float; blanks give 0.0."""
    if _is_blank(value):
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise ParseError(f"parsing error: cannot convert {value!r} to float")


def to_str(value: Any) -> str:
    """Convert a scalar to str; blanks give an empty string."""
    if _is_blank(value):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ParseError(f"parsing error: cannot convert {value!r} to string")


def to_bool(value: Any) -> bool:
    """Convert a bool, number or "true"/"false" string; blanks give False."""
    if _is_blank(value):
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
    raise ParseError(f"parsing error: cannot convert {value!r} to bool")


def _mapping(value: Any, name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(f"parsing error: {name} is not an object")
    return value


@dataclass
class Envelope:
    """The "ins_api" wrapper around a single command output."""

    output: dict = field(default_factory=dict)
    sid: str = ""
    type: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Envelope":
        ins_api = _mapping(data.get("ins_api"), "ins_api")
        outputs = _mapping(ins_api.get("outputs"), "outputs")
        return cls(
            output=_mapping(outputs.get("output"), "output"),
            sid=to_str(ins_api.get("sid")),
            type=to_str(ins_api.get("type")),
            version=to_str(ins_api.get("version")),
        )