"""Parsing of the public and private inputs given to a program as JSON."""

from __future__ import annotations

import json
from typing import Any


class ParsingError(ValueError):
    """Raised when program inputs cannot be parsed."""


def parse_inputs(text: str) -> dict[str, Any]:
    """Parse a JSON object mapping input names to their values."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParsingError(str(exc)) from exc
    if not isinstance(parsed, dict):
        raise ParsingError(
            f"expected a JSON object of inputs, got {type(parsed).__name__}"
        )
    return parsed