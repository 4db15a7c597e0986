"""Extraction of structured results from free-form vendor replies."""

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.core.exceptions import ParseError

ResultT = TypeVar("ResultT", bound=BaseModel)

JSON_BLOCK_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")


def extract_json_block(text: str) -> Any:
    """Parse the first ```json fenced block in ``text``.

    Only the first block is considered; text around it is ignored.

    Raises:
        ParseError: no fenced JSON block, an empty block, or invalid JSON.
    """
    match = JSON_BLOCK_PATTERN.search(text or "")
    if not match or not match.group(1).strip():
        raise ParseError("No valid JSON block found in the response.")

    try:
        return json.loads(match.group(1).strip())
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse JSON: {e}") from e


def parse_tool_result(text: str, model: type[ResultT]) -> ResultT:
    """Extract the JSON block and validate it against a tool's result schema."""
    payload = extract_json_block(text)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ParseError(
            f"Reply does not match {model.__name__}: {e.error_count()} errors"
        ) from e
