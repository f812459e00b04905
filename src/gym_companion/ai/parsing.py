"""Normalization of model text replies before JSON parsing."""

import json
import logging
import re

from ..errors import ReplyParseError

logger = logging.getLogger(__name__)

# Any fence marker, with an optional language tag on opening fences
_FENCE = re.compile(r"```[a-zA-Z]*[ \t]*\n?")


def strip_code_fences(text: str) -> str:
    """Remove Markdown code-fence wrapping from a model reply.

    Models are asked for bare JSON but often wrap it in a ```json block
    anyway. Unfenced text passes through unchanged apart from trimming.
    """
    return _FENCE.sub("", text).strip()


def parse_json_reply(text: str) -> dict:
    """Strip fences from a reply and parse it as a JSON object.

    Raises:
        ReplyParseError: if the cleaned text is not a JSON object
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse AI response: %s (reply starts %r)", e, cleaned[:200])
        raise ReplyParseError(f"Invalid JSON in model reply: {e}") from e

    if not isinstance(data, dict):
        logger.error("AI response is JSON but not an object: %r", cleaned[:200])
        raise ReplyParseError("Model reply is not a JSON object")

    return data
