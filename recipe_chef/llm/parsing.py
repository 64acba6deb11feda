"""Completion cleanup and JSON recovery.

Remote models sometimes wrap the requested JSON in Markdown fences or in prose
("Sure! {...} Enjoy!"). Recovery is two-stage and purely local, the network
call is never repeated:

    1. Strip ```` ```json ```` / ```` ``` ```` markers and surrounding whitespace,
       then parse the remainder directly.
    2. Otherwise take the greedy span from the first `{` to the last `}` and
       parse that.

Both stages must yield a JSON object; arrays and scalars count as failures.
"""

import json
import logging
import re
from typing import Any

from recipe_chef.core.errors import GenerationError


logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"```json|```")
_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def strip_code_fences(completion: str) -> str:
    """Remove Markdown code-fence markers and trim whitespace."""
    return _FENCE_PATTERN.sub("", completion or "").strip()


def _loads_object(text: str) -> dict[str, Any] | None:
    try:
        value = json.loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def extract_json_object(completion: str) -> dict[str, Any]:
    """Recover the JSON object embedded in a model completion.

    Args:
        completion: Raw completion text.

    Returns:
        Parsed JSON object.

    Raises:
        GenerationError: When neither the cleaned text nor its brace span parses
            to a JSON object.
    """
    cleaned = strip_code_fences(completion)

    parsed = _loads_object(cleaned)
    if parsed is not None:
        return parsed

    match = _OBJECT_PATTERN.search(cleaned)
    if match:
        parsed = _loads_object(match.group(0))
        if parsed is not None:
            logger.debug("Recovered JSON object from wrapped completion")
            return parsed

    logger.warning("No JSON object found in completion (%d chars)", len(cleaned))
    raise GenerationError("parse failure")
