"""Ingredients-to-recipe-payload adapter.

Architectural role:
    Canonical text-generation entrypoint used by the orchestration layer. Bridges
    prompt construction (`recipe_chef.prompting`) to transport
    (`recipe_chef.llm.client`) and JSON recovery (`recipe_chef.llm.parsing`).

Call flow:
    ingredients -> prompt -> payload -> `client.send_request` -> completion ->
    `parsing.extract_json_object` -> dict.

Validation boundary:
    This module only guarantees a JSON object. Field-level validation belongs to
    `recipe_chef.core.recipe.Recipe.from_payload`.
"""

import logging

from recipe_chef.core.errors import InputError
from recipe_chef.llm.client import send_request
from recipe_chef.llm.parsing import extract_json_object
from recipe_chef.llm.provider_config import SYSTEM_MESSAGE
from recipe_chef.prompting.prompt_builder import build_recipe_prompt


logger = logging.getLogger(__name__)


def build_payload(prompt: str) -> dict:
    """Wrap a user prompt with the shared system instruction."""
    return {
        "messages": [
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": prompt},
        ]
    }


def request_recipe(ingredients: str) -> dict:
    """Generate a raw recipe object for the given ingredient text.

    Args:
        ingredients: Free-text ingredient list; surrounding whitespace is ignored.

    Returns:
        JSON object recovered from the completion.

    Raises:
        InputError: Ingredient text is empty; no request is sent.
        GenerationError: Transport failure or no recoverable JSON object.
    """
    text = (ingredients or "").strip()
    if not text:
        raise InputError("ingredient text is empty")

    logger.info("Requesting recipe for %d chars of ingredients", len(text))
    completion = send_request(build_payload(build_recipe_prompt(text)))
    return extract_json_object(completion)
