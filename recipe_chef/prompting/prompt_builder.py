"""Prompt assembly helpers used by the generation services.

This module only builds prompt strings from already validated inputs. Input
validation, transport and response parsing happen outside this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - User text is interpolated as a raw string.
    - The JSON-only instruction is advisory; `recipe_chef.llm.parsing` tolerates
      fences and surrounding prose when the model ignores it.
"""


# =========================================================
# RECIPE PROMPT
# =========================================================
# Prompt component order:
#   1) Ingredient request (user text verbatim)
#   2) JSON-only output instruction
#   3) Literal schema example with the four required fields

RECIPE_SCHEMA_EXAMPLE = (
    "{\n"
    '  "title": "Recipe Name",\n'
    '  "description": "Brief appetizing description of the dish",\n'
    '  "ingredients": ["ingredient 1", "ingredient 2"],\n'
    '  "instructions": ["step 1", "step 2"]\n'
    "}"
)


def build_recipe_prompt(ingredients: str) -> str:
    """Build the text-generation prompt for an ingredient list.

    Args:
        ingredients: Trimmed, non-empty ingredient text.

    Returns:
        Prompt string containing `ingredients` verbatim.
    """
    return (
        f"Generate a recipe using these ingredients: {ingredients}.\n"
        "Return ONLY a JSON object (no markdown, no backticks) with this structure:\n"
        f"{RECIPE_SCHEMA_EXAMPLE}"
    )


# =========================================================
# IMAGE PROMPT
# =========================================================
# Photography-style qualifiers are fixed; only title and description vary.

def build_image_prompt(title: str, description: str) -> str:
    """Build the image-generation prompt for a recipe."""
    return (
        f"High-quality food photography of {title}, beautifully plated, "
        f"{description}. Professional lighting, appetizing, high resolution."
    )
