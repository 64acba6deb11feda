"""Image service used by the orchestration controller.

Role in pipeline:
    - Receives the displayed recipe's title and description.
    - Composes the photography prompt.
    - Delegates to `recipe_chef.image.client.fetch_image`.

Error handling strategy:
    The client never raises; the returned `ImageResult` carries success or failure.
"""

from recipe_chef.core.recipe import ImageResult
from recipe_chef.image.client import fetch_image
from recipe_chef.prompting.prompt_builder import build_image_prompt


async def request_image(title: str, description: str, transport=None) -> ImageResult:
    """Generate an illustrative image for a recipe.

    Args:
        title: Recipe title.
        description: Recipe description (may be empty).
        transport: Optional `httpx` transport override.

    Returns:
        `ImageResult` for this recipe identity.
    """
    return await fetch_image(build_image_prompt(title, description), transport=transport)
