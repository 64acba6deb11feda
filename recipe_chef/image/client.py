"""Async HTTP client for the image-generation endpoint.

Processing flow:
    1. Build query parameters: prompt text, aspect ratio, cache-busting timestamp.
    2. GET the endpoint, following redirects.
    3. Require a 2xx status and an `image/*` content type.
    4. Return the final response URL as the image location.

Error handling strategy:
    Every failure (transport, status, content type) is logged and converted into
    `ImageResult.unavailable(...)`. Nothing propagates past `fetch_image`.

Determinism:
    Request assembly is deterministic except for the `_` timestamp parameter,
    which exists to defeat caching of identical prompts.
"""

import logging
import time

import httpx

from recipe_chef.core.errors import ImageError
from recipe_chef.core.recipe import ImageResult
from recipe_chef.llm.provider_config import IMAGE_ASPECT, IMAGE_URL, REQUEST_TIMEOUT, build_headers


logger = logging.getLogger(__name__)


def build_params(prompt: str, aspect: str = IMAGE_ASPECT, now=None) -> dict:
    """Return query parameters for one image request."""
    timestamp = int((time.time() if now is None else now) * 1000)
    return {"text": prompt, "aspect": aspect, "_": str(timestamp)}


def _validate_response(response: httpx.Response) -> str:
    """Return the image URL for a usable response or raise `ImageError`."""
    if not response.is_success:
        raise ImageError(f"Failed to fetch image (status: {response.status_code})")

    content_type = response.headers.get("content-type", "")
    if not content_type.startswith("image"):
        raise ImageError("API did not return an image")

    return str(response.url)


async def fetch_image(prompt: str, transport: httpx.AsyncBaseTransport | None = None) -> ImageResult:
    """Request a generated image for `prompt`.

    Args:
        prompt: Fully composed image prompt.
        transport: Optional transport override (used by tests).

    Returns:
        `ImageResult` with either the resolved URL or an error description.
    """
    try:
        async with httpx.AsyncClient(
            timeout=REQUEST_TIMEOUT,
            follow_redirects=True,
            headers=build_headers(),
            transport=transport,
        ) as client:
            response = await client.get(IMAGE_URL, params=build_params(prompt))

        url = _validate_response(response)

    except ImageError as err:
        logger.warning("Image generation failed: %s", err)
        return ImageResult.unavailable(str(err))

    except httpx.HTTPError as err:
        logger.warning("Image request error: %s", err.__class__.__name__)
        return ImageResult.unavailable(f"Image request failed: {err.__class__.__name__}")

    except (httpx.InvalidURL, UnicodeError) as err:
        logger.warning("Image request could not be built: %s", err.__class__.__name__)
        return ImageResult.unavailable(f"Image request failed: {err.__class__.__name__}")

    logger.info("Image generated")
    return ImageResult.loaded(url)
