"""Provider/runtime configuration for the generation layers.

Architectural role:
    Centralizes endpoint selection, timeouts and credential lookup for
    `recipe_chef.llm.client` and `recipe_chef.image.client`.

Determinism:
    Deterministic for a fixed process environment and key file. Values are resolved
    at import time (plus runtime key-file reads in `load_key`).

Failure behavior:
    Missing key material is represented as `None`; both endpoints accept anonymous
    requests, so no error is raised for it.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Text-generation endpoint (POST, `{messages: [...]}` -> `{completion: "..."}`).
LLM_URL = os.getenv("RECIPE_LLM_URL", "https://api.a0.dev/ai/llm")

# Image-generation endpoint (GET, `?text=...&aspect=...&_=...` -> binary image).
IMAGE_URL = os.getenv("RECIPE_IMAGE_URL", "https://api.a0.dev/assets/image")
IMAGE_ASPECT = os.getenv("RECIPE_IMAGE_ASPECT", "16:9")

REQUEST_TIMEOUT = float(os.getenv("RECIPE_REQUEST_TIMEOUT", "60"))

KEY_FILE = "config/recipe.key"

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


# Shared system instruction prepended to the recipe prompt in `service`.
SYSTEM_MESSAGE = (
    "You are a helpful recipe generator. "
    "Only respond with valid JSON, no markdown or explanation needed."
)


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/recipe.key` -> `RECIPE_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


def build_headers(content_type=None):
    """Return request headers with optional bearer authorization."""
    headers = {}
    if content_type:
        headers["Content-Type"] = content_type
    api_key = load_key(KEY_FILE)
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers
