"""Transport client for the text-generation endpoint.

Architectural role:
    Executes the HTTP request against the configured endpoint and returns the raw
    completion text.

Model invocation flow:
    `service.request_recipe` -> `send_request(payload)` -> POST -> `completion`.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once with the
    configured timeout.

Failure handling model:
    Transport errors, non-2xx statuses, non-JSON bodies and a missing/non-string
    `completion` field are all converted into `GenerationError`. The user-facing
    text is generic; details go to the log.
"""

import logging

import requests

from recipe_chef.core.errors import GenerationError
from recipe_chef.llm.provider_config import LLM_URL, REQUEST_TIMEOUT, build_headers


logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate recipe. Please try again."


def _describe_http_error(err: requests.exceptions.RequestException) -> str:
    """Build a log label for a request exception without dumping bodies."""
    status_code = None
    if getattr(err, "response", None) is not None:
        status_code = getattr(err.response, "status_code", None)
    if status_code:
        return f"LLM HTTP ERROR ({status_code})"
    return f"LLM HTTP ERROR ({err.__class__.__name__})"


def send_request(payload: dict) -> str:
    """Send one request to the text-generation endpoint.

    Args:
        payload: Request body with a `messages` list.

    Returns:
        The `completion` string from the response body.

    Raises:
        GenerationError: On any transport, status or response-shape failure.
    """
    try:
        response = requests.post(
            LLM_URL,
            headers=build_headers("application/json"),
            json=payload,
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()

    except requests.exceptions.RequestException as err:
        logger.warning(_describe_http_error(err))
        raise GenerationError(GENERIC_FAILURE) from err

    except ValueError as err:
        logger.warning("LLM response body is not JSON")
        raise GenerationError(GENERIC_FAILURE) from err

    completion = data.get("completion") if isinstance(data, dict) else None
    if not isinstance(completion, str):
        logger.warning("LLM response has no completion string")
        raise GenerationError(GENERIC_FAILURE)

    logger.debug("LLM completion: %r", completion)
    return completion
