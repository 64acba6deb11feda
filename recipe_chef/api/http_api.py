"""
HTTP API adapter for the Recipe Chef controller.

Architectural role:
- Expose the single-screen session over JSON endpoints.
- Enforce adapter-level input validation.
- Delegate the generation flow to `OrchestrationController`.

Endpoint responsibilities:
- `GET /health`: liveness probe.
- `GET /v1/session`: current session state.
- `POST /v1/recipes`: run one submission (recipe, then image) and return state.
- `POST /v1/image/error`: report that the displayed image failed to render.
- `DELETE /v1/session`: reset to the empty state.

Input validation behavior:
- Empty or whitespace-only ingredients -> HTTP 400 carrying the warning toast.
  The controller still records the rejection; no network call is made.

Error handling strategy:
- Generation failures are not HTTP errors: the request succeeded and the state
  carries `phase: "failed"` plus the notification.
- Unexpected exceptions follow FastAPI default handling.

Side effects:
- One module-level controller holds the in-memory session; nothing is persisted.
- Loads environment variables at import time via `load_dotenv()`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from recipe_chef.core.engine import OrchestrationController


logger = logging.getLogger(__name__)

app = FastAPI(title="Recipe Chef API", version="0.1.0")

_controller = OrchestrationController()


def get_controller() -> OrchestrationController:
    """Return the process-wide session controller (overridable in tests)."""
    return _controller


# ============================================================
# Request Schemas
# ============================================================

class RecipeRequest(BaseModel):
    ingredients: str = Field("", description="Free-text ingredient list")


class ImageErrorReport(BaseModel):
    title: str
    description: str = ""


# ============================================================
# Endpoints
# ============================================================

@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/v1/session")
def get_session(controller: OrchestrationController = Depends(get_controller)):
    return controller.state.to_dict()


@app.delete("/v1/session")
def reset_session(controller: OrchestrationController = Depends(get_controller)):
    return controller.reset().to_dict()


@app.post("/v1/recipes")
async def create_recipe(
    req: RecipeRequest,
    controller: OrchestrationController = Depends(get_controller),
):
    """
    Run one submission and return the resulting state.

    Response formatting:
    - 200 with the state JSON for displayed and failed generations alike.
    - 400 with the state JSON when the ingredient text is empty.
    """
    state = await controller.submit(req.ingredients)

    if not req.ingredients.strip():
        return JSONResponse(status_code=400, content=state.to_dict())

    logger.info("Recipe submission finished in phase %s", state.phase.value)
    return state.to_dict()


@app.post("/v1/image/error")
def report_image_error(
    report: ImageErrorReport,
    controller: OrchestrationController = Depends(get_controller),
):
    return controller.report_image_error(report.title, report.description).to_dict()
