"""Submission orchestration: ingredients -> recipe -> image.

Architectural role:
    Provides the control flow used by the CLI and HTTP adapters to turn one
    ingredient submission into a displayed recipe and, as a dependent effect, an
    illustrative image. All observable results are `SessionState` transitions
    published to subscribed listeners.

Control-flow model:
    1. Reject empty input locally (`InputRejected`), no network call.
    2. `Submit` -> GENERATING; the blocking text-generation client runs in a worker
       thread via `asyncio.to_thread`.
    3. Parse/validate the payload into a `Recipe`.
       - transport/parse failure -> `RecipeFailed` with the generic failure toast
       - incomplete recipe       -> `RecipeFailed` with the incomplete-recipe toast
       - valid                   -> `RecipeReceived` (DISPLAYING)
    4. For a displayed recipe, request the image once per recipe identity. Image
       failure only moves the image region to UNAVAILABLE.

Error handling strategy:
    Failing subsystems degrade to user-facing notifications and logged exceptions;
    `submit` never raises for generation failures. Nothing is retried.

Concurrency:
    A newer submission supersedes older ones. Late results from superseded
    submissions are dropped by the reducer (see `recipe_chef.core.state`).
"""

import asyncio
import logging
from typing import Awaitable, Callable

from recipe_chef.core.errors import GenerationError, ValidationError
from recipe_chef.core.recipe import ImageResult, Recipe
from recipe_chef.core.state import (
    INCOMPLETE_RECIPE,
    ImageFailed,
    ImageReceived,
    ImageRequested,
    ImageStatus,
    InputRejected,
    Phase,
    RecipeFailed,
    RecipeReceived,
    Reset,
    SessionState,
    Submit,
    generation_failed,
    reduce,
)
from recipe_chef.image.service import request_image
from recipe_chef.llm.service import request_recipe


logger = logging.getLogger(__name__)

RecipeRequester = Callable[[str], dict]
ImageRequester = Callable[[str, str], Awaitable[ImageResult]]
Listener = Callable[[SessionState], None]

RENDER_ERROR = "image failed to render"


class OrchestrationController:
    """Single-session controller owning the current `SessionState`.

    Args:
        recipe_requester: Blocking callable returning the raw recipe object for an
            ingredient string. Defaults to `recipe_chef.llm.service.request_recipe`.
        image_requester: Async callable `(title, description) -> ImageResult`.
            Defaults to `recipe_chef.image.service.request_image`.
    """

    def __init__(
        self,
        recipe_requester: RecipeRequester = request_recipe,
        image_requester: ImageRequester = request_image,
    ) -> None:
        self._recipe_requester = recipe_requester
        self._image_requester = image_requester
        self._state = SessionState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action) -> SessionState:
        """Apply `action` and notify listeners when the state changed."""
        previous = self._state
        self._state = reduce(previous, action)

        if self._state is not previous:
            for listener in list(self._listeners):
                try:
                    listener(self._state)
                except Exception:
                    logger.exception("State listener failed")

        return self._state

    async def submit(self, ingredients: str, with_image: bool = True) -> SessionState:
        """Run one full submission.

        Args:
            ingredients: Raw ingredient text from the input field.
            with_image: Whether to run the image effect after a recipe is displayed.

        Returns:
            The state after the flow completes.
        """
        if not (ingredients or "").strip():
            logger.info("Rejected empty ingredient input")
            return self.dispatch(InputRejected())

        submission_id = self.dispatch(Submit(ingredients)).submission_id

        try:
            payload = await asyncio.to_thread(self._recipe_requester, ingredients)
            recipe = Recipe.from_payload(payload)

        except ValidationError as err:
            logger.warning("Recipe rejected: %s", err)
            return self.dispatch(RecipeFailed(submission_id, INCOMPLETE_RECIPE))

        except GenerationError as err:
            logger.warning("Recipe generation failed: %s", err)
            return self.dispatch(RecipeFailed(submission_id, generation_failed()))

        except Exception:
            logger.exception("Recipe generation failed")
            return self.dispatch(RecipeFailed(submission_id, generation_failed()))

        self.dispatch(RecipeReceived(submission_id, recipe))

        if with_image and self._state.submission_id == submission_id:
            await self.load_image()

        return self._state

    async def load_image(self) -> SessionState:
        """Request the image for the displayed recipe if it is still IDLE.

        The image region enters LOADING at most once per recipe identity; a
        finished LOADED/UNAVAILABLE state is never retried.
        """
        state = self._state
        if state.phase is not Phase.DISPLAYING or state.recipe is None:
            return state
        if state.image_status is not ImageStatus.IDLE:
            return state

        submission_id = state.submission_id
        key = state.recipe.key
        self.dispatch(ImageRequested(submission_id, key))

        try:
            result = await self._image_requester(*key)
        except Exception:
            logger.exception("Image generation failed")
            result = ImageResult.unavailable("image request raised")

        if result.ok:
            return self.dispatch(ImageReceived(submission_id, key, result.url))
        return self.dispatch(ImageFailed(submission_id, key, result.error or ""))

    def report_image_error(self, title: str, description: str) -> SessionState:
        """Record a render-time load failure for the displayed recipe's image."""
        return self.dispatch(
            ImageFailed(self._state.submission_id, (title, description), RENDER_ERROR)
        )

    def reset(self) -> SessionState:
        """Return to EMPTY and supersede anything still in flight."""
        return self.dispatch(Reset())
