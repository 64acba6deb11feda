"""Immutable session state and its reducer.

Architectural role:
    Holds everything the view layer needs to render the single screen: the
    submission phase, the current recipe, the image region and the latest toast.
    `reduce(state, action)` is pure, so every transition can be tested without a
    rendering environment or network.

State machines:
    Recipe:  EMPTY -> GENERATING -> {DISPLAYING | FAILED}; `Submit` is accepted
             from any phase.
    Image:   IDLE -> LOADING -> {LOADED | UNAVAILABLE}; re-entered only for a new
             recipe identity.

Stale responses:
    Each `Submit` increments `submission_id`. Recipe actions carrying an older id
    are ignored, and image actions must also match the displayed recipe's
    `(title, description)` key. The latest submission always wins.
"""

from dataclasses import dataclass, replace
from enum import Enum

from recipe_chef.core.recipe import Recipe


class Phase(str, Enum):
    EMPTY = "empty"
    GENERATING = "generating"
    DISPLAYING = "displaying"
    FAILED = "failed"


class ImageStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class Notification:
    """Toast-style message for the view layer."""

    level: str
    title: str
    description: str = ""


INPUT_REQUIRED = Notification(
    level="warning",
    title="Psst... need some ingredients first!",
    description="Tell me what you have in your kitchen.",
)

GENERATION_FAILED_TITLE = "Uh oh! Something went wrong."
GENERATION_FAILED_DESCRIPTION = "Failed to generate recipe. Please try again."

INCOMPLETE_RECIPE = Notification(
    level="error",
    title="Hmm, couldn't whip up a recipe.",
    description="Try being more specific or check your ingredients.",
)


def generation_failed(description: str | None = None) -> Notification:
    return Notification(
        level="error",
        title=GENERATION_FAILED_TITLE,
        description=description or GENERATION_FAILED_DESCRIPTION,
    )


@dataclass(frozen=True)
class SessionState:
    phase: Phase = Phase.EMPTY
    ingredients: str = ""
    recipe: Recipe | None = None
    image_status: ImageStatus = ImageStatus.IDLE
    image_url: str | None = None
    notification: Notification | None = None
    submission_id: int = 0

    def to_dict(self) -> dict:
        return {
            "phase": self.phase.value,
            "ingredients": self.ingredients,
            "recipe": self.recipe.to_dict() if self.recipe else None,
            "image": {
                "status": self.image_status.value,
                "url": self.image_url,
            },
            "notification": (
                {
                    "level": self.notification.level,
                    "title": self.notification.title,
                    "description": self.notification.description,
                }
                if self.notification
                else None
            ),
            "submission_id": self.submission_id,
        }


# =========================================================
# ACTIONS
# =========================================================

@dataclass(frozen=True)
class Submit:
    ingredients: str


@dataclass(frozen=True)
class InputRejected:
    notification: Notification = INPUT_REQUIRED


@dataclass(frozen=True)
class RecipeReceived:
    submission_id: int
    recipe: Recipe


@dataclass(frozen=True)
class RecipeFailed:
    submission_id: int
    notification: Notification


@dataclass(frozen=True)
class ImageRequested:
    submission_id: int
    key: tuple[str, str]


@dataclass(frozen=True)
class ImageReceived:
    submission_id: int
    key: tuple[str, str]
    url: str


@dataclass(frozen=True)
class ImageFailed:
    submission_id: int
    key: tuple[str, str]
    reason: str = ""


@dataclass(frozen=True)
class Reset:
    pass


def _is_current_image(state: SessionState, submission_id: int, key) -> bool:
    return (
        state.phase is Phase.DISPLAYING
        and state.recipe is not None
        and state.submission_id == submission_id
        and state.recipe.key == tuple(key)
    )


def reduce(state: SessionState, action) -> SessionState:
    """Return the state that results from applying `action` to `state`."""
    if isinstance(action, Submit):
        return SessionState(
            phase=Phase.GENERATING,
            ingredients=action.ingredients.strip(),
            submission_id=state.submission_id + 1,
        )

    if isinstance(action, InputRejected):
        return replace(state, notification=action.notification)

    if isinstance(action, RecipeReceived):
        if action.submission_id != state.submission_id:
            return state
        return replace(
            state,
            phase=Phase.DISPLAYING,
            recipe=action.recipe,
            image_status=ImageStatus.IDLE,
            image_url=None,
            notification=None,
        )

    if isinstance(action, RecipeFailed):
        if action.submission_id != state.submission_id:
            return state
        return replace(
            state,
            phase=Phase.FAILED,
            recipe=None,
            image_status=ImageStatus.IDLE,
            image_url=None,
            notification=action.notification,
        )

    if isinstance(action, ImageRequested):
        if not _is_current_image(state, action.submission_id, action.key):
            return state
        if state.image_status is not ImageStatus.IDLE:
            return state
        return replace(state, image_status=ImageStatus.LOADING, image_url=None)

    if isinstance(action, ImageReceived):
        if not _is_current_image(state, action.submission_id, action.key):
            return state
        if state.image_status is not ImageStatus.LOADING:
            return state
        return replace(state, image_status=ImageStatus.LOADED, image_url=action.url)

    if isinstance(action, ImageFailed):
        if not _is_current_image(state, action.submission_id, action.key):
            return state
        return replace(state, image_status=ImageStatus.UNAVAILABLE, image_url=None)

    if isinstance(action, Reset):
        return SessionState(submission_id=state.submission_id + 1)

    raise TypeError(f"Unknown action: {action!r}")
