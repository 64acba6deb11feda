"""
Tests for the pure session reducer.
"""

import pytest

from recipe_chef.core.state import (
    INCOMPLETE_RECIPE,
    INPUT_REQUIRED,
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


@pytest.fixture
def displaying(scramble_recipe):
    state = reduce(SessionState(), Submit("eggs, spinach, feta"))
    return reduce(state, RecipeReceived(state.submission_id, scramble_recipe))


def test_submit_enters_generating_and_clears_previous(displaying):
    state = reduce(displaying, Submit("  rice  "))

    assert state.phase is Phase.GENERATING
    assert state.ingredients == "rice"
    assert state.recipe is None
    assert state.submission_id == displaying.submission_id + 1


def test_recipe_received_displays(displaying, scramble_recipe):
    assert displaying.phase is Phase.DISPLAYING
    assert displaying.recipe == scramble_recipe
    assert displaying.image_status is ImageStatus.IDLE


def test_recipe_failed_clears_recipe():
    state = reduce(SessionState(), Submit("eggs"))
    state = reduce(state, RecipeFailed(state.submission_id, INCOMPLETE_RECIPE))

    assert state.phase is Phase.FAILED
    assert state.recipe is None
    assert state.notification == INCOMPLETE_RECIPE


def test_input_rejected_keeps_current_recipe(displaying):
    state = reduce(displaying, InputRejected())

    assert state.recipe == displaying.recipe
    assert state.phase is Phase.DISPLAYING
    assert state.notification == INPUT_REQUIRED


def test_stale_recipe_results_are_dropped(scramble_recipe):
    state = reduce(SessionState(), Submit("first"))
    state = reduce(state, Submit("second"))

    assert reduce(state, RecipeReceived(1, scramble_recipe)) is state
    assert reduce(state, RecipeFailed(1, generation_failed())) is state


def test_image_lifecycle(displaying):
    sid, key = displaying.submission_id, displaying.recipe.key

    loading = reduce(displaying, ImageRequested(sid, key))
    assert loading.image_status is ImageStatus.LOADING

    loaded = reduce(loading, ImageReceived(sid, key, "https://img/1.png"))
    assert loaded.image_status is ImageStatus.LOADED
    assert loaded.image_url == "https://img/1.png"

    # A render-time failure after load still ends in UNAVAILABLE.
    broken = reduce(loaded, ImageFailed(sid, key, "render"))
    assert broken.image_status is ImageStatus.UNAVAILABLE
    assert broken.image_url is None
    assert broken.recipe == displaying.recipe


def test_image_never_reenters_loading(displaying):
    sid, key = displaying.submission_id, displaying.recipe.key
    failed = reduce(reduce(displaying, ImageRequested(sid, key)), ImageFailed(sid, key))

    assert reduce(failed, ImageRequested(sid, key)) is failed


def test_image_results_for_other_recipes_are_dropped(displaying):
    sid = displaying.submission_id

    assert reduce(displaying, ImageReceived(sid, ("Other", "dish"), "u")) is displaying
    assert reduce(displaying, ImageFailed(sid - 1, displaying.recipe.key)) is displaying


def test_reset_returns_to_empty_and_supersedes(displaying):
    state = reduce(displaying, Reset())

    assert state.phase is Phase.EMPTY
    assert state.recipe is None
    assert state.submission_id == displaying.submission_id + 1


def test_unknown_action_raises():
    with pytest.raises(TypeError):
        reduce(SessionState(), object())


def test_to_dict_shape(displaying):
    data = displaying.to_dict()

    assert data["phase"] == "displaying"
    assert data["recipe"]["title"] == "Spinach Feta Scramble"
    assert data["image"] == {"status": "idle", "url": None}
    assert data["notification"] is None


def test_unavailable_is_terminal_for_late_image(displaying):
    sid, key = displaying.submission_id, displaying.recipe.key
    loading = reduce(displaying, ImageRequested(sid, key))

    # A render failure reported while the fetch is still in flight.
    failed = reduce(loading, ImageFailed(sid, key, "render"))

    assert reduce(failed, ImageReceived(sid, key, "https://img/late.png")) is failed
    assert failed.image_status is ImageStatus.UNAVAILABLE


def test_image_received_requires_loading(displaying):
    sid, key = displaying.submission_id, displaying.recipe.key

    assert reduce(displaying, ImageReceived(sid, key, "https://img/1.png")) is displaying
