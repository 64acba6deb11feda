import json

import pytest

from recipe_chef.core.recipe import ImageResult, Recipe


SCRAMBLE = {
    "title": "Spinach Feta Scramble",
    "description": "A quick savory breakfast.",
    "ingredients": ["eggs", "spinach", "feta"],
    "instructions": ["Beat eggs", "Cook spinach", "Add feta and eggs"],
}


@pytest.fixture
def scramble_payload():
    return dict(SCRAMBLE)


@pytest.fixture
def scramble_recipe():
    return Recipe.from_payload(SCRAMBLE)


@pytest.fixture
def fenced_completion():
    return "```json\n" + json.dumps(SCRAMBLE) + "\n```"


class RecordingRecipeRequester:
    """Blocking recipe requester returning a fixed payload or raising."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, ingredients):
        self.calls.append(ingredients)
        if self.error is not None:
            raise self.error
        return self.result


class RecordingImageRequester:
    """Async image requester returning a fixed `ImageResult` or raising."""

    def __init__(self, result=None, error=None):
        self.result = result or ImageResult.loaded("https://img.example/dish.png")
        self.error = error
        self.calls = []

    async def __call__(self, title, description):
        self.calls.append((title, description))
        if self.error is not None:
            raise self.error
        return self.result
