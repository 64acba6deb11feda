"""Exception taxonomy shared by the generation clients and the controller.

Hierarchy:
    RecipeChefError
    ├── GenerationError      text-generation request or parse failure
    │   └── InputError       empty ingredient text, raised before any network call
    ├── ValidationError      well-formed payload missing required fields
    └── ImageError           image fetch/validation failure (client-internal)

`InputError` subclasses `GenerationError` so that callers of
`recipe_chef.llm.service.request_recipe` only need to handle one type; the
controller still checks for it first and reports it with its own message.
"""


class RecipeChefError(Exception):
    """Base class for all domain errors."""


class GenerationError(RecipeChefError):
    """Text generation failed: transport, status, or unparsable completion."""


class InputError(GenerationError):
    """Ingredient text is empty or whitespace-only."""


class ValidationError(RecipeChefError):
    """The recipe payload parsed but is not displayable.

    Attributes:
        missing: Names of the fields that were absent or empty.
    """

    def __init__(self, message: str, missing=()):
        super().__init__(message)
        self.missing = tuple(missing)


class ImageError(RecipeChefError):
    """Image generation failed; confined to the image region."""
