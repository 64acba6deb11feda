"""Recipe and image value types.

`Recipe` is built from the JSON object recovered from a completion. A payload
that cannot produce a displayable recipe raises `ValidationError`; there is no
partial result.

`ImageResult` is the outcome of one image request: either a resolved URL or an
error description, never both.
"""

from dataclasses import dataclass
from typing import Any

from recipe_chef.core.errors import ValidationError


def _clean_text(value: Any) -> str:
    """Trim a JSON string and replace lone surrogates so it stays UTF-8 encodable."""
    if not isinstance(value, str):
        return ""
    return value.encode("utf-8", "replace").decode("utf-8").strip()


def _clean_lines(value: Any) -> tuple[str, ...] | None:
    """Normalize a JSON list into trimmed, non-blank strings.

    Returns `None` when `value` is not a list.
    """
    if not isinstance(value, list):
        return None
    lines = []
    for item in value:
        if item is None:
            continue
        text = _clean_text(str(item))
        if text:
            lines.append(text)
    return tuple(lines)


@dataclass(frozen=True)
class Recipe:
    """Displayable recipe.

    Attributes:
        title: Non-empty dish name.
        description: Short appetizing description, may be empty.
        ingredients: Non-empty ingredient lines.
        instructions: Non-empty ordered steps.
    """

    title: str
    description: str
    ingredients: tuple[str, ...]
    instructions: tuple[str, ...]

    @property
    def key(self) -> tuple[str, str]:
        """Identity used to scope image generation to this recipe."""
        return (self.title, self.description)

    @classmethod
    def from_payload(cls, payload: Any) -> "Recipe":
        """Validate a parsed completion object and build a `Recipe`.

        Args:
            payload: Object returned by `recipe_chef.llm.parsing.extract_json_object`.

        Returns:
            Displayable recipe.

        Raises:
            ValidationError: When the payload is not an object, the title is blank,
                or ingredients/instructions are missing or empty.
        """
        if not isinstance(payload, dict):
            raise ValidationError("recipe payload is not an object", missing=("title", "ingredients", "instructions"))

        missing = []

        title = _clean_text(payload.get("title"))
        if not title:
            missing.append("title")

        ingredients = _clean_lines(payload.get("ingredients"))
        if not ingredients:
            missing.append("ingredients")

        instructions = _clean_lines(payload.get("instructions"))
        if not instructions:
            missing.append("instructions")

        if missing:
            raise ValidationError(
                f"incomplete recipe: missing {', '.join(missing)}",
                missing=missing,
            )

        description = _clean_text(payload.get("description"))

        return cls(
            title=title,
            description=description,
            ingredients=ingredients,
            instructions=instructions,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
        }


@dataclass(frozen=True)
class ImageResult:
    """Outcome of a single image request."""

    url: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.url is not None

    @classmethod
    def loaded(cls, url: str) -> "ImageResult":
        return cls(url=url)

    @classmethod
    def unavailable(cls, error: str) -> "ImageResult":
        return cls(error=error)
