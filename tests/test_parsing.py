"""
Tests for completion cleanup and JSON recovery.
"""

import pytest

from recipe_chef.core.errors import GenerationError
from recipe_chef.llm.parsing import extract_json_object, strip_code_fences

from tests.conftest import SCRAMBLE


def test_strip_code_fences_removes_markers_and_whitespace():
    assert strip_code_fences('```json\n{"a": 1}\n```  ') == '{"a": 1}'
    assert strip_code_fences('```{"a": 1}```') == '{"a": 1}'
    assert strip_code_fences("") == ""


def test_fenced_completion_is_recovered(fenced_completion):
    assert extract_json_object(fenced_completion) == SCRAMBLE


def test_prose_wrapped_completion_is_recovered():
    completion = (
        'Sure! {"title":"X","description":"Y","ingredients":["a"],'
        '"instructions":["b"]} Enjoy!'
    )

    assert extract_json_object(completion) == {
        "title": "X",
        "description": "Y",
        "ingredients": ["a"],
        "instructions": ["b"],
    }


def test_prose_and_fences_together_are_recovered():
    completion = 'Here you go:\n```json\n{"title": "Soup"}\n```\nBon appetit!'

    assert extract_json_object(completion) == {"title": "Soup"}


def test_refusal_is_a_parse_failure():
    with pytest.raises(GenerationError, match="parse failure"):
        extract_json_object("I cannot help with that.")


@pytest.mark.parametrize("completion", [
    "[1, 2, 3]",
    '"just a string"',
    "{not json at all}",
    "",
])
def test_non_object_completions_fail(completion):
    with pytest.raises(GenerationError):
        extract_json_object(completion)
