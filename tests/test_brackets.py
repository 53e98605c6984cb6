import pytest

from dsworkbench.brackets import is_valid


def test_sample_from_program():
    assert is_valid("{}{}{}") is True


@pytest.mark.parametrize("text", ["", "()", "[]", "{}", "([]{})", "{[()()]}"])
def test_balanced(text):
    assert is_valid(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "{{}", "}{"])
def test_unbalanced(text):
    assert is_valid(text) is False


def test_non_bracket_character_is_rejected():
    assert is_valid("(a)") is False


def test_nesting_matches_concatenation():
    inner = "[()]"
    assert is_valid("{" + inner + "}") is is_valid(inner)