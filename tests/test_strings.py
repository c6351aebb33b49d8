import pytest

from algokit.strings import (
    infix_to_postfix,
    is_palindrome,
    manacher,
    palindrome_radii,
    prefix_function,
)

SAMPLES = ["abacabadd", "aabaaab", "abcabcabc", "zzzz", "a", "abcd"]


def test_prefix_function_known_value():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


def test_prefix_function_repeated_letter():
    assert prefix_function("a" * 6) == list(range(6))


def test_prefix_function_empty():
    assert prefix_function("") == []


@pytest.mark.parametrize("text", SAMPLES)
def test_prefix_function_values_are_borders(text):
    pi = prefix_function(text)
    assert len(pi) == len(text)
    assert pi[0] == 0
    for i, length in enumerate(pi):
        assert length <= i
        assert text[:length] == text[i - length + 1 : i + 1]
        if i:
            assert length <= pi[i - 1] + 1


@pytest.mark.parametrize("text", SAMPLES)
def test_manacher_radii_are_maximal_palindromes(text):
    radii = manacher(text)
    for i, radius in enumerate(radii):
        piece = text[i - radius + 1 : i + radius]
        assert piece == piece[::-1]
        at_edge = i - radius < 0 or i + radius >= len(text)
        assert at_edge or text[i - radius] != text[i + radius]


@pytest.mark.parametrize("text", SAMPLES)
def test_palindrome_radii_length(text):
    assert len(palindrome_radii(text)) == 2 * len(text) + 1


@pytest.mark.parametrize("text", SAMPLES)
def test_is_palindrome_matches_definition(text):
    radii = palindrome_radii(text)
    for left in range(len(text)):
        for right in range(left, len(text)):
            piece = text[left : right + 1]
            assert is_palindrome(radii, left, right) == (piece == piece[::-1])


def test_is_palindrome_rejects_bad_range():
    radii = palindrome_radii("abc")
    with pytest.raises(ValueError):
        is_palindrome(radii, 2, 1)
    with pytest.raises(ValueError):
        is_palindrome(radii, 0, 3)


def test_infix_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_infix_left_associative_minus():
    assert infix_to_postfix("a-b-c") == infix_to_postfix("(a-b)-c")


def test_infix_right_associative_power():
    assert infix_to_postfix("a^b^c") == infix_to_postfix("a^(b^c)")


def test_infix_hash_ends_expression():
    assert infix_to_postfix("a+b#*c") == infix_to_postfix("a+b")


@pytest.mark.parametrize("expression", ["a+b*c-d/e", "(1+2)^3*x", "p*(q+r)^s"])
def test_infix_keeps_operands_in_order(expression):
    result = infix_to_postfix(expression)
    assert [c for c in result if c.isalnum()] == [c for c in expression if c.isalnum()]
    assert sorted(result) == sorted(c for c in expression if c not in "()")


def test_infix_unmatched_close_paren():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")