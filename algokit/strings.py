"""String algorithms: prefix function, Manacher's palindromes and infix-to-postfix."""

from __future__ import annotations

from typing import Sequence

# In-stack and incoming priorities of the operators.
_IN_STACK = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1, "(": 0, "$": -1}
_INCOMING = {"^": 4, "*": 2, "/": 2, "+": 1, "-": 1}


def prefix_function(text: str) -> list[int]:
    """Return pi where pi[i] is the length of the longest proper border of text[:i + 1]."""
    pi = [0] * len(text)
    for i in range(1, len(text)):
        j = pi[i - 1]
        while j > 0 and text[i] != text[j]:
            j = pi[j - 1]
        if text[i] == text[j]:
            j += 1
        pi[i] = j
    return pi


def manacher(text: str) -> list[int]:
    """Return odd palindrome radii: text[i - r + 1:i + r] is the longest palindrome centred at i."""
    size = len(text)
    radii = [1] * size
    left = right = 1
    for i in range(1, size):
        radius = min(right - i, radii[left + right - i]) if i < right else 0
        radius = max(0, radius)
        while i + radius < size and i - radius >= 0 and text[i - radius] == text[i + radius]:
            radius += 1
        radii[i] = radius
        if i + radius > right:
            left, right = i - radius, i + radius
    return radii


def palindrome_radii(text: str) -> list[int]:
    """Run Manacher's algorithm on ``text`` interleaved with separators ("#a#b#")."""
    return manacher("#" + "#".join(text) + "#" if text else "#")


def is_palindrome(radii: Sequence[int], left: int, right: int) -> bool:
    """Tell whether text[left:right + 1] is a palindrome, given ``palindrome_radii(text)``."""
    if left > right or left < 0:
        raise ValueError("need 0 <= left <= right")
    x = 2 * left + 1
    y = 2 * right + 1
    if y >= len(radii):
        raise ValueError("right is past the end of the text")
    mid = (x + y) // 2
    return 2 * radii[mid] - 1 >= y - x + 1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over lowercase letters and digits to postfix.

    Operators are ``+ - * / ^`` (``^`` is right associative) and parentheses
    group. A ``#`` ends the expression; other characters are ignored.
    """
    output: list[str] = []
    stack = ["$"]
    for char in expression:
        if char == "#":
            break
        if "a" <= char <= "z" or "0" <= char <= "9":
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack[-1] != "(":
                if stack[-1] == "$":
                    raise ValueError("unmatched ')' in expression")
                output.append(stack.pop())
            stack.pop()
        elif char in _INCOMING:
            while _IN_STACK[stack[-1]] >= _INCOMING[char]:
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack[1:]))
    return "".join(output)