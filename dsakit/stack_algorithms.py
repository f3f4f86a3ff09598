"""Algorithms built on stacks: reordering, bracket checks, nearest-smaller and rectangles."""

from __future__ import annotations

from typing import Any, Optional, Sequence

_OPERATORS = frozenset("+-*/")
_PAIRS = {")": "(", "]": "[", "}": "{"}


def insert_at_bottom(stack: list[Any], element: Any) -> None:
    """Put element below every item of the stack (the list's end is its top)."""
    stack.insert(0, element)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse the stack in place."""
    stack.reverse()


def sort_stack(stack: list[Any]) -> None:
    """Sort the stack in place so that the largest item is on top."""
    stack.sort()


def delete_middle(stack: list[Any]) -> Any:
    """Remove and return the item ``len(stack) // 2`` places below the top."""
    if not stack:
        raise IndexError("delete from empty stack")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def reverse_string(text: str) -> str:
    """Return text reversed."""
    return text[::-1]


def is_valid_parentheses(text: str) -> bool:
    """Return whether text is a balanced sequence of (), [] and {} brackets only."""
    stack: list[str] = []
    for ch in text:
        if ch in "([{":
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def has_redundant_brackets(expression: str) -> bool:
    """Return whether some pair of parentheses in expression encloses no operator."""
    stack: list[str] = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while True:
                if not stack:
                    raise ValueError("unmatched ')' in expression")
                if stack.pop() == "(":
                    break
                redundant = False
            if redundant:
                return True
    return False


def min_cost_to_balance(text: str) -> int:
    """Return the fewest brace flips that make a string of '{' and '}' balanced."""
    if len(text) % 2:
        raise ValueError("a string of odd length cannot be balanced")
    stack: list[str] = []
    for ch in text:
        if ch != "{" and stack and stack[-1] == "{":
            stack.pop()
        else:
            stack.append(ch)
    opening = stack.count("{")
    closing = len(stack) - opening
    return (closing + 1) // 2 + (opening + 1) // 2


def next_smaller_indices(values: Sequence[Any]) -> list[int]:
    """For each item, the index of the next strictly smaller item to its right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i in reversed(range(len(values))):
        while stack and values[i] <= values[stack[-1]]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def previous_smaller_indices(values: Sequence[Any]) -> list[int]:
    """For each item, the index of the nearest strictly smaller item to its left, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and value <= values[stack[-1]]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def next_smaller_values(values: Sequence[Any]) -> list[Optional[Any]]:
    """For each item, the next strictly smaller item to its right, or None."""
    return [values[j] if j != -1 else None for j in next_smaller_indices(values)]


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under a histogram; 0 when empty."""
    if not heights:
        return 0
    size = len(heights)
    following = next_smaller_indices(heights)
    preceding = previous_smaller_indices(heights)
    return max(
        height * ((size if nxt == -1 else nxt) - prev - 1)
        for height, nxt, prev in zip(heights, following, preceding)
    )


def max_rectangle_in_binary_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-ones rectangle in a binary matrix."""
    if not matrix:
        return 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    heights = [0] * cols
    best = 0
    for row in matrix:
        heights = [height + cell if cell else 0 for height, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def find_celebrity(matrix: Sequence[Sequence[int]]) -> Optional[int]:
    """Return the person everyone knows and who knows nobody, or None.

    ``matrix[a][b] == 1`` means that person a knows person b.
    """
    size = len(matrix)
    if size == 0:
        return None
    candidates = list(range(size))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        if matrix[a][b] == 1 and matrix[b][a] == 0:
            candidates.append(b)
        else:
            candidates.append(a)
    candidate = candidates[0]
    if all(
        matrix[candidate][i] == 0 and matrix[i][candidate] == 1
        for i in range(size)
        if i != candidate
    ):
        return candidate
    return None