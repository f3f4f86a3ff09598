"""Recursive backtracking problems: permutations, subsets, keypad words, maze paths."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")

# Moves tried in this order: down, up, left, right.
_MOVES = (("D", 1, 0), ("U", -1, 0), ("L", 0, -1), ("R", 0, 1))


def permutations(text: str) -> list[str]:
    """Return every permutation of text, in swap-based generation order."""
    if not text:
        return []
    chars = list(text)
    result: list[str] = []

    def solve(index: int) -> None:
        if index >= len(chars):
            result.append("".join(chars))
            return
        for i in range(index, len(chars)):
            chars[index], chars[i] = chars[i], chars[index]
            solve(index + 1)
            chars[index], chars[i] = chars[i], chars[index]

    solve(0)
    return result


def power_set(nums: Iterable[Any]) -> list[list[Any]]:
    """Return all subsets of nums; at each element the exclusion branch comes first."""
    items = list(nums)
    result: list[list[Any]] = []

    def solve(index: int, output: list[Any]) -> None:
        if index >= len(items):
            result.append(output)
            return
        solve(index + 1, output)
        solve(index + 1, output + [items[index]])

    solve(0, [])
    return result


def subsequences(text: str) -> list[str]:
    """Return all subsequences of text, including the empty one, exclusion first."""
    result: list[str] = []

    def solve(index: int, output: str) -> None:
        if index >= len(text):
            result.append(output)
            return
        solve(index + 1, output)
        solve(index + 1, output + text[index])

    solve(0, "")
    return result


def phone_keypad(digits: str) -> list[str]:
    """Return every letter combination the digit string can spell on a phone keypad."""
    if not digits:
        return []
    for ch in digits:
        if ch not in "0123456789":
            raise ValueError(f"not a keypad digit: {ch!r}")
    result: list[str] = []

    def solve(index: int, output: str) -> None:
        if index >= len(digits):
            result.append(output)
            return
        for letter in _KEYPAD[int(digits[index])]:
            solve(index + 1, output + letter)

    solve(0, "")
    return result


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return all sorted paths of D/U/L/R moves from the top-left to the bottom-right.

    Cells holding 1 are open; each path visits a cell at most once.
    """
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("maze must be a non-empty square grid")
    if grid[0][0] == 0:
        return []
    paths: list[str] = []
    visited: set[tuple[int, int]] = set()

    def solve(x: int, y: int, path: str) -> None:
        if x == n - 1 and y == n - 1:
            paths.append(path)
            return
        visited.add((x, y))
        for step, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and (nx, ny) not in visited and grid[nx][ny] == 1:
                solve(nx, ny, path + step)
        visited.discard((x, y))

    solve(0, 0, "")
    return sorted(paths)