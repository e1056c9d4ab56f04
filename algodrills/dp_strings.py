"""Dynamic-programming problems over strings."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Iterator

MOD = 1_000_000_007

_OPERATORS = "^|&"
_OPERANDS = "TF"


def edit_distance(s: str, t: str) -> int:
    """Return the minimum number of inserts, removals and replacements turning s into t."""
    previous = list(range(len(t) + 1))
    for i, a in enumerate(s, 1):
        current = [i]
        for j, b in enumerate(t, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def is_interleaved(a: str, b: str, c: str) -> bool:
    """Tell whether c is an interleaving of a and b (tabulated)."""
    if len(c) != len(a) + len(b):
        return False
    row = [True]
    for j, ch in enumerate(b, 1):
        row.append(row[j - 1] and ch == c[j - 1])
    for i, ca in enumerate(a, 1):
        current = [row[0] and ca == c[i - 1]]
        for j, cb in enumerate(b, 1):
            cc = c[i + j - 1]
            current.append((cc == ca and row[j]) or (cc == cb and current[j - 1]))
        row = current
    return row[-1]


def is_interleaved_recursive(a: str, b: str, c: str) -> bool:
    """Tell whether c is an interleaving of a and b (by recursion on prefixes)."""
    if len(c) != len(a) + len(b):
        return False

    @lru_cache(maxsize=None)
    def check(i: int, j: int) -> bool:
        if i == len(a):
            return b[j:] == c[i + j:]
        if j == len(b):
            return a[i:] == c[i + j:]
        cc = c[i + j]
        take_a = cc == a[i] and check(i + 1, j)
        return take_a or (cc == b[j] and check(i, j + 1))

    return check(0, 0)


def lcs(s: str, t: str) -> int:
    """Return the length of the longest common subsequence using a full table."""
    table = [[0] * (len(t) + 1) for _ in range(len(s) + 1)]
    for i, a in enumerate(s, 1):
        for j, b in enumerate(t, 1):
            if a == b:
                table[i][j] = 1 + table[i - 1][j - 1]
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table[-1][-1]


def lcs_two_rows(s: str, t: str) -> int:
    """Return the length of the longest common subsequence keeping only two rows."""
    previous = [0] * (len(t) + 1)
    for a in s:
        current = [0]
        for j, b in enumerate(t, 1):
            if a == b:
                current.append(1 + previous[j - 1])
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def longest_palindromic_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence of s."""
    return lcs(s[::-1], s)


def longest_palindromic_subsequence_recursive(s: str) -> int:
    """Return the longest palindromic subsequence length by interval recursion."""

    @lru_cache(maxsize=None)
    def best(low: int, high: int) -> int:
        if low > high:
            return 0
        if low == high:
            return 1
        if s[low] == s[high]:
            return 2 + best(low + 1, high - 1)
        return max(best(low + 1, high), best(low, high - 1))

    return best(0, len(s) - 1)


def _is_palindrome(piece: str) -> bool:
    return piece == piece[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every split of s into palindromic pieces, shortest first piece first."""

    def partitions(start: int) -> Iterator[list[str]]:
        if start >= len(s):
            yield []
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                for rest in partitions(end):
                    yield [piece, *rest]

    return list(partitions(0))


def word_break_sentences(s: str, words: Iterable[str]) -> list[str]:
    """Return every way of splitting s into dictionary words, as space-joined sentences."""
    vocabulary = set(words)

    def splits(rest: str) -> list[list[str]]:
        if not rest:
            return [[]]
        found = []
        for end in range(1, len(rest) + 1):
            head = rest[:end]
            if head in vocabulary:
                found.extend([head, *tail] for tail in splits(rest[end:]))
        return found

    return [" ".join(sentence) for sentence in splits(s)]


def _combine(left: tuple[int, int], right: tuple[int, int], op: str) -> tuple[int, int]:
    lt, lf = left
    rt, rf = right
    if op == "^":
        return (lt * rf + lf * rt) % MOD, (lt * rt + lf * rf) % MOD
    if op == "|":
        return (lt * rt + lt * rf + lf * rt) % MOD, (lf * rf) % MOD
    return (lt * rt) % MOD, (lf * rf + lt * rf + lf * rt) % MOD


def count_true_evaluations(expression: str) -> int:
    """Count parenthesisations of a T/F expression with ^, | and & that yield true, mod 1e9+7."""
    operands = expression[0::2]
    operators = expression[1::2]
    if not operands:
        raise ValueError("expression is empty")
    if any(ch not in _OPERANDS for ch in operands):
        raise ValueError(f"invalid operand in {expression!r}")
    if len(operators) != len(operands) - 1 or any(
        ch not in _OPERATORS for ch in operators
    ):
        raise ValueError(f"invalid operator in {expression!r}")

    count = len(operands)
    table: list[list[tuple[int, int]]] = [[(0, 0)] * count for _ in range(count)]
    for i in reversed(range(count)):
        table[i][i] = (1, 0) if operands[i] == "T" else (0, 1)
        for j in range(i + 1, count):
            true_ways = false_ways = 0
            for k in range(i, j):
                t, f = _combine(table[i][k], table[k + 1][j], operators[k])
                true_ways = (true_ways + t) % MOD
                false_ways = (false_ways + f) % MOD
            table[i][j] = (true_ways, false_ways)
    return table[0][count - 1][0]