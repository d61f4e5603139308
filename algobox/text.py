"""String utilities: reversal, word counting, editing, LCS and postfix evaluation."""

from __future__ import annotations

from algobox.numbers import calculate

_OPERATORS = frozenset("+-*/")


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def reverse_sentence(sentence: str) -> str:
    """Reverse the characters of ``sentence`` up to its first newline."""
    line, _, _ = sentence.partition("\n")
    return line[::-1]


def word_count(sentence: str) -> int:
    """Count runs of ASCII letters; every other character separates words."""
    count = 0
    in_word = False
    for char in sentence:
        if ("A" <= char <= "Z") or ("a" <= char <= "z"):
            if not in_word:
                in_word = True
                count += 1
        else:
            in_word = False
    return count


def truncated_concat(text: str, suffix: str) -> str:
    """Append at most ``len(text) - 1`` characters of ``suffix`` to ``text``.

    An empty ``text`` takes the whole of ``suffix``.
    """
    limit = len(text) - 1 if text else len(suffix)
    return text + suffix[:limit]


def replace_characters(text: str, old: str, new: str) -> str:
    """Replace each character of ``old`` by the matching character of ``new``.

    The replacements run one after another, so a character produced by an
    earlier replacement may be replaced again by a later one. Characters of
    ``old`` beyond the length of ``text`` are not used.
    """
    if len(old) != len(new):
        raise ValueError("the replacing word must have the same length as the word replaced")
    result = text
    for original, replacement in zip(old[: len(text)], new):
        result = result.replace(original, replacement)
    return result


def substring(text: str, position: int, length: int) -> str:
    """Return ``length`` characters of ``text`` starting at 1-based ``position``."""
    if position < 1:
        raise ValueError("position must be at least 1")
    if length < 0:
        raise ValueError("length must not be negative")
    start = position - 1
    if start + length > len(text):
        raise ValueError("substring runs past the end of the string")
    return text[start : start + length]


def longest_common_subsequence(first: str, second: str) -> str:
    """Return a longest common subsequence of two strings."""
    rows, cols = len(first), len(second)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    letters: list[str] = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            letters.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(letters))


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and ``+ - * /``.

    Division truncates toward zero. Other characters are ignored.
    """
    stack: list[int] = []
    for char in expression:
        if "0" <= char <= "9":
            stack.append(int(char))
        elif char in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} needs two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(calculate(left, char, right))
    if not stack:
        raise ValueError("expression has no value")
    return stack[-1]