"""Evaluation of integer expressions written in reverse Polish notation."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable

from adtkit.stack import Stack, StackEmptyError, StackFullError

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


OPERATORS = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
}


def evaluate(tokens: Iterable[str]) -> int:
    """Evaluate a postfix expression; division truncates toward zero."""
    stack = Stack()
    for token in tokens:
        operation = OPERATORS.get(token)
        if operation is None:
            match = _LEADING_INT.match(token)
            if match is None:
                raise ValueError(f"not an integer: {token!r}")
            stack.push(int(match.group(1)))
        else:
            right, left = stack.pop(), stack.pop()
            stack.push(operation(left, right))
    return stack.peek()


def main(argv: list[str] | None = None) -> int:
    """Read a token count and the tokens from stdin; print the result."""
    words = sys.stdin.read().split()
    if not words or not words[0].lstrip("+-").isdigit():
        return 0
    try:
        result = evaluate(words[1 : 1 + max(int(words[0]), 0)])
    except (ZeroDivisionError, StackEmptyError, StackFullError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0