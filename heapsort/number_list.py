from collections.abc import Iterable
from math import isfinite
from typing import Optional

from .Config import *
from .Heap import Heap


def split_tokens(text: str, separator: str = INPUT_SEPARATOR) -> list[str]:
    "Split on `separator`, dropping trailing empty fields"
    tokens = [token.strip() for token in text.split(separator)]
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def parse_numbers(text: str, separator: str = INPUT_SEPARATOR) -> tuple[list[float], list[str]]:
    numbers: list[float] = []
    errors: list[str] = []
    for token in split_tokens(text, separator):
        try:
            value = float(token)
        except ValueError:
            value = None
        if value is None or not isfinite(value):
            errors.append(f"{token!r} is not a number" if not token else f"{token} is not a number")
            continue
        numbers.append(value)
    return numbers, errors


def format_number(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else str(x)


def format_numbers(values: Iterable[float], separator: str = INPUT_SEPARATOR) -> str:
    return separator.join(format_number(x) for x in values)


def heap_sort_text(text: str, separator: str = INPUT_SEPARATOR) -> tuple[Optional[list[float]], list[str]]:
    numbers, errors = parse_numbers(text, separator)
    if errors:
        return None, errors
    return Heap(numbers).sort(), errors
