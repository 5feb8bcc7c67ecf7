"""Collect a loosely-shaped block of children into an ordered element tuple.

Accepts what callers naturally write when assembling content: single
elements, lists/tuples/generators of elements, and zero-argument callables
returning any of those. ``None`` and ``False`` are skipped so conditional
content can be written inline (``heading if show else None``).
"""
from collections.abc import Callable, Iterable

from models.elements import Element


def collect(*parts) -> tuple[Element, ...]:
    result: list[Element] = []
    for part in parts:
        _collect_into(result, part)
    return tuple(result)


def _collect_into(result: list[Element], part) -> None:
    if part is None or part is False:
        return
    if isinstance(part, Element):
        result.append(part)
    elif isinstance(part, (str, bytes)):
        raise TypeError(f"Expected an element, got text {part!r}; wrap it in Text(content=...)")
    elif isinstance(part, Iterable):
        for item in part:
            _collect_into(result, item)
    elif isinstance(part, Callable):
        _collect_into(result, part())
    else:
        raise TypeError(f"Expected an element, got {type(part).__name__}")
