"""Attribute bag shared by every element: id, classes, inline styles, custom attributes."""
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, field_validator


def _flatten_names(names: Iterable) -> list[str]:
    """Flatten nested iterables of class names, skipping None and empty strings."""
    result: list[str] = []
    for name in names:
        if name is None or name == "":
            continue
        if isinstance(name, str):
            result.extend(name.split())
        else:
            result.extend(_flatten_names(name))
    return result


def _sorted_pairs(values) -> tuple[tuple[str, str], ...]:
    return tuple(sorted(dict(values).items()))


class CoreAttributes(BaseModel):
    """The standard set of control attributes for an HTML element.

    Immutable: every ``append_*`` / ``merge`` call returns a new bag.
    Classes keep insertion order with duplicates dropped so rendered output
    is stable between runs. Custom attributes are stored as (name, value)
    pairs sorted by name, so copies never share a mutable container.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    classes: tuple[str, ...] = ()
    styles: tuple[str, ...] = ()
    custom: tuple[tuple[str, str], ...] = ()

    @field_validator("custom", mode="before")
    @classmethod
    def _normalise_custom(cls, value):
        if isinstance(value, Mapping):
            return _sorted_pairs(value)
        return value

    @property
    def is_empty(self) -> bool:
        return not (self.id or self.classes or self.styles or self.custom)

    def append_classes(self, *names) -> "CoreAttributes":
        merged = list(self.classes)
        for name in _flatten_names(names):
            if name not in merged:
                merged.append(name)
        return self.model_copy(update={"classes": tuple(merged)})

    def append_styles(self, *rules: str) -> "CoreAttributes":
        cleaned = tuple(r.strip().rstrip(";") for r in rules if r and r.strip())
        return self.model_copy(update={"styles": self.styles + cleaned})

    def with_custom(self, name: str, value: str) -> "CoreAttributes":
        return self.model_copy(update={"custom": _sorted_pairs({**dict(self.custom), name: value})})

    def merge(self, other: "CoreAttributes") -> "CoreAttributes":
        """Combine two bags. ``other`` wins for id and clashing custom attributes."""
        merged = self.append_classes(other.classes).append_styles(*other.styles)
        return merged.model_copy(update={
            "id": other.id or self.id,
            "custom": _sorted_pairs({**dict(self.custom), **dict(other.custom)}),
        })
