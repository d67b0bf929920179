"""Identifier casing for generated file and symbol names."""

from dataclasses import dataclass

__all__ = ("NameCasings", "derive_casings", "to_camel_case", "to_pascal_case")


@dataclass(frozen=True)
class NameCasings:
    """PascalCase and camelCase forms of a kebab-case page name."""

    pascal: str
    camel: str


def _capitalize(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def to_pascal_case(name: str) -> str:
    """Convert ``order-history`` to ``OrderHistory``.

    Only the first character of each hyphen separated segment changes.
    Empty segments are dropped, so the result never contains hyphens.
    """
    return "".join(_capitalize(segment) for segment in name.split("-"))


def to_camel_case(name: str) -> str:
    """Convert ``order-history`` to ``orderHistory``."""
    first, *rest = name.split("-")
    return first + "".join(_capitalize(segment) for segment in rest)


def derive_casings(name: str) -> NameCasings:
    return NameCasings(pascal=to_pascal_case(name), camel=to_camel_case(name))
