"""Character predicates and the named predicate registry.

Predicates are plain callables taking a single character and returning a
bool. Built-in predicates are registered at import time and looked up by
name; third parties can add their own via register_predicate().
"""

from __future__ import annotations

from collections.abc import Callable

from .digits import is_digit

CharPredicate = Callable[[str], bool]

_REGISTRY: dict[str, CharPredicate] = {}


def register_predicate(name: str) -> Callable[[CharPredicate], CharPredicate]:
    """Register a predicate under *name*. Used as a decorator."""

    def decorator(predicate: CharPredicate) -> CharPredicate:
        _REGISTRY[name] = predicate
        return predicate

    return decorator


def get_predicate(name: str) -> CharPredicate:
    """Look up a registered predicate by name.

    Raises:
        ValueError: If the predicate name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise ValueError(f"Unknown predicate {name!r}. Available predicates: {available}")
    return _REGISTRY[name]


def list_predicates() -> list[str]:
    """Return sorted list of registered predicate names."""
    return sorted(_REGISTRY.keys())


# ---------------------------------------------------------------------------
# Built-ins
# ---------------------------------------------------------------------------


@register_predicate("always")
def ALWAYS(char: str) -> bool:  # noqa: N802
    return True


@register_predicate("never")
def NEVER(char: str) -> bool:  # noqa: N802
    return False


@register_predicate("whitespace")
def is_whitespace(char: str) -> bool:
    return char.isspace()


@register_predicate("alpha")
def is_alpha(char: str) -> bool:
    return char.isalpha()


@register_predicate("alnum")
def is_alnum(char: str) -> bool:
    return char.isalnum()


@register_predicate("identifier")
def is_identifier(char: str) -> bool:
    """Letters, digits and underscore, as in most identifier grammars."""
    return char == "_" or char.isalnum()


@register_predicate("decimal")
def is_decimal(char: str) -> bool:
    return is_digit(char, 10)


@register_predicate("hex")
def is_hex(char: str) -> bool:
    return is_digit(char, 16)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


def any_of(*chars: str) -> CharPredicate:
    """Match any character contained in the given strings."""
    members = frozenset("".join(chars))
    return lambda c: c in members


def none_of(*chars: str) -> CharPredicate:
    """Match any character not contained in the given strings."""
    members = frozenset("".join(chars))
    return lambda c: c not in members


def negate(predicate: CharPredicate) -> CharPredicate:
    return lambda c: not predicate(c)


def digit_of(radix: int) -> CharPredicate:
    """Match characters that are digits in *radix*."""
    return lambda c: is_digit(c, radix)
