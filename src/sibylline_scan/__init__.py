"""Scan: cursor-based text scanning primitives for hand-written parsers."""

from .config import DEFAULT_CONFIG, ScanConfig, load_config
from .digits import get_digit, is_digit
from .predicates import (
    ALWAYS,
    NEVER,
    any_of,
    digit_of,
    get_predicate,
    is_alnum,
    is_alpha,
    is_identifier,
    is_whitespace,
    list_predicates,
    negate,
    none_of,
    register_predicate,
)
from .scanner import DONE, END, EOF, Scanner

__all__ = [
    "Scanner",
    "DONE",
    "END",
    "EOF",
    "ScanConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "get_digit",
    "is_digit",
    "ALWAYS",
    "NEVER",
    "any_of",
    "none_of",
    "negate",
    "digit_of",
    "is_whitespace",
    "is_alpha",
    "is_alnum",
    "is_identifier",
    "get_predicate",
    "list_predicates",
    "register_predicate",
]
