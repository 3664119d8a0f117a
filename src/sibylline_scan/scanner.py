"""Cursor-based scanner over a fixed string.

A :class:`Scanner` walks an immutable text one character at a time. It
supports lookahead without moving the cursor, predicate-driven collection,
splitting, sub-range views that share the text, and parsing numeric
literals straight from the character stream.

Every read outside the scanner's bounds returns :data:`DONE` instead of
raising. Malformed numeric input parses to 0 (or whatever prefix was
valid). Offsets passed to ``set_index``, ``sub`` and ``sub_at`` are not
validated; bad values surface later as ``DONE`` reads. ``peek_at`` clamps
instead of returning ``DONE``, except on an empty view where there is no
character to clamp to.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import numpy as np

from .config import DEFAULT_CONFIG, ScanConfig
from .digits import get_digit
from .predicates import ALWAYS, CharPredicate

logger = logging.getLogger(__name__)

_INT_BITS = 32
_LONG_BITS = 64


class _Done(str):
    """Type of the end-of-input sentinel."""

    def __new__(cls):
        return str.__new__(cls, "\uffff")

    def __repr__(self) -> str:
        return "DONE"


DONE = _Done()
"""Returned by every read outside the scanner's bounds."""

END = DONE
EOF = DONE


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a signed two's complement integer of *bits* width."""
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


class Scanner:
    """Cursor over an immutable text.

    The cursor may sit anywhere, including before the start (-1) or at the
    limit; reads there return ``DONE``. ``limit`` is the logical end of this
    view and defaults to the text length.
    """

    __slots__ = ("_text", "_index", "_limit", "_config")

    def __init__(
        self,
        text: str,
        index: int = 0,
        config: ScanConfig | None = None,
    ) -> None:
        self._text = text
        self._index = index
        self._limit = len(text)
        self._config = config if config is not None else DEFAULT_CONFIG

    def _view(self, index: int, limit: int) -> Scanner:
        view = Scanner(self._text, index, self._config)
        view._limit = limit
        return view

    def _char_at(self, i: int) -> str:
        if i < 0 or i >= self._limit or i >= len(self._text):
            return DONE
        return self._text[i]

    def __repr__(self) -> str:
        return f"Scanner(index={self._index}, limit={self._limit}, length={len(self._text)})"

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The full backing text, independent of this view's limit."""
        return self._text

    @property
    def index(self) -> int:
        return self._index

    @index.setter
    def index(self, value: int) -> None:
        self._index = value

    def set_index(self, index: int) -> Scanner:
        """Move the cursor to *index* and return this scanner."""
        self._index = index
        return self

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def remaining(self) -> int:
        """Number of positions from the cursor up to the limit."""
        return max(0, self._limit - self._index)

    def has_next(self) -> bool:
        """Whether advancing once more still lands inside the view."""
        return self._index < self._limit - 1

    def ended(self) -> bool:
        return self._index < 0 or self._index >= self._limit

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def current(self) -> str:
        return self._char_at(self._index)

    def peek(self, offset: int = 0) -> str:
        """Character at ``index + offset`` without moving the cursor."""
        return self._char_at(self._index + offset)

    def clamp(self, index: int) -> int:
        """Clamp *index* into the readable range ``[0, limit - 1]``."""
        last = min(self._limit, len(self._text)) - 1
        return min(last, max(0, index))

    def peek_at(self, index: int) -> str:
        """Character at an absolute index, clamped into the view.

        Only an empty view returns ``DONE``.
        """
        i = self.clamp(index)
        if i < 0:
            return DONE
        return self._text[i]

    def next(self, amount: int = 1) -> str:
        """Advance the cursor by *amount* (may be negative) and read."""
        self._index += amount
        return self._char_at(self._index)

    def prev(self, amount: int = 1) -> str:
        """Move the cursor back by *amount* and read."""
        self._index -= amount
        return self._char_at(self._index)

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def collect(
        self,
        predicate: CharPredicate | None = None,
        skip: CharPredicate | None = None,
        on_char: Callable[[str], None] | None = None,
        off_end: int = 0,
    ) -> str:
        """Collect characters matching *predicate* into a string.

        Characters matched by *skip* are passed over without being
        collected. Collection stops at the first other character that fails
        *predicate*, leaving the cursor on it, or at the end of the view.

        Args:
            predicate: Characters to collect. Defaults to everything.
            skip: Characters to ignore without stopping.
            on_char: Called with each collected character.
            off_end: Relative move applied after collection.

        Returns:
            The collected characters.
        """
        if predicate is None:
            predicate = ALWAYS

        parts: list[str] = []
        c = self.current()
        while c != DONE:
            if skip is None or not skip(c):
                if not predicate(c):
                    break
                if on_char is not None:
                    on_char(c)
                parts.append(c)
            c = self.next()

        if off_end:
            self.next(off_end)
        return "".join(parts)

    def p_collect(
        self,
        predicate: CharPredicate | None = None,
        skip: CharPredicate | None = None,
    ) -> str:
        """Like :meth:`collect` but only peeks; the cursor does not move."""
        if predicate is None:
            predicate = ALWAYS

        parts: list[str] = []
        offset = 0
        while (c := self.peek(offset)) != DONE:
            offset += 1
            if skip is not None and skip(c):
                continue
            if not predicate(c):
                break
            parts.append(c)

        return "".join(parts)

    def split(self, *separators: str | CharPredicate) -> list[str]:
        """Split the remaining text on separator characters.

        Each argument is a string whose characters are all separators, or a
        single predicate deciding separator membership. Adjacent separators
        produce empty segments; a trailing separator does not.
        """
        if len(separators) == 1 and callable(separators[0]):
            is_separator = separators[0]
        else:
            members = frozenset("".join(separators))

            def is_separator(c: str) -> bool:
                return c in members

        parts: list[str] = []
        while self.current() != DONE:
            parts.append(self.collect(lambda c: not is_separator(c)))
            self.next()

        return parts

    def consume(self, predicate: CharPredicate, off_end: int = 0) -> Scanner:
        """Skip characters matching *predicate*, then move by *off_end*."""
        c = self.current()
        while c != DONE and predicate(c):
            c = self.next()

        if off_end:
            self.next(off_end)
        return self

    def consume_whitespace(self) -> Scanner:
        return self.consume(self._config.whitespace_predicate)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def branch(self) -> Scanner:
        """Independent scanner at this cursor, limited by the full text."""
        return self._view(self._index, len(self._text))

    def sub(self, start_offset: int, end_offset: int) -> Scanner:
        """View spanning ``[index + start_offset, index + end_offset)``."""
        return self._view(self._index + start_offset, self._index + end_offset)

    def sub_at(self, start: int, end_offset: int) -> Scanner:
        """View from absolute *start* up to ``limit - end_offset``."""
        return self._view(start, self._limit - end_offset)

    # ------------------------------------------------------------------
    # Numeric parsing
    # ------------------------------------------------------------------

    def _collect_digits(self, radix: int) -> int:
        separators = self._config.digit_separators
        result = 0
        while (c := self.current()) != DONE:
            if c in separators:
                self.next()
                continue
            value = get_digit(c, radix)
            if value == -1:
                break
            result = result * radix + value
            self.next()
        return result

    def collect_int(self, radix: int = 10) -> int:
        """Parse a 32-bit integer literal at the cursor.

        Overflow wraps around like a signed 32-bit integer.
        """
        negative = False
        if self.current() == self._config.negative_sign:
            negative = True
            self.next()

        result = self._collect_digits(radix)
        return _wrap(-result if negative else result, _INT_BITS)

    def collect_long(self, radix: int = 10) -> int:
        """Parse a 64-bit integer literal at the cursor.

        Unlike :meth:`collect_int` the negative sign is only detected, not
        consumed, so ``"-5"`` parses as 0 with the cursor left on the sign.
        """
        negative = self.current() == self._config.negative_sign

        result = self._collect_digits(radix)
        return _wrap(-result if negative else result, _LONG_BITS)

    def _collect_fraction(self, dtype: type) -> np.floating:
        # Caller has already consumed the decimal point
        separators = self._config.digit_separators
        fraction = dtype(0)
        weight = dtype(0.1)
        while (c := self.current()) != DONE:
            if c in separators:
                self.next()
                continue
            value = get_digit(c, 10)
            if value == -1:
                break
            fraction += dtype(value) * weight
            weight = dtype(float(weight) * 0.1)
            self.next()
        return fraction

    def _collect_real(self, integral: Callable[[int], int], dtype: type) -> float:
        negative = False
        if self.current() == self._config.negative_sign:
            negative = True
            self.next()

        number = dtype(integral(10))
        if self.current() == self._config.decimal_point:
            self.next()
            number += self._collect_fraction(dtype)

        return float(-number if negative else number)

    def collect_float(self) -> float:
        """Parse a decimal literal with single precision accumulation."""
        return self._collect_real(self.collect_int, np.float32)

    def collect_double(self) -> float:
        """Parse a decimal literal with double precision accumulation."""
        return self._collect_real(self.collect_long, np.float64)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------

    def escape_remaining(
        self,
        to_escape: CharPredicate,
        escape: Callable[[str], str],
    ) -> str:
        """Copy the rest of the view, replacing matched characters.

        Consumes the scanner: the cursor ends on ``DONE``.
        """
        parts: list[str] = []
        c = self.current()
        while c != DONE:
            parts.append(escape(c) if to_escape(c) else c)
            c = self.next()

        return "".join(parts)

    def __iter__(self) -> Iterator[str]:
        """Iterate the rest of the view by moving the cursor.

        The first character produced is ``current()``. Exhausting the
        iterator leaves the cursor on ``DONE``.
        """
        c = self.current()
        while c != DONE:
            yield c
            c = self.next()

    def peek_iter(self) -> Iterator[str]:
        """Iterate the rest of the view without moving the cursor.

        The starting point is fixed when this is called; later cursor moves
        do not affect the iterator.
        """
        return self._peek_from(self._index - 1)

    def _peek_from(self, position: int) -> Iterator[str]:
        last = min(self._limit, len(self._text)) - 1
        while position < last:
            position += 1
            yield self.peek_at(position)

    def debug(self, label: str) -> None:
        """Log the cursor state at DEBUG level."""
        c = self.current()
        logger.debug(
            "[scanner:%s] current: %r, index: %d, nv10: %d",
            label,
            c,
            self._index,
            get_digit(c, 10),
        )
