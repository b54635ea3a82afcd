"""Owning string buffers and non-owning string views.

StringBuffer owns a contiguous, resizable, optionally bounded sequence of
code units. StringView is a (base, start, length) reference into a ``str``
or a buffer's storage; creating one never copies the referenced text.

Both expose the same ``find_*`` family, returning NPOS when nothing is
found. Views into a buffer alias its storage: erasing from the buffer can
leave an older view pointing past the new end, exactly like a dangling
pointer, so keep views only as long as the buffer is left alone.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Sequence

from strkit.core.charsets import CharWidth, check_code_units
from strkit.core.scan import (
    scan_first_not_of,
    scan_first_of,
    scan_last_not_of,
    scan_last_of,
)

logger = logging.getLogger(__name__)

# Not-found sentinel shared by StringBuffer and StringView
NPOS = -1


def _last_bound(size: int, pos: int) -> int:
    """Convert a find_last_* start position into an exclusive range end."""
    if pos < 0 or pos >= size:
        return size
    return pos + 1


class StringBuffer:
    """Owning, mutable string of code units with an optional capacity.

    When a capacity is set, the buffer never grows past it: construction,
    insertion and replacement drop whatever does not fit and set
    ``is_truncated``.

    Example:
        >>> s = StringBuffer("  hello  ", capacity=16)
        >>> s.find_first_not_of(" ")
        2
        >>> s.erase(0, 2)
        >>> str(s)
        'hello  '
    """

    def __init__(
        self,
        text: str = "",
        capacity: int | None = None,
        width: CharWidth = CharWidth.NARROW,
    ) -> None:
        """Initialize the buffer.

        Args:
            text: Initial contents.
            capacity: Maximum number of code units, or None for unbounded.
            width: Code-unit width of the buffer.

        Raises:
            ValueError: If capacity is negative.
            CodeUnitError: If text holds characters wider than ``width``.
        """
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        check_code_units(text, width)
        self._width = width
        self._capacity = capacity
        self._truncated = False
        self._units: list[str] = list(text)
        self._enforce_capacity()

    @property
    def width(self) -> CharWidth:
        return self._width

    @property
    def capacity(self) -> int | None:
        return self._capacity

    @property
    def is_truncated(self) -> bool:
        """True once any operation had to drop code units to fit capacity."""
        return self._truncated

    def size(self) -> int:
        return len(self._units)

    def max_size(self) -> int:
        """Largest size the buffer can reach."""
        if self._capacity is None:
            return sys.maxsize
        return self._capacity

    def available(self) -> int:
        return self.max_size() - len(self._units)

    def empty(self) -> bool:
        return not self._units

    def full(self) -> bool:
        return len(self._units) >= self.max_size()

    # Searching

    def find(self, sub: str, pos: int = 0) -> int:
        """Find the first occurrence of sub at or after pos."""
        return str(self).find(sub, max(0, pos))

    def find_first_of(self, chars: str, pos: int = 0) -> int:
        found = scan_first_of(self._units, chars, pos)
        return NPOS if found == len(self._units) else found

    def find_first_not_of(self, chars: str, pos: int = 0) -> int:
        found = scan_first_not_of(self._units, chars, pos)
        return NPOS if found == len(self._units) else found

    def find_last_of(self, chars: str, pos: int = NPOS) -> int:
        last = _last_bound(len(self._units), pos)
        found = scan_last_of(self._units, chars, 0, last)
        return NPOS if found == last else found

    def find_last_not_of(self, chars: str, pos: int = NPOS) -> int:
        last = _last_bound(len(self._units), pos)
        found = scan_last_not_of(self._units, chars, 0, last)
        return NPOS if found == last else found

    # Modification

    def erase(self, pos: int = 0, count: int | None = None) -> None:
        """Erase count code units starting at pos (to the end when None)."""
        size = len(self._units)
        pos = max(0, min(pos, size))
        end = size if count is None else min(size, pos + max(0, count))
        del self._units[pos:end]

    def erase_range(self, first: int, last: int) -> None:
        """Erase the code units in ``[first, last)``."""
        size = len(self._units)
        first = max(0, min(first, size))
        last = max(first, min(last, size))
        del self._units[first:last]

    def insert(self, pos: int, count: int, char: str) -> None:
        """Insert count copies of a single code unit at pos."""
        self._check_unit(char)
        if count <= 0:
            return
        pos = max(0, min(pos, len(self._units)))
        self._units[pos:pos] = [char] * count
        self._enforce_capacity()

    def replace(self, pos: int, count: int, text: str) -> None:
        """Replace count code units starting at pos with text."""
        check_code_units(text, self._width)
        size = len(self._units)
        pos = max(0, min(pos, size))
        end = min(size, pos + max(0, count))
        self._units[pos:end] = list(text)
        self._enforce_capacity()

    def append(self, text: str) -> None:
        self.replace(len(self._units), 0, text)

    def clear(self) -> None:
        self._units.clear()

    def view(self) -> StringView:
        """Return a view aliasing the whole buffer."""
        return StringView(self._units, 0, len(self._units), self._width)

    def _check_unit(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"Expected a single code unit, got {char!r}")
        check_code_units(char, self._width)

    def _enforce_capacity(self) -> None:
        if self._capacity is not None and len(self._units) > self._capacity:
            dropped = len(self._units) - self._capacity
            del self._units[self._capacity :]
            self._truncated = True
            logger.debug(
                "Truncated %d code unit(s) to fit capacity %d",
                dropped,
                self._capacity,
            )

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return "".join(self._units[index])
        return self._units[index]

    def __setitem__(self, index: int, char: str) -> None:
        self._check_unit(char)
        self._units[index] = char

    def __str__(self) -> str:
        return "".join(self._units)

    def __repr__(self) -> str:
        return (
            f"StringBuffer({str(self)!r}, capacity={self._capacity!r}, "
            f"width={self._width.value})"
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, (StringBuffer, StringView)):
            return str(self) == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class StringView:
    """Non-owning, read-only reference to a run of code units.

    A view is a base sequence plus an absolute start offset and a length.
    ``StringView()`` is the null view: no base, zero length.
    """

    __slots__ = ("_base", "_start", "_length", "_width")

    def __init__(
        self,
        base: Sequence[str] | None = None,
        start: int = 0,
        length: int | None = None,
        width: CharWidth = CharWidth.NARROW,
    ) -> None:
        if base is None:
            if start or length:
                raise ValueError("A null view cannot have a start or length")
            start, length = 0, 0
        else:
            size = len(base)
            if length is None:
                length = size - start
            if start < 0 or length < 0 or start + length > size:
                raise ValueError(
                    f"View [{start}, {start + length}) is outside its base "
                    f"of size {size}"
                )
        self._base = base
        self._start = start
        self._length = length
        self._width = width

    @property
    def base(self) -> Sequence[str] | None:
        """Referenced storage, or None for the null view."""
        return self._base

    @property
    def start(self) -> int:
        """Absolute offset of the first code unit within base."""
        return self._start

    @property
    def end(self) -> int:
        """Absolute offset one past the last code unit within base."""
        return self._start + self._length

    @property
    def width(self) -> CharWidth:
        return self._width

    @property
    def is_null(self) -> bool:
        return self._base is None

    def size(self) -> int:
        return self._length

    def subview(self, offset: int, length: int | None = None) -> StringView:
        """Return a view over part of this one, sharing the same base.

        offset and length are clamped so the result always lies inside
        this view.
        """
        if self._base is None:
            return StringView()
        offset = max(0, min(offset, self._length))
        remaining = self._length - offset
        if length is None or length > remaining:
            length = remaining
        return StringView(
            self._base, self._start + offset, max(0, length), self._width
        )

    def encloses(self, other: StringView) -> bool:
        """Check whether other lies inside this view's extent."""
        return (
            other._base is self._base
            and self._start <= other._start
            and other.end <= self.end
        )

    # Searching (positions are relative to the view)

    def find(self, sub: str, pos: int = 0) -> int:
        return str(self).find(sub, max(0, pos))

    def find_first_of(self, chars: str, pos: int = 0) -> int:
        if self._base is None:
            return NPOS
        first = self._start + max(0, pos)
        found = scan_first_of(self._base, chars, first, self.end)
        return NPOS if found == self.end else found - self._start

    def find_first_not_of(self, chars: str, pos: int = 0) -> int:
        if self._base is None:
            return NPOS
        first = self._start + max(0, pos)
        found = scan_first_not_of(self._base, chars, first, self.end)
        return NPOS if found == self.end else found - self._start

    def find_last_of(self, chars: str, pos: int = NPOS) -> int:
        if self._base is None:
            return NPOS
        last = self._start + _last_bound(self._length, pos)
        found = scan_last_of(self._base, chars, self._start, last)
        return NPOS if found == last else found - self._start

    def find_last_not_of(self, chars: str, pos: int = NPOS) -> int:
        if self._base is None:
            return NPOS
        last = self._start + _last_bound(self._length, pos)
        found = scan_last_not_of(self._base, chars, self._start, last)
        return NPOS if found == last else found - self._start

    # Sequence protocol

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[str]:
        for pos in range(self._start, self.end):
            yield self._base[pos]  # type: ignore[index]

    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return "".join(self[i] for i in range(*index.indices(self._length)))
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("StringView index out of range")
        return self._base[self._start + index]  # type: ignore[index]

    def __str__(self) -> str:
        if self._base is None:
            return ""
        if isinstance(self._base, str):
            return self._base[self._start : self.end]
        return "".join(self._base[self._start : self.end])

    def __repr__(self) -> str:
        if self._base is None:
            return "StringView()"
        return f"StringView({str(self)!r}, start={self._start})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, (StringView, StringBuffer)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


StringLike = StringBuffer | StringView | str


def as_view(source: StringLike, width: CharWidth | None = None) -> StringView:
    """Return a view over a buffer, view or str.

    Views are returned unchanged. A ``str`` is viewed in place with the
    given width (narrow by default).
    """
    if isinstance(source, StringView):
        return source
    if isinstance(source, StringBuffer):
        return source.view()
    return StringView(source, 0, len(source), width or CharWidth.NARROW)
