"""Digit storage helpers and the zero-padding digit window.

A digit sequence is little-endian: index 0 holds the least-significant
digit. Positions past the stored length read as zero, so operands of
different lengths can be walked side by side without building padded
copies.

Usage pattern:
    from nonsmallint.digits import DigitWindow

    window = DigitWindow([1, 2, 3], 5)
    next(window)        # 1 (least-significant)
    window.next_back()  # 0 (synthesized, position 4)
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_MISSING = object()


def lookup(digits: Sequence[int], ix: int) -> int:
    """Return the digit at ix, or 0 when ix is outside the stored range."""
    if 0 <= ix < len(digits):
        return digits[ix]
    return 0


def put(digits: list[int], ix: int, value: int) -> None:
    """Overwrite the digit at ix, growing the list with zeros if needed."""
    if ix < len(digits):
        digits[ix] = value
    else:
        digits.extend([0] * (ix - len(digits)))
        digits.append(value)


def strip(digits: Sequence[int]) -> list[int]:
    """Return digits without the most-significant run of zeros."""
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return list(digits[:end])


class DigitWindow:
    """Bidirectional view of exactly ``length`` digits of a sequence.

    The front cursor starts at the least-significant position (0) and the
    back cursor at position ``length - 1``. Each cursor advances on its own;
    the window is exhausted once they cross. Digits beyond the stored
    sequence are synthesized as zero from either end.

    Iterating the window (``next(window)``) reads from the front.
    ``next_back()`` reads from the back, and ``rev()`` drains the remaining
    digits from the back, most-significant first.
    """

    __slots__ = ("_digits", "_front", "_back")

    def __init__(self, digits: Sequence[int], length: int) -> None:
        if length < 0:
            raise ValueError(f"Window length cannot be negative: {length}")
        self._digits = digits
        self._front = 0
        self._back = length - 1

    def __repr__(self) -> str:
        return f"DigitWindow(front={self._front}, back={self._back})"

    def __iter__(self) -> DigitWindow:
        return self

    def __len__(self) -> int:
        """Number of digits not yet read from either end."""
        return max(self._back - self._front + 1, 0)

    def __next__(self) -> int:
        if self._front > self._back:
            raise StopIteration
        out = lookup(self._digits, self._front)
        self._front += 1
        return out

    def next_back(self, default: object = _MISSING) -> int:
        """Read the next digit from the most-significant end.

        Args:
            default: Returned instead of raising once the window is exhausted

        Raises:
            StopIteration: If exhausted and no default was given
        """
        if self._back < self._front:
            if default is _MISSING:
                raise StopIteration
            return default  # type: ignore[return-value]
        out = lookup(self._digits, self._back)
        self._back -= 1
        return out

    def rev(self) -> Iterator[int]:
        """Yield the remaining digits from the back cursor down to the front."""
        while self._back >= self._front:
            yield self.next_back()
