"""Numbers stored digit by digit in a doubly circular linked list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from . import storage
from .config import BASE_RADIX, RECORD_BOOK_NUMBER, TARGET_RADIX
from .linked_list import DoublyCircularLinkedList, Node

logger = logging.getLogger(__name__)

HEX_SYMBOLS = "0123456789ABCDEF"
_ACCEPTED = frozenset(HEX_SYMBOLS + HEX_SYMBOLS.lower())
SUPPORTED_RADIXES = (BASE_RADIX, TARGET_RADIX)


@dataclass(frozen=True)
class NumberSnapshot:
    """Presentation values for a number list at one instant."""

    digits: str
    decimal: str
    radix: int
    size: int


def _symbol(value: int) -> str:
    if not 0 <= value < len(HEX_SYMBOLS):
        raise ValueError(f"{value!r} is not a single hexadecimal digit.")
    return HEX_SYMBOLS[value]


# Decimal text is converted in pieces small enough for int() and str(), which
# refuse values longer than sys.get_int_max_str_digits().
_DECIMAL_CHUNK = 1000
_DECIMAL_CHUNK_BASE = 10**_DECIMAL_CHUNK


def _decimal_to_int(text: str) -> int:
    value = 0
    for start in range(0, len(text), _DECIMAL_CHUNK):
        chunk = text[start : start + _DECIMAL_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return value


def _int_to_decimal(value: int) -> str:
    sign = "-" if value < 0 else ""
    value = abs(value)
    pieces: list[str] = []
    while value >= _DECIMAL_CHUNK_BASE:
        value, low = divmod(value, _DECIMAL_CHUNK_BASE)
        pieces.append(str(low).zfill(_DECIMAL_CHUNK))
    pieces.append(str(value))
    return sign + "".join(reversed(pieces))


def _truncating_remainder(dividend: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend, like C and Java ``%``."""
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


class NumberList(DoublyCircularLinkedList[int]):
    """Non-negative integer kept as a ring of digit symbols, most significant first.

    Each node stores a symbol value 0-15. The radix tag says whether those
    symbols are read as a decimal or a hexadecimal number. Text that is
    negative or contains anything but hexadecimal digits produces an empty
    list instead of an error, so callers test ``is_empty()`` to detect it.
    """

    def __init__(self, text: Optional[str] = None, radix: int = BASE_RADIX) -> None:
        if radix not in SUPPORTED_RADIXES:
            raise ValueError(f"radix must be one of {SUPPORTED_RADIXES}.")
        super().__init__()
        self._radix = radix
        self._parse_into(text)
        if self.is_empty():
            self._radix = BASE_RADIX

    @classmethod
    def parse(cls, text: Optional[str]) -> "NumberList":
        return cls(text)

    @classmethod
    def from_file(cls, path: storage.PathLike) -> "NumberList":
        """Build a number from the first line of ``path``; empty when unreadable."""
        line = storage.read_first_line(path)
        if line is None:
            return cls()
        return cls(line.strip())

    @staticmethod
    def record_book_number() -> int:
        return RECORD_BOOK_NUMBER

    @property
    def radix(self) -> int:
        return self._radix

    def __str__(self) -> str:
        return "".join(_symbol(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, radix={self._radix})"

    def clear(self) -> None:
        super().clear()
        self._radix = BASE_RADIX

    def _unlink(self, node: Node[int]) -> None:
        super()._unlink(node)
        if self.is_empty():
            self._radix = BASE_RADIX

    def sub_list(self, from_index: int, to_index: int) -> "NumberList":
        result = super().sub_list(from_index, to_index)
        assert isinstance(result, NumberList)
        if not result.is_empty():
            result._radix = self._radix
        return result

    def save(self, path: storage.PathLike) -> bool:
        """Write the number in decimal notation to ``path``."""
        return storage.write_text(path, self.to_decimal_string())

    def to_int(self) -> int:
        """Value of the stored symbols read in the list's radix."""
        if self.is_empty():
            return 0
        if self._radix == BASE_RADIX:
            return _decimal_to_int(str(self))
        return int(str(self), self._radix)

    def to_decimal_string(self) -> str:
        if self.is_empty():
            return ""
        if self._radix == BASE_RADIX:
            return str(self)
        return _int_to_decimal(self.to_int())

    def change_scale(self) -> "NumberList":
        """Return the same value written in hexadecimal."""
        if self.is_empty():
            return NumberList()
        return NumberList(format(self.to_int(), "X"), radix=TARGET_RADIX)

    def additional_operation(self, other: DoublyCircularLinkedList[int]) -> "NumberList":
        """Return ``self mod other``.

        ``other`` is read as decimal digits whatever its radix tag. An empty,
        non-decimal or zero divisor gives ``0``.
        """
        dividend = self.to_int()
        digits = list(other)
        if not digits or any(not 0 <= digit <= 9 for digit in digits):
            logger.debug("Divisor %r is not a decimal number; result is 0", other)
            return NumberList("0")
        divisor = _decimal_to_int("".join(HEX_SYMBOLS[digit] for digit in digits))
        if divisor == 0:
            logger.debug("Divisor is zero; result is 0")
            return NumberList("0")
        return NumberList(_int_to_decimal(_truncating_remainder(dividend, divisor)))

    def snapshot(self) -> NumberSnapshot:
        return NumberSnapshot(
            digits=str(self),
            decimal=self.to_decimal_string(),
            radix=self._radix,
            size=len(self),
        )

    def _parse_into(self, text: Optional[str]) -> None:
        if not text:
            return
        if text.startswith("-"):
            logger.debug("Ignoring negative number %r", text)
            return
        for character in text:
            if character not in _ACCEPTED:
                logger.debug("Rejecting %r: %r is not a hexadecimal digit", text, character)
                self.clear()
                return
            self.append(int(character, 16))
