"""Static parameters of the number list variant in force."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Variant:
    """Parameter set selected by a record book number."""

    record_book_number: int
    list_kind: str
    base_radix: int
    target_radix: int
    additional_operation: str


VARIANT = Variant(
    record_book_number=3518,
    list_kind="circular doubly linked list",
    base_radix=10,
    target_radix=16,
    additional_operation="modulo",
)

RECORD_BOOK_NUMBER = VARIANT.record_book_number
BASE_RADIX = VARIANT.base_radix
TARGET_RADIX = VARIANT.target_radix

LOG_LEVEL_ENV = "DIGITRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
