from __future__ import annotations

import logging

import pytest

from digitring.config import RECORD_BOOK_NUMBER
from digitring.linked_list import DoublyCircularLinkedList
from digitring.number_list import NumberList


@pytest.mark.parametrize("text", ["0", "123", "00917", "abcdef", "1a2B3c", "FFFF"])
def test_render_returns_uppercase_input(text: str) -> None:
    assert str(NumberList(text)) == text.upper()


def test_parse_stores_one_node_per_digit() -> None:
    number = NumberList.parse("1A9")

    assert number.to_list() == [1, 10, 9]
    assert number.radix == 10


@pytest.mark.parametrize("text", [None, "", "-5", "-", "1G", "12 3", "12.5", "+7"])
def test_rejected_text_gives_empty_list(text: str | None) -> None:
    number = NumberList(text)

    assert number.is_empty()
    assert len(number) == 0
    assert str(number) == ""
    assert number.to_decimal_string() == ""
    assert number.to_int() == 0


def test_non_ascii_digits_are_rejected() -> None:
    assert NumberList("٣").is_empty()


def test_rejection_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="digitring.number_list"):
        NumberList("1G")
    assert "not a hexadecimal digit" in caplog.text


@pytest.mark.parametrize("value", [0, 7, 10, 255, 3518, 10**40 + 123])
def test_decimal_digits_round_trip_to_int(value: int) -> None:
    assert NumberList(str(value)).to_int() == value


def test_to_int_reads_hexadecimal_when_tagged() -> None:
    assert NumberList("FF", radix=16).to_int() == 255


def test_decimal_list_with_hex_symbols_has_no_value() -> None:
    number = NumberList("1A")
    with pytest.raises(ValueError):
        number.to_int()


def test_unsupported_radix_is_rejected() -> None:
    with pytest.raises(ValueError):
        NumberList("101", radix=2)


@pytest.mark.parametrize(
    "decimal, hexadecimal",
    [("0", "0"), ("10", "A"), ("255", "FF"), ("3518", "DBE"), ("4096", "1000"), ("007", "7")],
)
def test_change_scale_writes_value_in_hexadecimal(decimal: str, hexadecimal: str) -> None:
    number = NumberList(decimal)
    converted = number.change_scale()

    assert str(converted) == hexadecimal
    assert converted.radix == 16
    assert converted.to_int() == number.to_int()
    assert converted.to_decimal_string() == str(int(decimal))
    assert str(number) == decimal


def test_change_scale_of_large_number_preserves_value() -> None:
    text = "98765432109876543210987654321"
    converted = NumberList(text).change_scale()

    assert converted.to_int() == int(text)
    assert converted.to_decimal_string() == text


def test_change_scale_of_empty_list_is_empty() -> None:
    converted = NumberList("").change_scale()

    assert converted.is_empty()
    assert converted.radix == 10


def test_decimal_string_keeps_decimal_digits_verbatim() -> None:
    assert NumberList("0042").to_decimal_string() == "0042"


@pytest.mark.parametrize(
    "dividend, divisor, expected",
    [("17", "5", "2"), ("4", "6", "4"), ("100", "10", "0"), ("123456789012345678901234567890", "97", None)],
)
def test_additional_operation_is_remainder(dividend: str, divisor: str, expected: str | None) -> None:
    result = NumberList(dividend).additional_operation(NumberList(divisor))

    assert str(result) == (expected if expected is not None else str(int(dividend) % int(divisor)))
    assert result.radix == 10


@pytest.mark.parametrize("divisor", ["", "0", "000", "G"])
def test_degenerate_divisor_gives_zero(divisor: str) -> None:
    result = NumberList("17").additional_operation(NumberList(divisor))
    assert str(result) == "0"


def test_divisor_with_hex_symbols_gives_zero() -> None:
    result = NumberList("17").additional_operation(NumberList("A"))
    assert str(result) == "0"


def test_divisor_digits_are_read_as_decimal_whatever_the_radix() -> None:
    divisor = NumberList("12", radix=16)

    result = NumberList("100").additional_operation(divisor)
    assert str(result) == "4"


def test_hexadecimal_dividend_uses_its_value() -> None:
    dividend = NumberList("255").change_scale()

    result = dividend.additional_operation(NumberList("7"))
    assert str(result) == str(255 % 7)


def test_additional_operation_accepts_plain_rings() -> None:
    result = NumberList("17").additional_operation(DoublyCircularLinkedList([5]))
    assert str(result) == "2"


def test_equal_text_builds_equal_lists() -> None:
    first = NumberList("3518")
    second = NumberList("3518")

    assert first == second
    assert hash(first) == hash(second)
    assert first != NumberList("3581")


def test_radix_is_not_part_of_equality() -> None:
    assert NumberList("12") == NumberList("12", radix=16)


def test_clear_resets_radix() -> None:
    number = NumberList("FF", radix=16)
    number.clear()

    assert number.is_empty()
    assert number.radix == 10


def test_sub_list_keeps_radix() -> None:
    number = NumberList("ABCD", radix=16)

    part = number.sub_list(1, 3)
    assert isinstance(part, NumberList)
    assert str(part) == "BC"
    assert part.radix == 16
    assert number.sub_list(2, 2).radix == 10


def test_copy_is_independent_number_list() -> None:
    number = NumberList("123")
    duplicate = number.copy()

    duplicate.sort_descending()
    assert str(duplicate) == "321"
    assert str(number) == "123"


def test_digit_reordering_changes_value() -> None:
    number = NumberList("3518")

    number.sort_ascending()
    assert str(number) == "1358"
    number.sort_descending()
    assert str(number) == "8531"
    number.shift_left()
    assert str(number) == "5318"
    assert number.swap(0, 3) is True
    assert number.to_int() == 8315


def test_render_rejects_values_outside_a_digit() -> None:
    number = NumberList("1")
    number.append(16)
    with pytest.raises(ValueError):
        str(number)


def test_snapshot_reports_presentation_values() -> None:
    snapshot = NumberList("255").change_scale().snapshot()

    assert snapshot.digits == "FF"
    assert snapshot.decimal == "255"
    assert snapshot.radix == 16
    assert snapshot.size == 2


def test_repr_shows_digits_and_radix() -> None:
    assert repr(NumberList("A", radix=16)) == "NumberList('A', radix=16)"


def test_record_book_number() -> None:
    assert NumberList.record_book_number() == RECORD_BOOK_NUMBER == 3518


def test_from_file_reads_first_line(tmp_path) -> None:
    path = tmp_path / "number.txt"
    path.write_text("  12345 \n999\n", encoding="utf-8")

    number = NumberList.from_file(path)
    assert str(number) == "12345"
    assert number.radix == 10


def test_from_file_missing_gives_empty_list(tmp_path) -> None:
    assert NumberList.from_file(tmp_path / "missing.txt").is_empty()


def test_from_file_with_invalid_content_gives_empty_list(tmp_path) -> None:
    path = tmp_path / "number.txt"
    path.write_text("12x4\n", encoding="utf-8")

    assert NumberList.from_file(path).is_empty()


def test_save_writes_decimal_notation(tmp_path) -> None:
    path = tmp_path / "out.txt"

    assert NumberList("3518").change_scale().save(path) is True
    assert path.read_text(encoding="utf-8") == "3518"
    assert NumberList.from_file(path) == NumberList("3518")


def test_save_failure_is_reported(tmp_path) -> None:
    assert NumberList("1").save(tmp_path / "missing-dir" / "out.txt") is False


def test_numbers_longer_than_int_string_limit_convert() -> None:
    nines = NumberList("9" * 5000)

    converted = nines.change_scale()
    assert converted.to_int() == 10**5000 - 1
    assert converted.to_decimal_string() == "9" * 5000


def test_long_hexadecimal_number_renders_in_decimal() -> None:
    number = NumberList("F" * 4000, radix=16)

    decimal = number.to_decimal_string()
    assert len(decimal) > 4300
    assert NumberList(decimal).to_int() == 16**4000 - 1
    assert NumberList(decimal).change_scale() == number


def test_remainder_of_long_operands() -> None:
    dividend = NumberList("1" * 5000)

    assert str(dividend.additional_operation(NumberList("7"))) == str((10**5000 - 1) // 9 % 7)
    assert str(NumberList("5").additional_operation(NumberList("3" * 5000))) == "5"
    assert str(dividend.additional_operation(NumberList("1" * 4999 + "2"))) == "1" * 5000


@pytest.mark.parametrize(
    "empty_it",
    [
        lambda number: number.remove_at(0),
        lambda number: number.remove(15),
        lambda number: number.remove_all([15]),
        lambda number: number.retain_all([]),
    ],
)
def test_emptying_a_hexadecimal_list_resets_radix(empty_it) -> None:
    number = NumberList("15").change_scale()
    assert str(number) == "F"

    empty_it(number)

    assert number.is_empty()
    assert number.radix == 10
    number.append(1)
    number.append(0)
    assert number.to_int() == 10


def test_cursor_removing_last_digit_resets_radix() -> None:
    number = NumberList("A", radix=16)
    cursor = number.list_iterator()

    cursor.next()
    cursor.remove()

    assert number.radix == 10


def test_empty_list_is_always_decimal() -> None:
    assert NumberList(None, radix=16).radix == 10
    assert NumberList("-F", radix=16).radix == 10
    assert NumberList("F", radix=16).radix == 16
