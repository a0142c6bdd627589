from decimal import Decimal

import pytest

from quiniela.services.bet_lines import BetLine, compute_total, format_money, parse_amount, valid_lines


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10.5", Decimal("10.5")),
        (" 7 ", Decimal("7")),
        (3, Decimal("3")),
        ("", Decimal("0")),
        ("abc", Decimal("0")),
        ("NaN", Decimal("0")),
        ("Infinity", Decimal("0")),
        ("-4", Decimal("0")),
        (None, Decimal("0")),
        ("10,5", Decimal("10")),
        ("10.5$", Decimal("10.5")),
        ("  2.50 pesos", Decimal("2.50")),
        (".5", Decimal("0.5")),
        ("1e2", Decimal("100")),
        ("$10", Decimal("0")),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


def test_line_needs_all_fields():
    assert BetLine("1234", "5", "10").is_valid
    assert not BetLine("", "5", "10").is_valid
    assert not BetLine("1234", " ", "10").is_valid
    assert not BetLine("1234", "5", "").is_valid


def test_valid_lines_keep_input_order():
    lines = [
        BetLine("12", "1", "5"),
        BetLine("", "", ""),
        BetLine("34", "2", "x"),
    ]
    assert [line.number for line in valid_lines(lines)] == ["12", "34"]


def test_total_multiplies_by_selected_lotteries():
    lines = [BetLine("12", "1", "10.5"), BetLine("34", "2", "4.25")]
    assert compute_total(lines, ["NACION", "PROVIN"]) == Decimal("29.50")


def test_total_counts_unparsable_amount_as_zero():
    lines = [BetLine("12", "1", "10"), BetLine("34", "2", "diez")]
    assert compute_total(lines, ["NACION", "PROVIN", "SANTA"]) == Decimal("30")


def test_total_ignores_repeated_lottery_codes():
    lines = [BetLine("12", "1", "10")]
    assert compute_total(lines, ["NACION", "NACION"]) == Decimal("10")


def test_total_without_lotteries_is_zero():
    assert compute_total([BetLine("12", "1", "10")], []) == Decimal("0")


def test_from_mapping_accepts_numbers():
    line = BetLine.from_mapping({"numero": 1234, "posicion": 5, "importe": 0})
    assert line == BetLine("1234", "5", "0")
    assert line.is_valid


def test_format_money_rounds_half_up():
    assert format_money(Decimal("10.5")) == "10.50"
    assert format_money(Decimal("0.125")) == "0.13"
    assert format_money(Decimal("0")) == "0.00"


def test_total_uses_leading_number_of_amount():
    lines = [BetLine("12", "1", "10,5"), BetLine("34", "2", "4.5$")]
    assert compute_total(lines, ["NACION", "PROVIN"]) == Decimal("29")
